#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# reflector - runtime struct introspection

# Base types
from .Obj import Obj
from .Kind import Kind
from .Ptr import Ptr, ptr, pointer_receiver

# Tags and struct shape
from .Tag import Tag, TagParser
from .Type import Type, Embed, Embedded

# Reflection
from .Object import Object
from .Slot import Slot
from .Field import Field
from .Method import Method
from .Param import Param
from .CallResult import CallResult

# Environment
from .Env import Env
from .Log import Log, LogLevel

# Errors
from .Err import (
    Err, ArgErr, CastErr, ParseErr, ReadonlyErr,
    UnaddressableErr, UnknownFieldErr, UnknownMethodErr,
)


def new(val):
    """Reflect over val; pass ptr(val) to allow set_() and pointer-receiver calls."""
    return Object.make(val)


def new_from_type(cls):
    """Reflect over a bare type (metadata only)."""
    return Object.make_from_type(cls)
