#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import typing

from .Obj import Obj


class Param(Obj):
    """Method parameter metadata for reflection.

    Represents a single positional parameter of a method, including:
    - name: Parameter name
    - type: Declared type hint (typing.Any when unannotated)
    - hasDefault: Whether parameter has a default value
    - variadic: Whether this is a *args parameter
    """

    def __init__(self, name, param_type, has_default=False, variadic=False):
        super().__init__()
        self._name = name
        self._type = param_type
        self._has_default = has_default
        self._variadic = variadic

    @staticmethod
    def from_parameter(p):
        """Create from an inspect.Parameter."""
        ann = p.annotation
        if ann is inspect.Parameter.empty:
            ann = typing.Any
        return Param(p.name, ann,
                     p.default is not inspect.Parameter.empty,
                     p.kind == inspect.Parameter.VAR_POSITIONAL)

    def name(self):
        """Get parameter name."""
        return self._name

    def type(self):
        """Get parameter type hint."""
        return self._type

    def has_default(self):
        """Check if parameter has a default value."""
        return self._has_default

    def is_variadic(self):
        return self._variadic

    def to_str(self):
        from .Type import type_name
        prefix = "*" if self._variadic else ""
        return f"{prefix}{self._name}: {type_name(self._type)}"
