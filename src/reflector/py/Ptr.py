#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from typing import Generic, TypeVar

from .Obj import Obj

T = TypeVar("T")


class Ptr(Obj, Generic[T]):
    """Ptr is an addressable reference to a value.

    Python names already alias mutable objects, so a Ptr around a struct
    shares storage with the caller's variable. What the Ptr adds is the
    intent: an Object built from a Ptr may write fields and call methods
    that need an addressable receiver. For immutable values (ints, strs)
    the cell itself is the storage; read it back with val().
    """

    def __init__(self, val):
        super().__init__()
        self._val = val

    def val(self):
        """Get the pointee."""
        return self._val

    def set_val(self, val):
        """Replace the pointee."""
        self._val = val

    def is_nil(self):
        return self._val is None

    def equals(self, that):
        return isinstance(that, Ptr) and that._val is self._val

    def to_str(self):
        return f"&{self._val!r}"


def ptr(val):
    """Take the address of val."""
    return Ptr(val)


def pointer_receiver(func):
    """Mark a method as needing an addressable receiver.

    Such methods are only visible through an Object built from a Ptr.
    """
    func.__reflector_pointer_receiver__ = True
    return func


def is_pointer_receiver(func):
    func = getattr(func, "__func__", func)
    return getattr(func, "__reflector_pointer_receiver__", False)
