#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import copy
import typing

from .Obj import Obj
from .Log import Log
from .Ptr import Ptr

log = Log.get("reflector")


class Object(Obj):
    """Object wraps a caller value for reflection.

    Objects are created:
    1. From a value via make(val): the Object keeps a private deep copy,
       fields can be read but not set, pointer-receiver methods are hidden
    2. From a Ptr via make(ptr(val)): storage is shared with the caller,
       fields can be set and every method is visible
    3. From a bare type via make_from_type(cls): metadata only, get()
       reports None and set_()/call() raise

    Every listing is computed on demand from the underlying class.
    """

    def __init__(self, val=None, is_ptr=False, has_value=True, cls=None):
        super().__init__()
        self._val = val
        self._is_ptr = is_ptr
        self._has_value = has_value
        self._cls = cls if cls is not None else type(val)

    @staticmethod
    def make(val):
        """Wrap a value, or a Ptr to one."""
        if isinstance(val, Ptr):
            return Object(val, True, True, type(val.val()))
        return Object(_private_copy(val), False, True, type(val))

    @staticmethod
    def make_from_type(cls):
        """Wrap a bare type; Ptr[T] behaves like an Object built from a Ptr to T."""
        if typing.get_origin(cls) is Ptr:
            return Object(None, True, False, typing.get_args(cls)[0])
        return Object(None, False, False, cls)

    #########################################################################
    # Identity
    #########################################################################

    def is_ptr(self):
        """Return true if built from a Ptr."""
        return self._is_ptr

    def has_value(self):
        """Return false if built from a bare type."""
        return self._has_value

    def value(self):
        """The underlying value: pointee, private copy, or None."""
        if not self._has_value:
            return None
        if self._is_ptr:
            return self._val.val()
        return self._val

    def type(self):
        """Declared static type; Ptr[T] when built from a Ptr."""
        if self._is_ptr:
            return Ptr[self._cls]
        return self._cls

    def kind(self):
        from .Kind import Kind
        if self._is_ptr:
            return Kind.ptr()
        return Kind.of_type(self._cls)

    def underlying_type(self):
        """Type that fields and methods are resolved on."""
        return self._cls

    def underlying_type_name(self):
        return getattr(self._cls, "__name__", str(self._cls))

    def underlying_kind(self):
        from .Kind import Kind
        return Kind.of_type(self._cls)

    def is_struct_or_ptr_to_struct(self):
        from .Kind import Kind
        return self.underlying_kind() == Kind.struct()

    def rtype(self):
        """Reflection Type of the underlying class."""
        from .Type import Type
        return Type.of(self._cls)

    #########################################################################
    # Fields
    #########################################################################

    def field(self, name):
        """Get accessor for the named field (possibly invalid)."""
        from .Field import Field
        return Field(self, name, self.rtype().field(name))

    def fields(self):
        """Top-level fields; an embedded struct is listed as one field."""
        return self._wrap_fields(self.rtype().fields())

    def fields_flattened(self):
        """Fields with embedded structs replaced by their own fields."""
        return self._wrap_fields(self.rtype().fields_flattened())

    def fields_all(self):
        """Embedded struct fields and their own fields, depth-first."""
        return self._wrap_fields(self.rtype().fields_all())

    def find_double_fields(self):
        """Field names declared more than once along the embeddings."""
        return self.rtype().find_double_fields()

    def _wrap_fields(self, defs):
        from .Field import Field
        return [Field(self, f.name(), f) for f in defs]

    #########################################################################
    # Methods
    #########################################################################

    def method(self, name):
        """Get accessor for the named method (possibly invalid)."""
        from .Method import Method
        return Method(self, name, self.rtype().method(name, self._is_ptr))

    def methods(self):
        """Visible method set sorted by name."""
        from .Method import Method
        return [Method(self, m.name(), m) for m in self.rtype().methods(self._is_ptr)]

    def receiver(self, mdef):
        """Resolve the receiver a method runs against.

        Value-receiver methods get a copy, so they never write through
        to the Object's value.
        """
        from .Err import UnaddressableErr
        if not self._has_value:
            raise UnaddressableErr.make(f"Cannot call {mdef.name()}: no receiver, Object built from a type")
        target = self.value()
        for attr in mdef.index():
            target = getattr(target, attr, None)
            if target is None:
                raise UnaddressableErr.make(f"Cannot call {mdef.name()}: embedded {attr} is None")
        if mdef.is_pointer_receiver():
            return target
        return _private_copy(target)

    def to_str(self):
        from .Type import type_name
        if self._is_ptr:
            return f"Object(*{type_name(self._cls)})"
        return f"Object({type_name(self._cls)})"


def _private_copy(val):
    try:
        return copy.deepcopy(val)
    except (TypeError, copy.Error) as e:
        # locks, sockets and other uncopyable members
        log.debug(f"Deep copy of {type(val).__name__} failed, using shallow copy: {e}")
        return copy.copy(val)
