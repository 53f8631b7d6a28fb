#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Slot import Slot
from .Tag import TagParser


class Field(Slot):
    """Field accessor - one named field reachable from an Object.

    Fields are created either:
    1. By the enumeration views Object.fields(), fields_flattened()
       and fields_all(), one per listed descriptor
    2. By Object.field(name), which resolves the name over fields_all()
       with the shallowest embedding winning

    A Field whose name did not resolve is still returned; metadata
    queries on it report invalid sentinels, tag queries raise.
    """

    def __init__(self, parent, name, fdef=None):
        """Create a Field accessor.

        Args:
            parent: Owning Object
            name: Name asked for
            fdef: Resolved FieldDef, None if the name does not resolve
        """
        super().__init__(parent, name)
        self._def = fdef

    def is_field(self):
        return True

    def valid(self):
        """Return true if the field resolves."""
        return self._def is not None

    def is_valid(self):
        return self.valid()

    def kind(self):
        """Kind of the declared type, Kind.invalid() if absent."""
        from .Kind import Kind
        if self._def is None:
            return Kind.invalid()
        return self._def.kind()

    def type(self):
        """Declared type with Annotated metadata removed, None if absent."""
        if self._def is None:
            return None
        return self._def.type()

    def hint(self):
        """Declared type hint as written, None if absent."""
        if self._def is None:
            return None
        return self._def.hint()

    def anonymous(self):
        """Return true if this is an embedded field."""
        return self._def is not None and self._def.anonymous()

    def depth(self):
        return self._def.depth() if self._def is not None else -1

    def index(self):
        """Attribute path from the Object's value to this field."""
        return self._def.index() if self._def is not None else ()

    #########################################################################
    # Value access
    #########################################################################

    def get(self):
        """Get the field's current value.

        Returns None when the field does not resolve, the Object was
        built from a bare type, or an embedding on the path is unset.
        Check valid() first to tell those apart from a stored None.
        """
        if self._def is None or not self._parent.has_value():
            return None
        target = self._parent.value()
        for attr in self._def.index():
            if target is None:
                return None
            target = getattr(target, attr, None)
        return target

    def set_(self, val):
        """Assign val to the field of the Object's value.

        Raises:
            UnknownFieldErr: the field does not resolve
            UnaddressableErr: the Object was not built from a Ptr
            ReadonlyErr: private field or frozen instance
            CastErr: val does not fit the declared type
        """
        from .Err import CastErr, ReadonlyErr, UnaddressableErr
        from .Type import fits, type_name

        self._check_valid()
        if not self._parent.is_ptr() or not self._parent.has_value():
            raise UnaddressableErr.make(f"Cannot set field {self._name}: unaddressable value")
        if self._name.startswith("_"):
            raise ReadonlyErr.make(f"Cannot set unexported field {self._name}")
        if not fits(val, self._def.hint()):
            raise CastErr.make(
                f"Cannot assign {type(val).__name__} to field {self._name} of type {type_name(self._def.hint())}")

        holder = self._parent.value()
        for attr in self._def.index()[:-1]:
            holder = getattr(holder, attr, None)
            if holder is None:
                raise UnaddressableErr.make(f"Cannot set field {self._name}: embedded {attr} is None")
        try:
            setattr(holder, self._name, val)
        except AttributeError as e:
            # frozen dataclasses, __slots__ without the name, read-only properties
            raise ReadonlyErr.make(f"Cannot set field {self._name}: {e}", e)

    #########################################################################
    # Tags
    #########################################################################

    def tag_str(self):
        """Raw tag string, "" if the field has none or does not resolve."""
        return self._def.tag() if self._def is not None else ""

    def tag(self, key):
        """Get the raw value for one tag key, "" if the key is absent."""
        self._check_valid()
        return TagParser.lookup(self._def.tag(), key)

    def tags(self):
        """Get every key -> value pair of the field's tag."""
        self._check_valid()
        return TagParser.parse(self._def.tag())

    def tag_expanded(self, key):
        """Get the value for key split on commas, [] if absent."""
        return TagParser.expand(self.tag(key))

    def _check_valid(self):
        if self._def is None:
            from .Err import UnknownFieldErr
            raise UnknownFieldErr.make(f"Invalid field {self._name}")

    def to_str(self):
        if self._def is None:
            return f"{self.qname()} (invalid)"
        return self.qname()
