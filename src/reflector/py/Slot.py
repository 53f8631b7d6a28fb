#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Slot(Obj):
    """Base class for Field and Method accessors.

    A slot is bound to the Object it was obtained from and to the name
    it was looked up by. The name is kept even when it does not resolve,
    so an invalid slot can still report what was asked for.
    """

    def __init__(self, parent, name):
        super().__init__()
        self._parent = parent
        self._name = name

    def parent(self):
        """Get owning Object."""
        return self._parent

    def name(self):
        """Get slot name."""
        return self._name

    def qname(self):
        """Get qualified name (Type.slotName)."""
        if self._parent is not None:
            return f"{self._parent.underlying_type_name()}.{self._name}"
        return self._name

    def is_field(self):
        return False

    def is_method(self):
        return False

    def is_valid(self):
        return False

    def to_str(self):
        return self.qname()
