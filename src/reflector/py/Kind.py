#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import collections.abc
import types
import typing

from .Obj import Obj


class Kind(Obj):
    """
    Kind classifies the shape of a type.

    Values:
    - invalid: no type (missing field)
    - none, bool, int, float, complex, str, bytes: scalars
    - list, tuple, dict, set: builtin containers
    - func: callables
    - ptr: a Ptr cell
    - interface: Any, unions, Optional and other builtin classes
    - struct: any other user class
    """

    _vals = {}

    def __init__(self, name, ordinal):
        super().__init__()
        self._name = name
        self._ordinal = ordinal

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def to_str(self):
        return self._name

    def __repr__(self):
        return f"Kind.{self._name}"

    def __eq__(self, other):
        if isinstance(other, Kind):
            return self._ordinal == other._ordinal
        return False

    def __hash__(self):
        return hash(self._ordinal)

    @staticmethod
    def invalid():
        return Kind._vals["invalid"]

    @staticmethod
    def none():
        return Kind._vals["none"]

    @staticmethod
    def bool_():
        return Kind._vals["bool"]

    @staticmethod
    def int_():
        return Kind._vals["int"]

    @staticmethod
    def float_():
        return Kind._vals["float"]

    @staticmethod
    def str_():
        return Kind._vals["str"]

    @staticmethod
    def list_():
        return Kind._vals["list"]

    @staticmethod
    def dict_():
        return Kind._vals["dict"]

    @staticmethod
    def func():
        return Kind._vals["func"]

    @staticmethod
    def ptr():
        return Kind._vals["ptr"]

    @staticmethod
    def interface():
        return Kind._vals["interface"]

    @staticmethod
    def struct():
        return Kind._vals["struct"]

    @staticmethod
    def from_str(name, checked=True):
        kind = Kind._vals.get(name)
        if kind is None and checked:
            from .Err import ParseErr
            raise ParseErr.make_str("Kind", name)
        return kind

    @staticmethod
    def vals():
        return sorted(Kind._vals.values(), key=lambda k: k._ordinal)

    @staticmethod
    def of(obj):
        """Kind of a runtime value."""
        from .Ptr import Ptr
        if isinstance(obj, Ptr):
            return Kind.ptr()
        return Kind.of_type(type(obj))

    @staticmethod
    def of_type(tp):
        """Kind of a type or type hint.

        Annotated wrappers are stripped; generic aliases classify by
        their origin; subclasses of builtin scalars and containers keep
        the builtin kind, so ``class Celsius(float)`` is a float.
        """
        if tp is None:
            return Kind.invalid()
        from .Ptr import Ptr
        from .Type import strip_annotated
        tp = strip_annotated(tp)

        if tp is type(None):
            return Kind.none()
        if tp is typing.Any:
            return Kind.interface()

        origin = typing.get_origin(tp)
        if origin is not None:
            if is_union_origin(origin):
                return Kind.interface()
            if origin is Ptr:
                return Kind.ptr()
            if origin is collections.abc.Callable:
                return Kind.func()
            tp = origin

        if not isinstance(tp, type):
            # string forward refs, TypeVars and other hint objects
            return Kind.interface()
        if issubclass(tp, Ptr):
            return Kind.ptr()
        for base, name in Kind._BUILTINS:
            if issubclass(tp, base):
                return Kind._vals[name]
        if tp is object or tp.__module__ == "builtins":
            # range, slice, type and other builtin classes
            return Kind.interface()
        return Kind.struct()


def is_union_origin(origin):
    """Return if origin is that of a Union, Optional or X | Y hint."""
    if origin is typing.Union:
        return True
    union_type = getattr(types, "UnionType", None)
    return union_type is not None and origin is union_type


# bool must precede int
Kind._BUILTINS = [
    (bool, "bool"),
    (int, "int"),
    (float, "float"),
    (complex, "complex"),
    (str, "str"),
    ((bytes, bytearray), "bytes"),
    (list, "list"),
    (tuple, "tuple"),
    (dict, "dict"),
    ((set, frozenset), "set"),
    ((types.FunctionType, types.MethodType, types.BuiltinFunctionType), "func"),
]

for _i, _name in enumerate([
    "invalid", "none", "bool", "int", "float", "complex", "str", "bytes",
    "list", "tuple", "dict", "set", "func", "ptr", "interface", "struct",
]):
    Kind._vals[_name] = Kind(_name, _i)
