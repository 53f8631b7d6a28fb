#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import dataclasses
import inspect
import typing

from .Obj import Obj
from .Log import Log
from .Tag import Tag

log = Log.get("reflector")


class Embedded(Obj):
    """Marker for an anonymous field: ``Annotated[Address, Embedded()]``."""

    def __eq__(self, other):
        return isinstance(other, Embedded)

    def __hash__(self):
        return hash(Embedded)

    def to_str(self):
        return "Embedded()"


class Embed:
    """``Embed[Address]`` is shorthand for ``Annotated[Address, Embedded()]``.

    An embedded field delegates its fields (and methods) to the
    enclosing struct. The field is still stored under its own name.
    """

    def __class_getitem__(cls, item):
        return typing.Annotated[item, Embedded()]


def strip_annotated(tp):
    """Remove any Annotated[...] wrapper from a type hint."""
    while typing.get_origin(tp) is typing.Annotated:
        tp = tp.__origin__
    return tp


def annotated_extras(tp):
    """Metadata carried by Annotated[...] wrappers, outermost last."""
    extras = []
    while typing.get_origin(tp) is typing.Annotated:
        extras = list(tp.__metadata__) + extras
        tp = tp.__origin__
    return extras


def _is_class_var(hint):
    if hint is typing.ClassVar:
        return True
    if typing.get_origin(strip_annotated(hint)) is typing.ClassVar:
        return True
    return isinstance(hint, dataclasses.InitVar)


def _is_library_class(klass):
    # builtins and typing scaffolding contribute no fields or methods
    return klass is object or klass.__module__ in ("builtins", "typing", "abc")


class FieldDef(Obj):
    """Static descriptor of one struct field.

    index is the attribute path from the outermost struct, depth is
    the embedding depth (0 for a top-level field).
    """

    def __init__(self, name, hint, tag="", anonymous=False, index=None, depth=0, owner=None):
        super().__init__()
        self._name = name
        self._hint = hint
        self._type = strip_annotated(hint)
        self._tag = tag
        self._anonymous = anonymous
        self._index = index if index is not None else (name,)
        self._depth = depth
        self._owner = owner

    def name(self):
        return self._name

    def hint(self):
        return self._hint

    def type(self):
        return self._type

    def tag(self):
        return self._tag

    def anonymous(self):
        return self._anonymous

    def index(self):
        return self._index

    def depth(self):
        return self._depth

    def owner(self):
        """Declaring struct class."""
        return self._owner

    def kind(self):
        from .Kind import Kind
        return Kind.of_type(self._type)

    def is_embedded_struct(self):
        from .Kind import Kind
        return self._anonymous and self.kind() == Kind.struct()

    def nested(self, prefix, depth):
        """Copy of this descriptor re-rooted under an embedding path."""
        return FieldDef(self._name, self._hint, self._tag, self._anonymous,
                        tuple(prefix) + (self._name,), depth, self._owner)

    def to_str(self):
        return ".".join(self._index)


class MethodDef(Obj):
    """Static descriptor of one method in a method set.

    index is the attribute path to the embedded receiver ((), for
    methods declared on the struct itself).
    """

    def __init__(self, name, func, index=(), depth=0, owner=None):
        super().__init__()
        from .Ptr import is_pointer_receiver
        self._name = name
        self._func = func
        self._index = tuple(index)
        self._depth = depth
        self._owner = owner
        self._pointer_receiver = is_pointer_receiver(func)

    def name(self):
        return self._name

    def func(self):
        return self._func

    def index(self):
        return self._index

    def depth(self):
        return self._depth

    def owner(self):
        return self._owner

    def is_pointer_receiver(self):
        return self._pointer_receiver

    def is_promoted(self):
        return len(self._index) > 0

    def to_str(self):
        return ".".join(self._index + (self._name,))


class Type(Obj):
    """Type wraps a Python class for field and method reflection.

    Nothing is cached: every Type is built fresh from the class and
    every listing is recomputed from the class's annotations.
    """

    def __init__(self, cls):
        super().__init__()
        self._cls = cls

    @staticmethod
    def of(cls):
        return Type(cls)

    def cls(self):
        return self._cls

    def name(self):
        return getattr(self._cls, "__name__", str(self._cls))

    def qname(self):
        module = getattr(self._cls, "__module__", None)
        qualname = getattr(self._cls, "__qualname__", self.name())
        return f"{module}.{qualname}" if module else qualname

    def kind(self):
        from .Kind import Kind
        return Kind.of_type(self._cls)

    def is_struct(self):
        from .Kind import Kind
        return self.kind() == Kind.struct()

    def to_str(self):
        return self.qname()

    def __eq__(self, other):
        return isinstance(other, Type) and other._cls is self._cls

    def __hash__(self):
        return hash(self._cls)

    #########################################################################
    # Fields
    #########################################################################

    def declared(self):
        """Top-level fields in declaration order (base classes first)."""
        if not self.is_struct():
            return []
        dc_fields = {}
        if dataclasses.is_dataclass(self._cls):
            dc_fields = {f.name: f for f in dataclasses.fields(self._cls)}

        result = []
        for name, (hint, owner) in self._hints().items():
            if _is_class_var(hint):
                continue
            extras = annotated_extras(hint)
            anonymous = any(isinstance(x, Embedded) for x in extras)
            tag = ""
            for x in extras:
                if isinstance(x, Tag):
                    tag = x.raw()
                    break
            else:
                dc_field = dc_fields.get(name)
                if dc_field is not None:
                    tag = dc_field.metadata.get("tag", "")
            result.append(FieldDef(name, hint, tag, anonymous, (name,), 0, owner))
        return result

    def fields(self):
        """Top-level fields only; an embedded struct is one field."""
        return self.declared()

    def fields_flattened(self):
        """Embedded structs replaced in place by their own fields."""
        out = []
        self._walk(self._cls, (), 0, out, False, {self._cls})
        return out

    def fields_all(self):
        """Embedded struct field followed by its fields, depth-first."""
        out = []
        self._walk(self._cls, (), 0, out, True, {self._cls})
        return out

    def find_double_fields(self):
        """Names listed more than once by fields_all(), first-seen order."""
        seen = set()
        doubles = []
        for f in self.fields_all():
            name = f.name()
            if name in seen:
                if name not in doubles:
                    doubles.append(name)
            else:
                seen.add(name)
        if doubles:
            log.debug(f"{self.qname()} declares shadowed fields: {', '.join(doubles)}")
        return doubles

    def field(self, name):
        """Resolve a field by exact name: shallowest wins, then declaration order."""
        best = None
        for f in self.fields_all():
            if f.name() != name:
                continue
            if best is None or f.depth() < best.depth():
                best = f
        return best

    def _walk(self, cls, prefix, depth, out, keep_embedded, path):
        for f in Type(cls).declared():
            f = f.nested(prefix, depth)
            expand = f.is_embedded_struct() and f.type() not in path
            if keep_embedded or not expand:
                out.append(f)
            if expand:
                self._walk(f.type(), f.index(), depth + 1, out, keep_embedded, path | {f.type()})

    def _hints(self):
        """Map field name -> (hint, declaring class), base classes first."""
        owners = {}
        for klass in reversed(self._cls.__mro__):
            if _is_library_class(klass):
                continue
            for name in _own_annotations(klass):
                owners.setdefault(name, klass)

        try:
            hints = typing.get_type_hints(self._cls, include_extras=True)
        except (NameError, TypeError) as e:
            # unresolvable forward refs: fall back to the raw annotations
            log.debug(f"Cannot resolve hints for {self.qname()}: {e}")
            hints = {}
            for klass in reversed(self._cls.__mro__):
                if not _is_library_class(klass):
                    hints.update(_own_annotations(klass))

        return {name: (hint, owners.get(name, self._cls))
                for name, hint in hints.items() if name in owners}

    #########################################################################
    # Methods
    #########################################################################

    def methods(self, ptr=True):
        """Method set sorted by name.

        Declared methods shadow promoted ones and shallower embeddings
        shadow deeper ones. Pointer-receiver methods are dropped unless
        ptr is true, after shadowing is resolved.
        """
        found = {}
        level = [((), self._cls)]
        seen = {self._cls}
        depth = 0
        while level:
            next_level = []
            for prefix, cls in level:
                for name, func, owner in _own_methods(cls):
                    if name not in found:
                        found[name] = MethodDef(name, func, prefix, depth, owner)
                for f in Type(cls).declared():
                    if f.is_embedded_struct() and f.type() not in seen:
                        seen.add(f.type())
                        next_level.append((prefix + (f.name(),), f.type()))
            level = next_level
            depth += 1

        visible = [m for m in found.values() if ptr or not m.is_pointer_receiver()]
        return sorted(visible, key=lambda m: m.name())

    def method(self, name, ptr=True):
        for m in self.methods(ptr):
            if m.name() == name:
                return m
        return None


def _own_annotations(klass):
    try:
        return dict(inspect.get_annotations(klass))
    except NameError:
        return {}


def _own_methods(cls):
    """Public instance functions along the MRO, most derived first."""
    if not isinstance(cls, type):
        return []
    names = set()
    result = []
    for klass in cls.__mro__:
        if _is_library_class(klass):
            continue
        for name, raw in klass.__dict__.items():
            if name in names:
                continue
            names.add(name)
            if name.startswith("_") or not inspect.isfunction(raw):
                continue
            result.append((name, raw, klass))
    return result


def fits(val, hint):
    """Return if val may be stored under the type hint.

    Generic aliases check the container only (list[int] accepts any
    list). Hints that cannot be checked at runtime accept anything.
    """
    tp = strip_annotated(hint)
    if tp is typing.Any or tp is object or tp is inspect.Parameter.empty:
        return True
    if tp is None or tp is type(None):
        return val is None
    if isinstance(tp, (str, typing.ForwardRef, typing.TypeVar)):
        return True

    origin = typing.get_origin(tp)
    if origin is not None:
        from .Kind import Kind, is_union_origin
        if origin is typing.Literal:
            return val in typing.get_args(tp)
        if is_union_origin(origin) or not isinstance(origin, type):
            return any(fits(val, a) for a in typing.get_args(tp))
        if Kind.of_type(tp) == Kind.func():
            return callable(val)
        tp = origin

    if not isinstance(tp, type):
        return True
    # numeric tower: int fits float, int and float fit complex
    if tp is float and isinstance(val, int) and not isinstance(val, bool):
        return True
    if tp is complex and isinstance(val, (int, float)) and not isinstance(val, bool):
        return True
    try:
        return isinstance(val, tp)
    except TypeError:
        # non runtime-checkable protocols
        return True


def type_name(hint):
    tp = strip_annotated(hint)
    if isinstance(tp, type):
        return tp.__name__
    return str(tp).replace("typing.", "")
