#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import typing

from .Slot import Slot


class Method(Slot):
    """Method accessor - one named method in an Object's method set.

    The method set depends on how the Object was built: from a value
    only value-receiver methods are visible, from a Ptr pointer-receiver
    methods (see pointer_receiver) are visible as well. Methods of
    embedded structs are promoted into the set unless shadowed.
    """

    def __init__(self, parent, name, mdef=None):
        """Create a Method accessor.

        Args:
            parent: Owning Object
            name: Name asked for
            mdef: Resolved MethodDef, None if not in the method set
        """
        super().__init__(parent, name)
        self._def = mdef

    def is_method(self):
        return True

    def is_valid(self):
        """Return true if the method is in the Object's method set."""
        return self._def is not None

    def is_pointer_receiver(self):
        return self._def is not None and self._def.is_pointer_receiver()

    def is_promoted(self):
        """Return true if the method comes from an embedded struct."""
        return self._def is not None and self._def.is_promoted()

    def func(self):
        """Underlying (unbound) function, None if invalid."""
        return self._def.func() if self._def is not None else None

    def signature(self):
        """inspect.Signature of the underlying function, None if invalid.

        String annotations are evaluated where possible and left as
        strings otherwise.
        """
        if self._def is None:
            return None
        func = self._def.func()
        try:
            return inspect.signature(func, eval_str=True)
        except (NameError, SyntaxError, TypeError):
            return inspect.signature(func)

    def params(self):
        """Positional parameters, receiver excluded."""
        sig = self.signature()
        if sig is None:
            return []
        from .Param import Param
        positional = (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        )
        params = [p for p in sig.parameters.values() if p.kind in positional]
        return [Param.from_parameter(p) for p in params[1:]]

    def in_types(self):
        """Parameter type hints in order, [] if invalid."""
        return [p.type() for p in self.params()]

    def out_types(self):
        """Return type hints in order, [] if invalid.

        A Tuple[...] return annotation declares one return value per
        element; None (or Tuple[()]) declares none; an unannotated method
        or a bare Tuple declares a single value.
        """
        return self._returns()[0]

    def _returns(self):
        """Declared return types and whether the raw return is unpacked."""
        sig = self.signature()
        if sig is None:
            return [], False
        ret = sig.return_annotation
        if ret is inspect.Signature.empty:
            return [typing.Any], False
        if ret is None or ret is type(None):
            return [], False
        from .Type import strip_annotated
        tp = strip_annotated(ret)
        if typing.get_origin(tp) is tuple and tp is not typing.Tuple:
            args = typing.get_args(tp)
            if args == () or args == ((),):
                return [], False
            if args[-1] is not Ellipsis:
                return list(args), True
        return [ret], False

    def call(self, *args):
        """Invoke the method on the Object's value with positional args.

        Returns:
            CallResult holding every declared return value

        Raises:
            UnknownMethodErr: name not in the method set
            UnaddressableErr: Object built from a bare type, or an
                embedded receiver on the path is None
            ArgErr: args do not bind to the signature
            CastErr: an arg does not fit its parameter's type hint

        Exceptions raised by the method itself propagate unchanged.
        """
        from .CallResult import CallResult
        from .Err import ArgErr, UnknownMethodErr

        if self._def is None:
            raise UnknownMethodErr.make(f"Invalid method {self._name}")

        receiver = self._parent.receiver(self._def)
        sig = self.signature()
        try:
            bound = sig.bind(receiver, *args)
        except TypeError as e:
            raise ArgErr.make(f"Invalid call to {self.qname()}: {e}", e)
        self._check_types(sig, bound)

        ret = self._def.func()(*bound.args, **bound.kwargs)
        out_types, unpack = self._returns()
        return CallResult.make(ret, out_types, self.qname(), unpack)

    def _check_types(self, sig, bound):
        from .Err import CastErr
        from .Type import fits, type_name

        params = list(sig.parameters.values())
        for p in params[1:]:
            if p.name not in bound.arguments or p.annotation is inspect.Parameter.empty:
                continue
            val = bound.arguments[p.name]
            vals = val if p.kind == inspect.Parameter.VAR_POSITIONAL else (val,)
            for v in vals:
                if not fits(v, p.annotation):
                    raise CastErr.make(
                        f"Invalid call to {self.qname()}: {p.name} expects "
                        f"{type_name(p.annotation)}, got {type(v).__name__}")

    def to_str(self):
        if self._def is None:
            return f"{self.qname()} (invalid)"
        params = ", ".join(p.to_str() for p in self.params())
        return f"{self.qname()}({params})"
