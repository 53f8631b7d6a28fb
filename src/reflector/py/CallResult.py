#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import typing

from .Obj import Obj


class CallResult(Obj):
    """Outcome of Method.call().

    result holds one entry per declared return value, in order. A
    method that reports failure by returning an exception as its last
    value (instead of raising) is still a successful call; is_error()
    is how the caller sees it.
    """

    def __init__(self, result, out_types):
        super().__init__()
        self.result = list(result)
        self._out_types = list(out_types)

    @staticmethod
    def make(ret, out_types, qname="method", unpack=None):
        """Box a raw return value according to the declared return types.

        With unpack (default: more than one declared value) ret must be a
        tuple holding one item per declared type; otherwise ret is the
        single value.

        Raises:
            CastErr: an unpacked return did not match the declared count
        """
        n = len(out_types)
        if n == 0:
            return CallResult([], out_types)
        if unpack is None:
            unpack = n > 1
        if not unpack:
            return CallResult([ret], out_types)
        if not isinstance(ret, (tuple, list)) or len(ret) != n:
            from .Err import CastErr
            got = len(ret) if isinstance(ret, (tuple, list)) else 1
            raise CastErr.make(f"{qname} declares {n} return values, returned {got}")
        return CallResult(ret, out_types)

    def out_types(self):
        return list(self._out_types)

    def is_error(self):
        """Return true if the trailing value is declared as, and holds, an error."""
        if not self._out_types or not self.result:
            return False
        if not is_error_type(self._out_types[-1]):
            return False
        return isinstance(self.result[-1], BaseException)

    def error(self):
        """The trailing error value, or None."""
        return self.result[-1] if self.is_error() else None

    def __len__(self):
        return len(self.result)

    def __iter__(self):
        return iter(self.result)

    def __getitem__(self, i):
        return self.result[i]

    def to_str(self):
        return f"CallResult({self.result!r})"


def is_error_type(hint):
    """Return if hint is an exception class, or an Optional/Union of them."""
    from .Kind import is_union_origin
    from .Type import strip_annotated
    tp = strip_annotated(hint)
    if isinstance(tp, type):
        return issubclass(tp, BaseException)
    if is_union_origin(typing.get_origin(tp)):
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        return len(args) > 0 and all(is_error_type(a) for a in args)
    return False
