#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Err(Exception, Obj):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        self._msg = msg
        self._cause = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        # Empty string when no message provided, not None
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def to_str(self):
        return self.msg()

    def __str__(self):
        return self.to_str()


class ParseErr(Err):
    """Malformed tag string"""

    @staticmethod
    def make_str(what, s):
        return ParseErr(f"Invalid {what}: '{s}'")


class CastErr(Err):
    """Value does not fit the declared type of a field or parameter"""
    pass


class ArgErr(Err):
    """Argument list does not match a method signature"""
    pass


class ReadonlyErr(Err):
    """Field exists and is addressable but cannot be written"""
    pass


class UnaddressableErr(Err):
    """Mutation or call through an Object not built from a pointer"""
    pass


class UnknownFieldErr(Err):
    """Field name does not resolve"""
    pass


class UnknownMethodErr(Err):
    """Method name does not resolve in the visible method set"""
    pass
