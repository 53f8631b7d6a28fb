#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

r"""
Field tags: a raw metadata string of the form

    key:"value" key2:"value2"

attached to a field annotation, parsed on demand into key/value pairs.

Values use Go string literal escapes: \a \b \f \n \r \t \v \\ \",
\xhh, three-digit octal \ooo, \uhhhh and \Uhhhhhhhh. Byte escapes (\x,
\ooo) decode to the code point of the same value. \' is rejected, as
are surrogate and out-of-range code points.
"""

from .Obj import Obj
from .Log import Log

log = Log.get("reflector")


class Tag(Obj):
    """Tag marker carried in ``Annotated[T, Tag('json:"name"')]``."""

    def __init__(self, raw=""):
        super().__init__()
        self._raw = raw

    def raw(self):
        return self._raw

    def equals(self, that):
        return isinstance(that, Tag) and that._raw == self._raw

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return hash(self._raw)

    def to_str(self):
        return f"Tag({self._raw!r})"


class TagParser:
    """Parser for raw tag strings."""

    _ESCAPES = {
        'b': '\b',
        'f': '\f',
        'n': '\n',
        'r': '\r',
        't': '\t',
        'a': '\a',
        'v': '\v',
        '"': '"',
        '\\': '\\',
    }

    _HEX_WIDTHS = {'x': 2, 'u': 4, 'U': 8}

    def __init__(self, raw):
        self.raw = raw if raw is not None else ""
        self.pos = 0

    @staticmethod
    def parse(raw, strict=None):
        """Parse a raw tag string into an ordered key -> value dict.

        Parsing stops at the first malformed pair; the pairs read so far
        are returned. With strict (default: the strictTags config switch)
        a ParseErr is raised instead.
        """
        if strict is None:
            from .Env import Env
            strict = Env.cur().config_bool("strictTags", False)
        return TagParser(raw)._parse(strict)

    @staticmethod
    def lookup(raw, key):
        """Get the value for key, or "" if absent."""
        return TagParser.parse(raw).get(key, "")

    @staticmethod
    def expand(value):
        """Split a tag value on commas; empty value gives an empty list."""
        if not value:
            return []
        return value.split(",")

    def _parse(self, strict):
        tags = {}
        while True:
            self._skip_space()
            if self._eof():
                break
            try:
                key = self._key()
                value = self._value()
            except ValueError as e:
                if strict:
                    from .Err import ParseErr
                    raise ParseErr.make(f"Invalid tag {self.raw!r}: {e}", e)
                log.debug(f"Malformed tag {self.raw!r}: {e}")
                break
            # first occurrence wins
            tags.setdefault(key, value)
        return tags

    def _key(self):
        start = self.pos
        while not self._eof():
            c = self.raw[self.pos]
            if c <= ' ' or c == ':' or c == '"' or c == '\x7f':
                break
            self.pos += 1
        if self.pos == start:
            raise ValueError(f"expected key at {start}")
        key = self.raw[start:self.pos]
        if self._eof() or self.raw[self.pos] != ':':
            raise ValueError(f"expected ':' after {key!r}")
        self.pos += 1
        if self._eof() or self.raw[self.pos] != '"':
            raise ValueError(f"expected '\"' after {key!r}:")
        return key

    def _value(self):
        """Parse quoted string starting at the opening quote."""
        self.pos += 1
        s = []
        while True:
            if self._eof():
                raise ValueError("unterminated value")
            c = self.raw[self.pos]
            if c == '"':
                self.pos += 1
                break
            if c == '\\':
                s.append(self._escape())
            else:
                s.append(c)
                self.pos += 1
        return ''.join(s)

    def _escape(self):
        self.pos += 1
        if self._eof():
            raise ValueError("unterminated escape")
        c = self.raw[self.pos]
        if c in TagParser._ESCAPES:
            self.pos += 1
            return TagParser._ESCAPES[c]
        if c in TagParser._HEX_WIDTHS:
            width = TagParser._HEX_WIDTHS[c]
            code = self._digits(self.pos + 1, width, "0123456789abcdefABCDEF", 16, c)
            if c != 'x' and (code > 0x10FFFF or 0xD800 <= code <= 0xDFFF):
                raise ValueError(f"invalid code point in \\{c} escape")
            self.pos += 1 + width
            return chr(code)
        if '0' <= c <= '7':
            code = self._digits(self.pos, 3, "01234567", 8, c)
            if code > 0xFF:
                raise ValueError("octal escape out of range")
            self.pos += 3
            return chr(code)
        raise ValueError(f"invalid escape \\{c}")

    def _digits(self, start, width, allowed, base, c):
        digits = self.raw[start:start + width]
        if len(digits) != width or any(d not in allowed for d in digits):
            raise ValueError(f"invalid \\{c} escape {digits!r}")
        return int(digits, base)

    def _skip_space(self):
        while not self._eof() and self.raw[self.pos].isspace():
            self.pos += 1

    def _eof(self):
        return self.pos >= len(self.raw)
