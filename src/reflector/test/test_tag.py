#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""Tests for tag string parsing."""

import logging

import pytest

from reflector import Env, Log, LogLevel, ParseErr, TagParser


class TestTagParser:

    def test_parse(self):
        assert TagParser.parse('tag:"be" tag2:"1,2,3"') == {"tag": "be", "tag2": "1,2,3"}

    def test_parse_empty(self):
        assert TagParser.parse("") == {}
        assert TagParser.parse(None) == {}
        assert TagParser.parse("   ") == {}

    def test_order_is_kept(self):
        assert list(TagParser.parse('b:"1" a:"2" c:"3"')) == ["b", "a", "c"]

    def test_any_whitespace_separates(self):
        assert TagParser.parse('a:"1"\tb:"2"\n c:"3"') == {"a": "1", "b": "2", "c": "3"}

    def test_first_duplicate_wins(self):
        assert TagParser.parse('a:"1" a:"2"') == {"a": "1"}

    def test_escapes(self):
        assert TagParser.parse(r'a:"x\"y" b:"c\\d" c:"é"') == {
            "a": 'x"y', "b": "c\\d", "c": "é",
        }

    def test_string_literal_escapes(self):
        assert TagParser.parse(r'a:"\x41" b:"\101" c:"\u00e9" d:"\U0001F600" e:"\v\a"') == {
            "a": "A", "b": "A", "c": "\u00e9", "d": "\U0001F600", "e": "\v\a",
        }

    def test_invalid_escapes(self):
        for raw in (r'a:"\'"', r'a:"\x4"', r'a:"\xzz"', r'a:"\18"', r'a:"\400"',
                    r'a:"\ud800"', r'a:"\U00110000"', r'a:"\q"'):
            assert TagParser.parse(raw) == {}
            with pytest.raises(ParseErr):
                TagParser.parse(raw, strict=True)

    def test_empty_value(self):
        assert TagParser.parse('a:""') == {"a": ""}

    def test_malformed_stops(self):
        assert TagParser.parse('a:"1" b:2 c:"3"') == {"a": "1"}
        assert TagParser.parse('a:"1" b:"unterminated') == {"a": "1"}
        assert TagParser.parse('a "1"') == {}

    def test_malformed_strict(self):
        with pytest.raises(ParseErr):
            TagParser.parse('a:"1" b:2', strict=True)

    def test_malformed_strict_from_config(self):
        Env.cur().set_config("strictTags", "true")

        with pytest.raises(ParseErr):
            TagParser.parse('a:"1" b:2')

    def test_malformed_is_logged(self, caplog):
        Log.get("reflector").level(LogLevel.from_str("debug"))
        caplog.set_level(logging.DEBUG, logger="reflector")

        TagParser.parse('a:"1" b:2')

        assert "Malformed tag" in caplog.text

    def test_lookup(self):
        assert TagParser.lookup('json:"name"', "json") == "name"
        assert TagParser.lookup('json:"name"', "xml") == ""

    def test_expand(self):
        assert TagParser.expand("1,2,3") == ["1", "2", "3"]
        assert TagParser.expand("a,,b") == ["a", "", "b"]
        assert TagParser.expand("") == []
