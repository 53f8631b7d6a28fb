#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""Shared fixtures for reflector tests."""

import pytest

from reflector import Env, Log


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate every test from REFLECTOR_* settings and config overrides."""
    for key in list(Env.cur().vars()):
        if key.startswith("REFLECTOR_"):
            monkeypatch.delenv(key, raising=False)
    Env.cur()._overrides.clear()
    Log.get("reflector")._level = None
    yield
    Env.cur()._overrides.clear()
    Log.get("reflector")._level = None
