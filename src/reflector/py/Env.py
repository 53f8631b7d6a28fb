#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os

from .Obj import Obj


class Env(Obj):
    """Runtime environment - resolves reflector configuration.

    Lookup order for a key:
    1. In-process overrides installed via set_config()
    2. Environment variable REFLECTOR_<KEY> (camelCase key upper-snaked)
    3. etc/reflector/config.props under the working directory
    """

    _instance = None

    def __init__(self):
        self._overrides = {}

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def work_dir(self):
        """Directory config.props is resolved against."""
        return os.environ.get("REFLECTOR_HOME", os.getcwd())

    def vars(self):
        """Return the environment variables as a plain dict."""
        return dict(os.environ)

    def props(self, path):
        """Load a props file: one key=value per line, // and # comments.

        Args:
            path: File path

        Returns:
            Dict of properties (empty if the file does not exist)
        """
        props = {}
        if not os.path.isfile(path):
            return props
        with open(path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("//") or line.startswith("#"):
                    continue
                eq = line.find("=")
                if eq < 0:
                    continue
                props[line[:eq].strip()] = line[eq + 1:].strip()
        return props

    def config(self, key, def_val=None):
        """Get configuration value.

        Args:
            key: Config key, e.g. 'strictTags'
            def_val: Default value if not found

        Returns:
            Config value (string unless overridden) or default
        """
        if key in self._overrides:
            return self._overrides[key]

        env_val = os.environ.get(self._env_name(key))
        if env_val is not None:
            return env_val

        etc_file = os.path.join(self.work_dir(), "etc", "reflector", "config.props")
        val = self.props(etc_file).get(key)
        if val is not None:
            return val

        return def_val

    def config_bool(self, key, def_val=False):
        val = self.config(key, None)
        if val is None:
            return def_val
        if isinstance(val, bool):
            return val
        return str(val).strip().lower() in ("true", "yes", "on", "1")

    def set_config(self, key, val):
        """Override a config key in-process; val=None removes the override."""
        if val is None:
            self._overrides.pop(key, None)
        else:
            self._overrides[key] = val

    @staticmethod
    def _env_name(key):
        # strictTags -> REFLECTOR_STRICT_TAGS
        out = []
        for c in key:
            if c.isupper() and out:
                out.append("_")
            out.append(c.upper())
        return "REFLECTOR_" + "".join(out)
