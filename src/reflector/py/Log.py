#
# Log - Logging support for reflector
#
import logging

from .Obj import Obj


class LogLevel(Obj):
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}

    def __init__(self, name, ordinal, py_level):
        self._name = name
        self._ordinal = ordinal
        self._py_level = py_level

    @staticmethod
    def from_str(name, checked=True):
        """Parse LogLevel from string"""
        name_lower = name.lower()
        if name_lower in LogLevel._levels:
            return LogLevel._levels[name_lower]
        if checked:
            from .Err import ParseErr
            raise ParseErr(f"Unknown log level: {name}")
        return None

    @staticmethod
    def vals():
        return [LogLevel._debug, LogLevel._info, LogLevel._warn, LogLevel._err, LogLevel._silent]

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def to_str(self):
        return self._name


LogLevel._debug = LogLevel("debug", 0, logging.DEBUG)
LogLevel._info = LogLevel("info", 1, logging.INFO)
LogLevel._warn = LogLevel("warn", 2, logging.WARNING)
LogLevel._err = LogLevel("err", 3, logging.ERROR)
LogLevel._silent = LogLevel("silent", 4, logging.CRITICAL + 10)
for _lvl in LogLevel.vals():
    LogLevel._levels[_lvl.name()] = _lvl


class Log(Obj):
    """
    Log provides logging functionality on top of the logging module.
    """

    _logs = {}

    def __init__(self, name):
        self._name = name
        self._level = None
        self._py_logger = logging.getLogger(name)

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        log = Log._logs.get(name)
        if log is None:
            log = Log(name)
            Log._logs[name] = log
        return log

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(new_level)"""
        if value is None:
            if self._level is None:
                from .Env import Env
                self._level = LogLevel.from_str(Env.cur().config("logLevel", "info"), False) or LogLevel._info
            return self._level
        self._level = value
        return None

    def is_enabled(self, level):
        return level._ordinal >= self.level()._ordinal

    def is_debug(self):
        return self.is_enabled(LogLevel._debug)

    def debug(self, msg, err=None):
        if self.is_enabled(LogLevel._debug):
            self._log(LogLevel._debug, msg, err)

    def info(self, msg, err=None):
        if self.is_enabled(LogLevel._info):
            self._log(LogLevel._info, msg, err)

    def warn(self, msg, err=None):
        if self.is_enabled(LogLevel._warn):
            self._log(LogLevel._warn, msg, err)

    def err(self, msg, err=None):
        if self.is_enabled(LogLevel._err):
            self._log(LogLevel._err, msg, err)

    def _log(self, level, msg, err):
        self._py_logger.log(level._py_level, msg, exc_info=err)

    def to_str(self):
        return self._name
