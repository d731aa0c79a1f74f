from enum import IntEnum

from consolelog.core.exceptions import UnknownLevelError


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    FATAL = 50
    # Filter value only: a host set to NONE drops every record.
    NONE = 100

    @property
    def level_name(self) -> str:
        return _LEVEL_NAMES[self]


_LEVEL_NAMES = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARNING: "warn",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
    LogLevel.NONE: "none",
}

_LEVELS_BY_NAME = {name: level for level, name in _LEVEL_NAMES.items()}
_LEVELS_BY_NAME["warning"] = LogLevel.WARNING


def parse_level(name: str) -> LogLevel:
    level = _LEVELS_BY_NAME.get(name.strip().lower())
    if level is None:
        raise UnknownLevelError(f"Unknown log level {name!r}", name)
    return level
