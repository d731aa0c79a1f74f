from types import MappingProxyType
from typing import Callable, Mapping

from consolelog.core.schema.level import LogLevel

ColorFunc = Callable[[str], str]

RESET = "\x1b[0m"

_LEVEL_CODES = {
    LogLevel.DEBUG: "\x1b[36m",
    LogLevel.INFO: "\x1b[32m",
    LogLevel.WARNING: "\x1b[33m",
    LogLevel.ERROR: "\x1b[31m",
    LogLevel.FATAL: "\x1b[1;31m",
}


def print_clean(msg: str) -> str:
    return msg


def _color_func(code: str) -> ColorFunc:
    def colorize(msg: str) -> str:
        if not msg:
            return msg
        return f"{code}{msg}{RESET}"

    return colorize


LEVEL_COLORS: Mapping[LogLevel, ColorFunc] = MappingProxyType(
    {level: _color_func(code) for level, code in _LEVEL_CODES.items()}
)


def color_func(level: LogLevel, colorize: bool = True) -> ColorFunc:
    if not colorize:
        return print_clean
    return LEVEL_COLORS.get(level, print_clean)


def color_code(level: LogLevel, colorize: bool = True) -> str:
    """Start escape for ``level``; empty when colors are off or undefined."""
    if not colorize:
        return ""
    return _LEVEL_CODES.get(level, "")


def reset_code(level: LogLevel, colorize: bool = True) -> str:
    if not colorize or level not in _LEVEL_CODES:
        return ""
    return RESET
