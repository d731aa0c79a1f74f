from abc import ABC, abstractmethod
from typing import Any

from consolelog.core.host.attrs import AttrsLike
from consolelog.core.schema.level import LogLevel


class LevelMethods(ABC):
    """Per-level shorthands over ``log``.

    The plain form logs ``msg`` verbatim, the ``f`` form %-formats it with
    ``args`` and the ``m`` form also attaches attributes.
    """

    @abstractmethod
    def log(self, level: LogLevel, attrs: AttrsLike, msg: str, *args: Any) -> None: ...

    def dbg(self, msg: str) -> None:
        self.log(LogLevel.DEBUG, None, msg)

    def dbgf(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.DEBUG, None, msg, *args)

    def dbgm(self, attrs: AttrsLike, msg: str, *args: Any) -> None:
        self.log(LogLevel.DEBUG, attrs, msg, *args)

    def info(self, msg: str) -> None:
        self.log(LogLevel.INFO, None, msg)

    def infof(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.INFO, None, msg, *args)

    def infom(self, attrs: AttrsLike, msg: str, *args: Any) -> None:
        self.log(LogLevel.INFO, attrs, msg, *args)

    def warn(self, msg: str) -> None:
        self.log(LogLevel.WARNING, None, msg)

    def warnf(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.WARNING, None, msg, *args)

    def warnm(self, attrs: AttrsLike, msg: str, *args: Any) -> None:
        self.log(LogLevel.WARNING, attrs, msg, *args)

    def err(self, msg: str) -> None:
        self.log(LogLevel.ERROR, None, msg)

    def errf(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.ERROR, None, msg, *args)

    def errm(self, attrs: AttrsLike, msg: str, *args: Any) -> None:
        self.log(LogLevel.ERROR, attrs, msg, *args)

    def fatal(self, msg: str) -> None:
        self.log(LogLevel.FATAL, None, msg)

    def fatalf(self, msg: str, *args: Any) -> None:
        self.log(LogLevel.FATAL, None, msg, *args)

    def fatalm(self, attrs: AttrsLike, msg: str, *args: Any) -> None:
        self.log(LogLevel.FATAL, attrs, msg, *args)
