import logging
from typing import Any

from consolelog.core.exceptions import NotInitializedError
from consolelog.core.host.adapter import LogAdapter
from consolelog.core.host.attrs import Attrs, AttrsLike, attrs_to_dict
from consolelog.core.host.methods import LevelMethods
from consolelog.core.ports.clock import Clock
from consolelog.core.ports.logger import LoggerPort
from consolelog.core.schema.level import LogLevel

_log = logging.getLogger(__name__)


class Base(LevelMethods):
    """Synchronous logging host.

    Holds the attributes shared by every attached logger, fans lifecycle
    calls out to them and stamps each record with the clock before handing
    it to every logger in attachment order. The first logger error aborts
    the fan-out and propagates to the caller.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._loggers: list[LoggerPort] = []
        self._attrs = Attrs()
        self._log_level = LogLevel.DEBUG
        self._initialized = False

    @property
    def base_attrs(self) -> Attrs:
        return self._attrs

    def set_attr(self, key: str, value: Any) -> None:
        self._attrs.set_attr(key, value)

    def get_attr(self, key: str) -> Any:
        return self._attrs.get_attr(key)

    def remove_attr(self, key: str) -> None:
        self._attrs.remove_attr(key)

    def clear_attrs(self) -> None:
        self._attrs.clear()

    def set_log_level(self, level: LogLevel) -> None:
        self._log_level = level

    def should_log(self, level: LogLevel) -> bool:
        return self._log_level != LogLevel.NONE and level >= self._log_level

    def add_logger(self, logger: LoggerPort) -> None:
        if logger in self._loggers:
            return
        if self._initialized and not logger.is_initialized():
            logger.init_logger()
        logger.set_base(self)
        self._loggers.append(logger)
        _log.debug("Attached logger %s", type(logger).__name__)

    def remove_logger(self, logger: LoggerPort) -> None:
        if logger in self._loggers:
            self._loggers.remove(logger)

    @property
    def loggers(self) -> tuple[LoggerPort, ...]:
        return tuple(self._loggers)

    def init_loggers(self) -> None:
        for logger in self._loggers:
            logger.init_logger()
        self._initialized = True

    def shutdown_loggers(self) -> None:
        for logger in self._loggers:
            logger.shutdown_logger()
        self._initialized = False

    def is_initialized(self) -> bool:
        return self._initialized

    def new_log_adapter(self, attrs: AttrsLike = None) -> LogAdapter:
        return LogAdapter(self, attrs)

    def log(self, level: LogLevel, attrs: AttrsLike, msg: str, *args: Any) -> None:
        if not self._initialized:
            raise NotInitializedError("Loggers must be initialized before logging")
        if not self.should_log(level):
            return
        if args:
            msg = msg % args
        timestamp = self._clock.now()
        call_attrs = attrs_to_dict(attrs)
        for logger in self._loggers:
            logger.logm(timestamp, level, dict(call_attrs), msg)
