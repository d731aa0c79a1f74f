import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from consolelog.core.exceptions import InvalidTemplateError, UnsupportedLevelError
from consolelog.core.host.attrs import AttrsLike, attrs_to_dict
from consolelog.core.ports.logger import LoggerBase, LoggerPort
from consolelog.core.ports.writer import Writer
from consolelog.core.schema.level import LogLevel
from consolelog.core.schema.record import Record
from consolelog.core.template import Template, new_template_default
from consolelog.infra.writer import stdout_writer

_log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConsoleLoggerConfig:
    colorize: bool = True
    debug_writer: Optional[Writer] = None
    info_writer: Optional[Writer] = None
    warning_writer: Optional[Writer] = None
    error_writer: Optional[Writer] = None
    fatal_writer: Optional[Writer] = None

    def writer_overrides(self) -> dict[LogLevel, Optional[Writer]]:
        return {
            LogLevel.DEBUG: self.debug_writer,
            LogLevel.INFO: self.info_writer,
            LogLevel.WARNING: self.warning_writer,
            LogLevel.ERROR: self.error_writer,
            LogLevel.FATAL: self.fatal_writer,
        }


class ConsoleLogger(LoggerPort):
    def __init__(self, config: Optional[ConsoleLoggerConfig] = None) -> None:
        self._config = config or ConsoleLoggerConfig()
        self._base: Optional[LoggerBase] = None
        self._template = new_template_default()
        self._initialized = False
        self._writers = self._populate_writers(self._config)

    @staticmethod
    def _populate_writers(config: ConsoleLoggerConfig) -> dict[LogLevel, Writer]:
        default = stdout_writer()
        return {
            level: writer or default
            for level, writer in config.writer_overrides().items()
        }

    @property
    def config(self) -> ConsoleLoggerConfig:
        return self._config

    @property
    def template(self) -> Template:
        return self._template

    def set_base(self, base: LoggerBase) -> None:
        self._base = base

    def set_template(self, template: Template) -> None:
        if template is None:
            raise InvalidTemplateError("A template must be provided")
        self._template = template
        _log.debug("Console template replaced with %r", template)

    def set_writer(self, writer: Writer) -> None:
        for level in self._writers:
            self._writers[level] = writer

    def init_logger(self) -> None:
        self._initialized = True

    def is_initialized(self) -> bool:
        return self._initialized

    def shutdown_logger(self) -> None:
        self._initialized = False

    def logm(
        self,
        timestamp: datetime,
        level: LogLevel,
        attrs: AttrsLike,
        msg: str,
    ) -> None:
        merged: dict[str, Any] = {}
        if self._base is not None and self._base.base_attrs is not None:
            merged.update(self._base.base_attrs.attrs())
        merged.update(attrs_to_dict(attrs))

        record = Record(timestamp=timestamp, level=level, attrs=merged, message=msg)
        out = self._template.execute(record, self._config.colorize)

        writer = self._writers.get(level)
        if writer is None:
            raise UnsupportedLevelError(f"Unsupported log level {level!r}", level)
        writer.print(out + "\n")
