import logging

from consolelog.config import Settings, load_settings
from consolelog.core.host import Base
from consolelog.core.schema.level import LogLevel
from consolelog.core.template import Template
from consolelog.infra import (
    ConsoleLogger,
    ConsoleLoggerConfig,
    SystemClock,
    stderr_writer,
)

_WRITER_FIELDS = {
    LogLevel.DEBUG: 'debug_writer',
    LogLevel.INFO: 'info_writer',
    LogLevel.WARNING: 'warning_writer',
    LogLevel.ERROR: 'error_writer',
    LogLevel.FATAL: 'fatal_writer',
}


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    settings = load_settings()
    base = build_base(settings)
    base.init_loggers()
    try:
        adapter = base.new_log_adapter({'component': 'demo'})
        adapter.dbgf('Debug message %d of %d', 1, 5)
        adapter.info('Informational message')
        adapter.warnm({'retry': 2}, 'Warning with attributes')
        adapter.errf('Error: %s', 'something failed')
        adapter.fatal('Fatal message')
    finally:
        base.shutdown_loggers()


def build_base(settings: Settings) -> Base:
    base = Base(SystemClock())
    base.set_log_level(settings.logging.level)
    base.add_logger(build_logger(settings))
    return base


def build_logger(settings: Settings) -> ConsoleLogger:
    overrides = {}
    if settings.console.stderr_levels:
        writer = stderr_writer()
        for level in settings.console.stderr_levels:
            if level not in _WRITER_FIELDS:
                raise ValueError(f'Level {level.level_name} cannot be routed to stderr')
            overrides[_WRITER_FIELDS[level]] = writer

    logger = ConsoleLogger(
        ConsoleLoggerConfig(colorize=settings.console.colorize, **overrides)
    )
    if settings.console.template is not None:
        logger.set_template(Template(settings.console.template))
    return logger


if __name__ == '__main__':
    main()
