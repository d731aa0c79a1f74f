from consolelog.infra.clock import SystemClock
from consolelog.infra.logging import ConsoleLogger, ConsoleLoggerConfig
from consolelog.infra.writer import StreamWriter, stderr_writer, stdout_writer

__all__ = [
    'ConsoleLogger',
    'ConsoleLoggerConfig',
    'StreamWriter',
    'SystemClock',
    'stderr_writer',
    'stdout_writer',
]
