from consolelog.infra.logging.console import ConsoleLogger, ConsoleLoggerConfig

__all__ = ["ConsoleLogger", "ConsoleLoggerConfig"]
