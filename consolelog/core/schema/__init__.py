from consolelog.core.schema.level import LogLevel, parse_level
from consolelog.core.schema.record import Record

__all__ = [
    "LogLevel",
    "Record",
    "parse_level",
]
