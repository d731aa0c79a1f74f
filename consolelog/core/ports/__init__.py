from consolelog.core.ports.clock import Clock
from consolelog.core.ports.logger import AttrStore, LoggerBase, LoggerPort
from consolelog.core.ports.writer import Writer

__all__ = [
    "AttrStore",
    "Clock",
    "LoggerBase",
    "LoggerPort",
    "Writer",
]
