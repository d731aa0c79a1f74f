import os
from dataclasses import dataclass
from typing import Optional, Tuple

from consolelog.core.schema.level import LogLevel, parse_level


@dataclass(frozen=True, slots=True)
class ConsoleSettings:
    colorize: bool
    template: Optional[str]
    stderr_levels: Tuple[LogLevel, ...]


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    level: LogLevel


@dataclass(frozen=True, slots=True)
class Settings:
    console: ConsoleSettings
    logging: LoggingSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    colorize = _env_bool("CONSOLELOG_COLORIZE", True)
    template = _ge_env_or_default("CONSOLELOG_TEMPLATE")
    stderr_levels = _env_levels("CONSOLELOG_STDERR_LEVELS")
    level = parse_level(_ge_env_or_default("CONSOLELOG_LEVEL", "debug"))

    return Settings(
        console=ConsoleSettings(
            colorize=colorize,
            template=template,
            stderr_levels=stderr_levels,
        ),
        logging=LoggingSettings(level=level),
    )


def _ge_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    return str(_ge_env_or_default(name, str(default)) or "").upper() == "TRUE"


def _env_levels(name: str) -> Tuple[LogLevel, ...]:
    value = _ge_env_or_default(name)
    if value is None:
        return ()
    return tuple(
        parse_level(part) for part in value.split(",") if part.strip()
    )
