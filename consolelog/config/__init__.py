from consolelog.config.settings import (
    ConsoleSettings,
    LoggingSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'ConsoleSettings',
    'LoggingSettings',
    'load_settings',
]
