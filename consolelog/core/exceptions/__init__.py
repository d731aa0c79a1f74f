from consolelog.core.exceptions.errors import (
    ConsoleLogError,
    InvalidTemplateError,
    NotInitializedError,
    RenderError,
    UnknownLevelError,
    UnsupportedLevelError,
)

__all__ = [
    "ConsoleLogError",
    "InvalidTemplateError",
    "NotInitializedError",
    "RenderError",
    "UnsupportedLevelError",
    "UnknownLevelError",
]
