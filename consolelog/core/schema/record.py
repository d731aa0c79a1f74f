from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping

from consolelog.core.schema.level import LogLevel


@dataclass(frozen=True, slots=True)
class Record:
    timestamp: datetime
    level: LogLevel
    attrs: Mapping[str, Any] = field(default_factory=dict)
    message: str = ""

    def __post_init__(self) -> None:
        # Display order is by key, independent of how the attributes were merged.
        ordered = {key: self.attrs[key] for key in sorted(self.attrs)}
        object.__setattr__(self, "attrs", MappingProxyType(ordered))

    @property
    def level_name(self) -> str:
        return self.level.level_name
