from datetime import datetime
from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol, runtime_checkable

from consolelog.core.schema.level import LogLevel

if TYPE_CHECKING:
    from consolelog.core.template import Template


@runtime_checkable
class AttrStore(Protocol):
    def attrs(self) -> dict[str, Any]: ...


@runtime_checkable
class LoggerBase(Protocol):
    @property
    def base_attrs(self) -> Optional[AttrStore]: ...


@runtime_checkable
class LoggerPort(Protocol):
    def set_base(self, base: LoggerBase) -> None:
        ...

    def set_template(self, template: "Template") -> None:
        ...

    def init_logger(self) -> None:
        ...

    def is_initialized(self) -> bool:
        ...

    def shutdown_logger(self) -> None:
        ...

    def logm(
        self,
        timestamp: datetime,
        level: LogLevel,
        attrs: Optional[Mapping[str, Any]],
        msg: str,
    ) -> None:
        ...
