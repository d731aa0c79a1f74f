from typing import TYPE_CHECKING, Any

from consolelog.core.host.attrs import Attrs, AttrsLike, merge_attrs
from consolelog.core.host.methods import LevelMethods
from consolelog.core.schema.level import LogLevel

if TYPE_CHECKING:
    from consolelog.core.host.base import Base


class LogAdapter(LevelMethods):
    def __init__(self, base: "Base", attrs: AttrsLike = None) -> None:
        self._base = base
        self._attrs = Attrs.from_map(merge_attrs(attrs))

    def set_attr(self, key: str, value: Any) -> None:
        self._attrs.set_attr(key, value)

    def get_attr(self, key: str) -> Any:
        return self._attrs.get_attr(key)

    def remove_attr(self, key: str) -> None:
        self._attrs.remove_attr(key)

    def log(self, level: LogLevel, attrs: AttrsLike, msg: str, *args: Any) -> None:
        self._base.log(level, merge_attrs(self._attrs, attrs), msg, *args)
