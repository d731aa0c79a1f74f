from consolelog.core.host.adapter import LogAdapter
from consolelog.core.host.attrs import Attrs, AttrsLike, attrs_to_dict, merge_attrs
from consolelog.core.host.base import Base

__all__ = [
    "Attrs",
    "AttrsLike",
    "Base",
    "LogAdapter",
    "attrs_to_dict",
    "merge_attrs",
]
