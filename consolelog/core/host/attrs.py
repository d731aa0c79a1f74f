from typing import Any, Mapping, Optional, Union


class Attrs:
    def __init__(self) -> None:
        self._attrs: dict[str, Any] = {}

    @classmethod
    def from_map(cls, values: Optional[Mapping[str, Any]]) -> "Attrs":
        attrs = cls()
        for key, value in (values or {}).items():
            attrs.set_attr(key, value)
        return attrs

    def set_attr(self, key: str, value: Any) -> "Attrs":
        self._attrs[key] = value
        return self

    def get_attr(self, key: str) -> Any:
        return self._attrs.get(key)

    def remove_attr(self, key: str) -> None:
        self._attrs.pop(key, None)

    def clear(self) -> None:
        self._attrs.clear()

    def attrs(self) -> dict[str, Any]:
        return dict(self._attrs)

    def __len__(self) -> int:
        return len(self._attrs)

    def __repr__(self) -> str:
        return f"Attrs({self._attrs!r})"


AttrsLike = Union[Attrs, Mapping[str, Any], None]


def attrs_to_dict(attrs: AttrsLike) -> dict[str, Any]:
    if attrs is None:
        return {}
    if isinstance(attrs, Attrs):
        return attrs.attrs()
    return dict(attrs)


def merge_attrs(*layers: AttrsLike) -> dict[str, Any]:
    """Overlay attribute layers left to right; later keys win."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(attrs_to_dict(layer))
    return merged
