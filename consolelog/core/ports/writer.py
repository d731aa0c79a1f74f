from typing import Protocol, runtime_checkable


@runtime_checkable
class Writer(Protocol):
    def print(self, msg: str) -> None: ...
