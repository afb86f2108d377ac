from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")


class OrderedRecordStore(Protocol[T]):
    def insert(self, key: str, value: T) -> None: ...

    def get(self, key: str) -> T | None: ...

    def values(self) -> list[T]: ...
