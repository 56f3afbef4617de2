from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence


class CollectionStore(Protocol):
    """Key/value store holding named collections.

    Note (DIP): repositories depend on this interface, never on a concrete store.
    A collection is a JSON array; `write` replaces it as a whole.
    """

    def get_item(self, name: str) -> Optional[Any]:
        raise NotImplementedError

    def set_item(self, name: str, value: Any) -> None:
        raise NotImplementedError

    def remove_item(self, name: str) -> None:
        raise NotImplementedError

    def read(self, name: str) -> List[dict]:
        raise NotImplementedError

    def write(self, name: str, records: Sequence[dict]) -> None:
        raise NotImplementedError


class CollectionStoreMixin:
    """`read` / `write` in terms of `get_item` / `set_item`."""

    def read(self, name: str) -> List[dict]:
        value = self.get_item(name)  # type: ignore[attr-defined]
        if not isinstance(value, list):
            return []
        return [dict(r) for r in value if isinstance(r, dict)]

    def write(self, name: str, records: Sequence[dict]) -> None:
        self.set_item(name, [dict(r) for r in records])  # type: ignore[attr-defined]
