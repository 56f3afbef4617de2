from __future__ import annotations

import json
import logging
from typing import Any, MutableMapping, Optional

from ..core.constants import DEFAULT_STORAGE_NAMESPACE
from .base import CollectionStoreMixin

logger = logging.getLogger(__name__)


class LocalStorage(CollectionStoreMixin):
    """Client-side persisted map, one JSON string per namespaced key.

    The backing mapping can be any `MutableMapping[str, str]` (a dict, a `shelve`
    object, ...). Keys look like `smartoffice_tasks`.
    """

    def __init__(self, mapping: Optional[MutableMapping[str, str]] = None, *, namespace: str = DEFAULT_STORAGE_NAMESPACE):
        self._data: MutableMapping[str, str] = mapping if mapping is not None else {}
        self._namespace = namespace

    def _key(self, name: str) -> str:
        return f"{self._namespace}{name}"

    def get_item(self, name: str) -> Optional[Any]:
        raw = self._data.get(self._key(name))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable local item %s", self._key(name))
            return None

    def set_item(self, name: str, value: Any) -> None:
        self._data[self._key(name)] = json.dumps(value)

    def remove_item(self, name: str) -> None:
        self._data.pop(self._key(name), None)
