from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import CURRENT_USER
from ..storage.base import CollectionStore
from .model import SessionUser

logger = logging.getLogger(__name__)


class StoreSessionRepository:
    """Single `current_user` record kept in the local store."""

    def __init__(self, store: CollectionStore):
        self._store = store

    def get(self) -> Optional[SessionUser]:
        raw = self._store.get_item(CURRENT_USER)
        if not isinstance(raw, dict):
            return None
        try:
            return SessionUser.from_record(raw)
        except (KeyError, ValueError) as e:
            logger.warning("Ignoring unreadable session record: %s", e)
            return None

    def save(self, user: SessionUser) -> None:
        self._store.set_item(CURRENT_USER, user.to_record())

    def clear(self) -> None:
        self._store.remove_item(CURRENT_USER)
