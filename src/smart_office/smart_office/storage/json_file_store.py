from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from .base import CollectionStoreMixin

logger = logging.getLogger(__name__)


class JsonFileStore(CollectionStoreMixin):
    """Flat JSON document on disk: `{"employees": [...], "tasks": [...], ...}`.

    Note: Every mutation re-reads and rewrites the whole file. The rewrite goes
    through a temp file + `os.replace`, so readers never observe a half-written
    document. The lock only covers threads of this process. A file that is not
    valid JSON reads as empty, like an unreadable LocalStorage item; the next
    write replaces it.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def _load(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except ValueError:
            logger.warning("Discarding unreadable data file %s", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=str(self._path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self._path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get_item(self, name: str) -> Optional[Any]:
        with self._lock:
            return self._load().get(name)

    def set_item(self, name: str, value: Any) -> None:
        with self._lock:
            data = self._load()
            data[name] = value
            self._dump(data)

    def remove_item(self, name: str) -> None:
        with self._lock:
            data = self._load()
            if name in data:
                del data[name]
                self._dump(data)
