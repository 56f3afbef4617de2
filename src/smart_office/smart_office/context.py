from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from .core.constants import DEFAULT_REMOTE_TIMEOUT
from .users.model import SessionUser


@dataclass(frozen=True)
class ServiceContext:
    """Per-call context handed to every service operation.

    `api_base` empty means local-only mode. `timeout` bounds each remote call
    in seconds.
    """

    api_base: str = ""
    timeout: float = DEFAULT_REMOTE_TIMEOUT
    current_user: Optional[SessionUser] = None

    @property
    def remote_enabled(self) -> bool:
        return bool(self.api_base and self.api_base.strip())

    def url(self, path: str) -> str:
        return f"{self.api_base.strip().rstrip('/')}{path}"

    def with_user(self, user: Optional[SessionUser]) -> "ServiceContext":
        return replace(self, current_user=user)

    @classmethod
    def from_settings(cls, settings: Any, *, current_user: Optional[SessionUser] = None) -> "ServiceContext":
        return cls(
            api_base=str(getattr(settings, "API_BASE", "") or ""),
            timeout=float(getattr(settings, "REMOTE_TIMEOUT", DEFAULT_REMOTE_TIMEOUT)),
            current_user=current_user,
        )
