"""Remote-first, local-fallback call contract.

Every service read or write goes through `call_with_fallback`. The outcome is
tagged with where it came from so the branch is explicit and testable.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, TypeVar, Union

from ..context import ServiceContext
from ..core.exceptions import BackendUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RemoteResult(Generic[T]):
    value: T
    source: ClassVar[str] = "remote"


@dataclass(frozen=True)
class LocalResult(Generic[T]):
    value: T
    source: ClassVar[str] = "local"


BackendResult = Union[RemoteResult[T], LocalResult[T]]


def call_with_fallback(
    ctx: ServiceContext,
    remote_call: Callable[[], T],
    local_call: Callable[[], T],
    *,
    operation: str,
) -> BackendResult[T]:
    """Try the remote backend when configured, else (or on failure) the local store.

    Decided per call: an outage is never remembered between calls.
    """
    if ctx.remote_enabled:
        try:
            return RemoteResult(remote_call())
        except BackendUnavailable as e:
            logger.warning("%s: remote backend unavailable, using local store (%s)", operation, e)
    return LocalResult(local_call())
