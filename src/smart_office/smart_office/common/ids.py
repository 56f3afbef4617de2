from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Mapping


def now_millis() -> int:
    """Current wall-clock time in milliseconds.

    Note: Wrapped so tests can pass a fixed clock.
    """
    return int(time.time() * 1000)


def next_record_id(records: Iterable[Mapping[str, Any]], *, clock: Callable[[], int] = now_millis) -> int:
    """Return a new integer id for a collection.

    Ids stay time-flavoured like the ones already in the data files, but never go
    backwards and never collide: the result is above every integer id present.
    """
    highest = 0
    for r in records:
        rid = r.get("id")
        if isinstance(rid, int) and not isinstance(rid, bool) and rid > highest:
            highest = rid
    return max(int(clock()), highest + 1)
