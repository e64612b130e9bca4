from __future__ import annotations

import threading
from typing import Callable, Optional

from .datetime_utils import now_millis


class MonotonicIdGenerator:
    """Timestamp-based ids that never repeat within one process.

    Ids still look like millisecond timestamps (sortable by creation order), but
    two calls in the same millisecond get consecutive values instead of the same one.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or now_millis
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = max(int(self._clock()), self._last + 1)
            self._last = value
            return value


_default_generator = MonotonicIdGenerator()


def generate_id() -> int:
    return _default_generator.next_id()
