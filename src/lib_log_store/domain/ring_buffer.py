"""Ring buffer storing the most recent log entries.

Purpose
-------
Provide bounded in-memory retention so hosts can inspect and export recent
history without an external target.

Contents
--------
* :class:`RingBuffer` with oldest-first eviction and snapshot helpers.

System Role
-----------
Backs :class:`~lib_log_store.application.store.LogStore`; the store owns the
locking, the buffer only enforces capacity and order.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator

from .entries import LogEntry


class RingBuffer:
    """Fixed-size buffer retaining the most recent :class:`LogEntry` objects."""

    def __init__(self, *, max_entries: int) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._buffer: Deque[LogEntry] = deque(maxlen=max_entries)

    @property
    def max_entries(self) -> int:
        """Return the configured buffer size."""

        return self._max_entries

    def append(self, entry: LogEntry) -> LogEntry | None:
        """Append ``entry`` and return the evicted head entry, if any."""

        evicted = self._buffer[0] if len(self._buffer) == self._max_entries else None
        self._buffer.append(entry)
        return evicted

    def snapshot(self) -> list[LogEntry]:
        """Return a copy of the current buffer state, oldest first."""

        return list(self._buffer)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


__all__ = ["RingBuffer"]
