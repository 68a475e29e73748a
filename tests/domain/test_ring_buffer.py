from __future__ import annotations

from typing import Callable

import pytest

from lib_log_store.domain.entries import LogEntry
from lib_log_store.domain.ring_buffer import RingBuffer


def test_ring_buffer_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError, match="max_entries"):
        RingBuffer(max_entries=0)


def test_ring_buffer_evicts_oldest_first(entry_factory: Callable[..., LogEntry]) -> None:
    buffer = RingBuffer(max_entries=2)
    first, second, third = (entry_factory(index) for index in range(3))

    assert buffer.append(first) is None
    assert buffer.append(second) is None
    assert buffer.append(third) is first

    assert buffer.snapshot() == [second, third]
    assert len(buffer) == 2


def test_snapshot_is_a_copy(entry_factory: Callable[..., LogEntry]) -> None:
    buffer = RingBuffer(max_entries=3)
    buffer.append(entry_factory(0))
    snapshot = buffer.snapshot()
    snapshot.clear()
    assert len(buffer) == 1


def test_capacity_of_one_keeps_latest(entry_factory: Callable[..., LogEntry]) -> None:
    buffer = RingBuffer(max_entries=1)
    entries = [entry_factory(index) for index in range(5)]
    for entry in entries:
        buffer.append(entry)
    assert list(buffer) == [entries[-1]]
    assert buffer.max_entries == 1
