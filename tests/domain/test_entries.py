from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from lib_log_store.domain.entries import LogEntry
from lib_log_store.domain.levels import LogComplexity, LogLevel


def _entry(**overrides: object) -> LogEntry:
    data: dict[str, object] = {
        "entry_id": "e1",
        "timestamp": datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
        "messages": ("disk", "full"),
        "level": LogLevel.WARN,
        "complexity": LogComplexity.SIMPLE,
        "file": "app/io.py",
        "line": 42,
        "function": "flush()",
    }
    data.update(overrides)
    return LogEntry(**data)  # type: ignore[arg-type]


def test_simple_description_joins_messages_with_glyph() -> None:
    assert _entry().simple_description == "⚠️ disk, full"


def test_complex_description_appends_call_site() -> None:
    assert _entry().complex_description == "⚠️ disk, full - app/io.py @ line 42, in function flush()"


def test_description_follows_entry_complexity() -> None:
    assert _entry().description == _entry().simple_description
    complex_entry = _entry(complexity=LogComplexity.COMPLEX)
    assert complex_entry.description == complex_entry.complex_description
    assert str(complex_entry) == complex_entry.complex_description


def test_entry_without_messages_renders_glyph_only() -> None:
    assert _entry(messages=()).simple_description == "⚠️ "


def test_entry_is_immutable() -> None:
    entry = _entry()
    with pytest.raises(FrozenInstanceError):
        entry.level = LogLevel.ERROR  # type: ignore[misc]


def test_entry_messages_are_copied_into_a_tuple() -> None:
    parts = ["a", "b"]
    entry = _entry(messages=parts)
    parts.append("c")
    assert entry.messages == ("a", "b")


def test_entry_requires_timezone_aware_timestamp() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        _entry(timestamp=datetime(2025, 9, 23, 12, 0))


def test_entry_normalises_timestamp_to_utc() -> None:
    offset = timezone(timedelta(hours=2))
    entry = _entry(timestamp=datetime(2025, 9, 23, 14, 0, tzinfo=offset))
    assert entry.timestamp == datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)
    assert entry.timestamp.tzinfo is timezone.utc


def test_entry_rejects_empty_identifier() -> None:
    with pytest.raises(ValueError, match="entry_id"):
        _entry(entry_id="")


def test_build_defaults_timestamp_to_now() -> None:
    before = datetime.now(timezone.utc)
    entry = LogEntry.build("e9", ["x"], level=LogLevel.DEBUG)
    assert entry.timestamp >= before
    assert entry.complexity is LogComplexity.SIMPLE
