"""Domain value describing a single logged event.

Purpose
-------
Provide an immutable representation of one log call, created once at call
time and never mutated by the store afterwards.

Contents
--------
* :class:`LogEntry` dataclass with simple and complex renderings.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer; the store retains these values, the sinks emit their
renderings and the report composer always uses :attr:`LogEntry.complex_description`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from .levels import LogComplexity, LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Immutable log entry retained by :class:`~lib_log_store.application.store.LogStore`.

    Attributes
    ----------
    entry_id:
        Identifier assigned at creation; used for list identity only.
    timestamp:
        Creation time in timezone-aware UTC.
    messages:
        Ordered message parts, possibly empty.
    level, complexity:
        Severity and the rendering used for interactive emission.
    file, line, function:
        Call-site metadata supplied by the caller.
    """

    entry_id: str
    timestamp: datetime
    messages: tuple[str, ...]
    level: LogLevel
    complexity: LogComplexity
    file: str
    line: int
    function: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        object.__setattr__(self, "messages", tuple(str(part) for part in self.messages))
        if not self.entry_id:
            raise ValueError("entry_id must not be empty")

    @property
    def glyph(self) -> str:
        return self.level.glyph

    @property
    def simple_description(self) -> str:
        """Return the glyph followed by the comma-joined message parts.

        Examples
        --------
        >>> entry = LogEntry.build("a", ["x", "y"], level=LogLevel.INFO)
        >>> entry.simple_description
        '🤖 x, y'
        """
        return f"{self.glyph} {', '.join(self.messages)}"

    @property
    def complex_description(self) -> str:
        """Return the simple rendering followed by call-site details."""
        return f"{self.simple_description} - {self.file} @ line {self.line}, in function {self.function}"

    @property
    def description(self) -> str:
        """Return the rendering selected by the entry's own complexity."""
        if self.complexity is LogComplexity.COMPLEX:
            return self.complex_description
        return self.simple_description

    def __str__(self) -> str:
        return self.description

    @classmethod
    def build(
        cls,
        entry_id: str,
        messages: Iterable[str],
        *,
        level: LogLevel,
        complexity: LogComplexity = LogComplexity.SIMPLE,
        timestamp: datetime | None = None,
        file: str = "<unknown>",
        line: int = 0,
        function: str = "<unknown>",
    ) -> "LogEntry":
        """Convenience constructor defaulting the timestamp to now (UTC)."""

        return cls(
            entry_id=entry_id,
            timestamp=timestamp if timestamp is not None else datetime.now(timezone.utc),
            messages=tuple(messages),
            level=level,
            complexity=complexity,
            file=file,
            line=line,
            function=function,
        )


__all__ = ["LogEntry"]
