"""Per-level statistics over a sequence of log entries.

Purpose
-------
Compute deterministic counts and percentages for every :class:`LogLevel`
against exactly the entries a store currently retains.

Contents
--------
* :class:`LogStatistics` value with :meth:`LogStatistics.from_entries`.
* :func:`format_percent` helper shared with the report composer.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .entries import LogEntry
from .levels import LogLevel


def format_percent(count: int, total: int) -> str:
    """Return ``count`` as a percentage of ``max(total, 1)`` with two decimals.

    Examples
    --------
    >>> format_percent(1, 3)
    '33.33'
    >>> format_percent(0, 0)
    '0.00'
    """
    divisor = total if total > 0 else 1
    return f"{count * 100 / divisor:.2f}"


@dataclass(slots=True, frozen=True)
class LogStatistics:
    """Immutable per-level counts computed from one buffer snapshot."""

    total: int
    counts: Mapping[LogLevel, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        complete = {level: int(self.counts.get(level, 0)) for level in LogLevel}
        object.__setattr__(self, "counts", MappingProxyType(complete))

    @classmethod
    def from_entries(cls, entries: Iterable[LogEntry]) -> "LogStatistics":
        tally = Counter(entry.level for entry in entries)
        return cls(total=sum(tally.values()), counts=tally)

    def count(self, level: LogLevel) -> int:
        return self.counts[level]

    def percentage(self, level: LogLevel) -> str:
        """Return the formatted percentage of entries at ``level``."""

        return format_percent(self.counts[level], self.total)

    def percentages(self) -> dict[LogLevel, str]:
        """Return formatted percentages for every level in declaration order."""

        return {level: self.percentage(level) for level in LogLevel}

    def to_dict(self) -> dict[str, object]:
        """Serialise to plain types for CLI or JSON consumers."""

        return {
            "total": self.total,
            "counts": {level.value: self.counts[level] for level in LogLevel},
            "percentages": {level.value: value for level, value in self.percentages().items()},
        }


__all__ = ["LogStatistics", "format_percent"]
