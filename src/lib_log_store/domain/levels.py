"""Log level and complexity enumerations with presentation metadata.

Purpose
-------
Offer the closed set of severities a :class:`~lib_log_store.domain.entries.LogEntry`
can carry, together with the glyphs and report labels used when entries are
rendered for the diagnostic sink or the exported report.

Contents
--------
* :class:`LogLevel` enum ordered by declaration (fatal first, debug last).
* :class:`LogComplexity` enum selecting the interactive rendering.
* ``_LEVEL_TABLE`` constant mapping levels to glyph, report and percentage labels.

System Role
-----------
Keeps the level-to-text mapping in one table so the console sink, the stdlib
sink and the report composer can never drift apart.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping, NamedTuple


class LogLevel(Enum):
    """Enumerated logging levels, compared by identity only."""

    FATAL = "fatal"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    SUCCESS = "success"
    WORKING = "working"
    DEBUG = "debug"

    @property
    def glyph(self) -> str:
        """Return the emoji prefixed to every rendering of this level."""

        return _LEVEL_TABLE[self].glyph

    @property
    def report_label(self) -> str:
        """Return the label used on the per-level count line of a report."""

        return _LEVEL_TABLE[self].report_label

    @property
    def percent_label(self) -> str:
        """Return the label used on the percentage summary line of a report."""

        return _LEVEL_TABLE[self].percent_label

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant closest to this level."""

        return _LEVEL_TABLE[self].python_level

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve a case-insensitive level name.

        Examples
        --------
        >>> LogLevel.from_name(" Working ") is LogLevel.WORKING
        True
        """
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


class LogComplexity(Enum):
    """Whether an entry's interactive rendering carries call-site detail."""

    SIMPLE = "simple"
    COMPLEX = "complex"

    @classmethod
    def from_name(cls, name: str) -> "LogComplexity":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log complexity: {name!r}") from exc


class _LevelMeta(NamedTuple):
    glyph: str
    report_label: str
    percent_label: str
    python_level: int


_LEVEL_TABLE: dict[LogLevel, _LevelMeta] = {
    LogLevel.FATAL: _LevelMeta("🛑", "Fatal Error", "Fatal", logging.CRITICAL),
    LogLevel.ERROR: _LevelMeta("🥲", "Error", "Error", logging.ERROR),
    LogLevel.WARN: _LevelMeta("⚠️", "Warn", "Warn", logging.WARNING),
    LogLevel.INFO: _LevelMeta("🤖", "Info", "Info", logging.INFO),
    LogLevel.SUCCESS: _LevelMeta("✅", "Success", "Success", logging.INFO),
    LogLevel.WORKING: _LevelMeta("⚙️", "Working", "Working", logging.INFO),
    LogLevel.DEBUG: _LevelMeta("🔵", "Debug", "Debug", logging.DEBUG),
}


def _ensure_exhaustive(table: Mapping[LogLevel, _LevelMeta]) -> None:
    """Raise :class:`RuntimeError` when a level has no presentation metadata."""
    missing = [level.value for level in LogLevel if level not in table]
    if missing:
        raise RuntimeError(f"level table is missing {missing}")


_ensure_exhaustive(_LEVEL_TABLE)


__all__ = ["LogComplexity", "LogLevel"]
