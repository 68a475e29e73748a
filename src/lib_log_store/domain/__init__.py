"""Domain entities and value objects used by the log store."""

from __future__ import annotations

from .config import LoggerConfig
from .entries import LogEntry
from .levels import LogComplexity, LogLevel
from .report import render_report, report_file_name
from .ring_buffer import RingBuffer
from .statistics import LogStatistics

__all__ = [
    "LogComplexity",
    "LogEntry",
    "LogLevel",
    "LogStatistics",
    "LoggerConfig",
    "RingBuffer",
    "render_report",
    "report_file_name",
]
