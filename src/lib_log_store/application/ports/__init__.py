"""Protocols separating the log store from its collaborators."""

from __future__ import annotations

from .report import ReportWriterPort
from .sink import DiagnosticSinkPort
from .terminator import TerminatorPort
from .time import ClockPort, IdProvider

__all__ = [
    "ClockPort",
    "DiagnosticSinkPort",
    "IdProvider",
    "ReportWriterPort",
    "TerminatorPort",
]
