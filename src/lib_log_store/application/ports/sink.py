"""Diagnostic sink port describing per-entry emission contracts.

Purpose
-------
Define the abstraction for the host facility that receives the pre-rendered
string of every appended entry, letting the store depend on a narrow protocol.

Contents
--------
* :class:`DiagnosticSinkPort` - runtime-checkable protocol with a single
  ``emit`` method.

System Role
-----------
Console (Rich) and stdlib :mod:`logging` adapters plug in here without leaking
their details into :class:`~lib_log_store.application.store.LogStore`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_store.domain.levels import LogLevel


@runtime_checkable
class DiagnosticSinkPort(Protocol):
    """Emit an already rendered entry string."""

    def emit(self, line: str, *, level: LogLevel) -> None:
        """Emit ``line`` exactly; ``level`` is advisory (styling, routing)."""


__all__ = ["DiagnosticSinkPort"]
