"""Application layer: ports, use cases and the log store."""

from __future__ import annotations

from .store import LogStore

__all__ = ["LogStore"]
