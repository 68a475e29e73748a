"""Application use cases composed by the runtime."""

from __future__ import annotations

from .export import create_export_report

__all__ = ["create_export_report"]
