"""Report writer port defining export persistence contracts.

Purpose
-------
Describe how composed report text reaches durable storage so the export use
case can be exercised with in-memory fakes.

Contents
--------
* :class:`ReportWriterPort` - protocol returning the written location.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ReportWriterPort(Protocol):
    """Persist report text under a directory and return its location.

    Implementations create ``directory`` (and parents) when missing and raise
    :class:`~lib_log_store.adapters.report_file.ReportExportError` (an
    :class:`OSError`) on failure.
    """

    def write(self, content: str, *, directory: Path, file_name: str) -> Path:
        """Write ``content`` to ``directory / file_name``."""


__all__ = ["ReportWriterPort"]
