"""Filesystem adapter persisting export reports.

Purpose
-------
Create the report directory on demand and write the report atomically as
UTF-8 text, translating filesystem failures into :class:`ReportExportError`.

Contents
--------
* :class:`ReportExportError` - :class:`OSError` subclass raised on failure.
* :class:`FileReportWriter` - implementation of :class:`ReportWriterPort`.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from lib_log_store.application.ports.report import ReportWriterPort


class ReportExportError(OSError):
    """Raised when a report cannot be written; ``path`` names the target."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class FileReportWriter(ReportWriterPort):
    """Write reports through a temporary sibling file and :func:`os.replace`."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def write(self, content: str, *, directory: Path, file_name: str) -> Path:
        """Write ``content`` to ``directory / file_name`` and return that path.

        Examples
        --------
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     target = FileReportWriter().write("x", directory=Path(tmp) / "a" / "b", file_name="r")
        ...     target.read_text(encoding="utf-8")
        'x'
        """
        target = directory / file_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(prefix=".report-", dir=directory)
        except OSError as exc:
            raise ReportExportError(f"cannot prepare report directory {directory}: {exc}", path=target) from exc

        try:
            with os.fdopen(fd, "w", encoding=self._encoding, newline="") as fh:
                fh.write(content)
            os.replace(temp_name, target)
        except OSError as exc:
            Path(temp_name).unlink(missing_ok=True)
            raise ReportExportError(f"cannot write report {target}: {exc}", path=target) from exc
        return target


__all__ = ["FileReportWriter", "ReportExportError"]
