"""Rich-powered diagnostic sink implementing :class:`DiagnosticSinkPort`.

Purpose
-------
Render entry strings on an interactive terminal with per-level styling while
keeping the emitted text byte-for-byte what the store produced.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleSink` - adapter used by the CLI demo.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console
from rich.text import Text

from lib_log_store.application.ports.sink import DiagnosticSinkPort
from lib_log_store.domain.levels import LogLevel


#: Default Rich styles keyed by :class:`LogLevel`.
_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.FATAL: "bold white on red",
    LogLevel.ERROR: "red",
    LogLevel.WARN: "yellow",
    LogLevel.INFO: "cyan",
    LogLevel.SUCCESS: "green",
    LogLevel.WORKING: "magenta",
    LogLevel.DEBUG: "dim",
}


class RichConsoleSink(DiagnosticSinkPort):
    """Print entry strings through a Rich console."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the sink with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, line: str, *, level: LogLevel) -> None:
        """Print ``line`` styled for ``level``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleSink(console=console).emit("🤖 msg", level=LogLevel.INFO)
        >>> '🤖 msg' in console.export_text()
        True
        """
        style = "" if self._no_color else self._style_map.get(level, "")
        # Text instances bypass markup parsing, so brackets in messages survive.
        self._console.print(Text(line, style=style), highlight=False, soft_wrap=True)


__all__ = ["RichConsoleSink"]
