"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_store"
title = "Bounded in-process log store with statistics and report export"
version = "0.1.0"
author = "lib_log_store maintainers"
shell_command = "lib_log_store"

_FIELDS = (
    ("name", name),
    ("title", title),
    ("version", version),
    ("author", author),
    ("shell_command", shell_command),
)


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (default :func:`print`).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_store:\\n\\n'
    """
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    pad = max(len(label) for label, _ in _FIELDS)
    emit(f"Info for {name}:\n\n")
    for label, value in _FIELDS:
        emit(f"    {label:<{pad}} = {value}\n")
