"""Port for the process-terminating side effect of fatal entries."""

from __future__ import annotations

from typing import NoReturn, Protocol, runtime_checkable


@runtime_checkable
class TerminatorPort(Protocol):
    """End the process after a fatal entry has been recorded and emitted."""

    def terminate(self, message: str) -> NoReturn:
        """Terminate with ``message`` as the final diagnostic."""


__all__ = ["TerminatorPort"]
