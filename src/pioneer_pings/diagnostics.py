"""Contract for diagnostic records emitted around ping submission."""

from __future__ import annotations

import logging
from typing import Any, Protocol


class DiagnosticSink(Protocol):
    """Receives submission outcomes for observability."""

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Publish a diagnostic record to the configured sink."""


class LoggingDiagnosticSink:
    """Writes diagnostic records to a stdlib logger.

    Failure records (event names ending in ``_failed``) are logged at error level,
    everything else at debug level.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("pioneer_pings.diagnostics")

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        level = logging.ERROR if event_name.endswith("_failed") else logging.DEBUG
        self._logger.log(level, event_name, extra={"diagnostic": payload})


class NullDiagnosticSink:
    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        return None
