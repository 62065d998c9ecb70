from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IDiagnosticsSink
from src.domain.models import DiagnosticEvent


@dataclass(slots=True)
class LoggingDiagnosticsSink(IDiagnosticsSink):
    """Writes diagnostic events to the `mapmyjourney.diagnostics` logger.

    Event fields go into `extra` so structured log handlers can pick them up.
    """

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("mapmyjourney.diagnostics")
    )

    def record(self, event: DiagnosticEvent) -> None:
        self.logger.warning(
            "%s stage failed: %s",
            event.stage,
            event.cause,
            extra={
                "stage": event.stage,
                "cause": event.cause,
                "query": event.query,
                "event_timestamp": event.timestamp.isoformat(),
            },
        )
