from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .outcomes import Stage


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    stage: Stage
    cause: str
    query: str | None = None
    timestamp: datetime = field(default_factory=_utcnow)
