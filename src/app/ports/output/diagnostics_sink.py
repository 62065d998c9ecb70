from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import DiagnosticEvent


class IDiagnosticsSink(ABC):
    """Port for recording internal failure causes."""

    @abstractmethod
    def record(self, event: DiagnosticEvent) -> None:
        raise NotImplementedError
