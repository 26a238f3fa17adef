from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Port for time-related operations.

    Why: Recording a score without an explicit date needs a testable "now".
    Infrastructure provides the concrete implementation (SystemClock).
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current UTC datetime."""
        ...
