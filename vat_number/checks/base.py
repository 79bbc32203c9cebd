from __future__ import annotations
from abc import ABC, abstractmethod
from ..models import FailureReason


class BaseCheck(ABC):
    reason: FailureReason = FailureReason.FORMAT

    @abstractmethod
    def matches(self, code: str) -> bool:
        """Return True if code passes this check. Must never raise."""
        ...
