from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .checks.base import BaseCheck
    from .checks.length import LengthCheck


class FailureReason(str, Enum):
    LENGTH = "LENGTH"
    FORMAT = "FORMAT"
    CHECKSUM = "CHECKSUM"
    UNSUPPORTED = "UNSUPPORTED"


@dataclass(frozen=True)
class ValidationRule:
    jurisdiction: str
    length: LengthCheck
    checks: tuple[BaseCheck, ...] = field(default_factory=tuple)
    description: str = ""

    def first_failure(self, code: str) -> FailureReason | None:
        """Return the reason of the first failing stage, or None if the code is well-formed."""
        if not self.length.matches(code):
            return self.length.reason
        for check in self.checks:
            if not check.matches(code):
                return check.reason
        return None

    def validate(self, code: str) -> bool:
        return self.first_failure(code) is None


@dataclass(frozen=True)
class CheckResult:
    jurisdiction: str
    code: str
    valid: bool
    supported: bool
    reason: FailureReason | None = None  # None whenever valid is True

    def __bool__(self) -> bool:
        return self.valid
