from __future__ import annotations
from .base import BaseCheck
from ..models import FailureReason


def check_length(code: str, min_length: int, max_length: int) -> bool:
    """Return True if len(code) lies in [min_length, max_length].

    Length is counted in code points. Every format in the rule table is
    ASCII-only, so for well-formed input this equals the byte length.
    """
    return min_length <= len(code) <= max_length


class LengthCheck(BaseCheck):
    reason = FailureReason.LENGTH

    def __init__(
        self,
        min_length: int,
        max_length: int | None = None,
        allowed: tuple[int, ...] | None = None,
    ) -> None:
        if max_length is None:
            max_length = min_length
        if min_length > max_length:
            raise ValueError(f"min_length {min_length} > max_length {max_length}")
        self.min_length = min_length
        self.max_length = max_length
        # Some formats accept only a few discrete lengths inside the range (e.g. LT: 9 or 12)
        self.allowed = tuple(sorted(allowed)) if allowed else None

    def matches(self, code: str) -> bool:
        if not check_length(code, self.min_length, self.max_length):
            return False
        return self.allowed is None or len(code) in self.allowed

    def __repr__(self) -> str:
        if self.allowed:
            return f"LengthCheck(allowed={self.allowed})"
        return f"LengthCheck({self.min_length}, {self.max_length})"
