from __future__ import annotations
from .base import BaseCheck
from .numeric import numbers_only
from ..models import FailureReason

# Partita IVA: 11 digits, the last one a Luhn-style check digit.
# Digits at even positions (0, 2, ..., 8) are added as-is; digits at odd
# positions (1, 3, ..., 9) are doubled and reduced by 9 when the result
# exceeds 9. The check digit is (10 - sum % 10) % 10.
# Example: 00154189997 (sum 43, check digit 7)


def italy_check_digit(prefix: str) -> int:
    """Return the expected check digit for a 10-digit prefix."""
    if len(prefix) != 10 or not numbers_only(prefix):
        raise ValueError(f"expected 10 ASCII digits, got {prefix!r}")
    total = 0
    for i, ch in enumerate(prefix):
        n = ord(ch) - ord("0")
        if i % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return (10 - total % 10) % 10


def checksum_italy(code: str) -> bool:
    """Return True if the 11th character is the check digit of the first 10.

    Returns False rather than raising when code is too short or not numeric.
    """
    digits = code[:11]
    if len(digits) != 11 or not numbers_only(digits):
        return False
    return italy_check_digit(digits[:10]) == ord(digits[10]) - ord("0")


class ItalyChecksumCheck(BaseCheck):
    reason = FailureReason.CHECKSUM

    def matches(self, code: str) -> bool:
        return checksum_italy(code)

    def __repr__(self) -> str:
        return "ItalyChecksumCheck()"
