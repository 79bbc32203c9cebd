from __future__ import annotations
import re
from .base import BaseCheck

# ASCII digits only. str.isdigit() is not used because it also accepts
# superscripts and other Unicode digits.
_DIGITS_PATTERN = re.compile(r"[0-9]+")


def numbers_only(code: str) -> bool:
    """Return True if code is a non-empty string of ASCII digits. Leading zeros are fine."""
    return _DIGITS_PATTERN.fullmatch(code) is not None


class NumbersOnlyCheck(BaseCheck):
    def matches(self, code: str) -> bool:
        return numbers_only(code)

    def __repr__(self) -> str:
        return "NumbersOnlyCheck()"
