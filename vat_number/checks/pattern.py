from __future__ import annotations
import re
from .base import BaseCheck

# re.ASCII keeps [A-Z] with IGNORECASE from matching e.g. the Kelvin sign or dotless i.
_BASE_FLAGS = re.ASCII


def _flags(ignore_case: bool) -> int:
    return _BASE_FLAGS | re.IGNORECASE if ignore_case else _BASE_FLAGS


def matches_pattern(code: str, pattern: str | re.Pattern[str], ignore_case: bool = True) -> bool:
    """Return True if the whole of code matches pattern.

    fullmatch() is used instead of ^...$ because $ also matches before a
    trailing newline.
    """
    if isinstance(pattern, re.Pattern):
        return pattern.fullmatch(code) is not None
    return re.fullmatch(pattern, code, _flags(ignore_case)) is not None


class PatternCheck(BaseCheck):
    """Passes if any of the given patterns matches the whole code."""

    def __init__(self, *patterns: str, ignore_case: bool = True) -> None:
        if not patterns:
            raise ValueError("PatternCheck needs at least one pattern")
        self.patterns = tuple(re.compile(p, _flags(ignore_case)) for p in patterns)

    def matches(self, code: str) -> bool:
        return any(matches_pattern(code, p) for p in self.patterns)

    def __repr__(self) -> str:
        return f"PatternCheck({', '.join(repr(p.pattern) for p in self.patterns)})"


class ForbiddenCharsCheck(BaseCheck):
    """Fails if code contains any of the given characters."""

    def __init__(self, chars: str, ignore_case: bool = True) -> None:
        self.ignore_case = ignore_case
        self.chars = frozenset(chars.upper() if ignore_case else chars)

    def matches(self, code: str) -> bool:
        haystack = code.upper() if self.ignore_case else code
        return not any(ch in self.chars for ch in haystack)

    def __repr__(self) -> str:
        return f"ForbiddenCharsCheck({''.join(sorted(self.chars))!r})"
