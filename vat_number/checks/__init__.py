from .base import BaseCheck
from .length import LengthCheck, check_length
from .numeric import NumbersOnlyCheck, numbers_only
from .pattern import ForbiddenCharsCheck, PatternCheck, matches_pattern
from .italy import ItalyChecksumCheck, checksum_italy, italy_check_digit

__all__ = [
    "BaseCheck",
    "LengthCheck",
    "NumbersOnlyCheck",
    "PatternCheck",
    "ForbiddenCharsCheck",
    "ItalyChecksumCheck",
    "check_length",
    "numbers_only",
    "matches_pattern",
    "checksum_italy",
    "italy_check_digit",
]
