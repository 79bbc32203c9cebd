from __future__ import annotations
from types import MappingProxyType
from typing import Mapping
from .checks import (
    BaseCheck,
    ForbiddenCharsCheck,
    ItalyChecksumCheck,
    LengthCheck,
    NumbersOnlyCheck,
    PatternCheck,
)
from .models import ValidationRule

# Check objects are stateless, so one instance is shared across rules.
_DIGITS = NumbersOnlyCheck()


def _rule(
    jurisdiction: str,
    length: LengthCheck,
    *checks: BaseCheck,
    description: str,
) -> ValidationRule:
    return ValidationRule(
        jurisdiction=jurisdiction,
        length=length,
        checks=checks,
        description=description,
    )


def _digits(
    jurisdiction: str,
    min_length: int,
    max_length: int | None = None,
    *,
    allowed: tuple[int, ...] | None = None,
    description: str,
) -> ValidationRule:
    length = LengthCheck(min_length, max_length, allowed=allowed)
    return _rule(jurisdiction, length, _DIGITS, description=description)


# Formats without the country prefix, e.g. "U12345678" for Austria, not "ATU12345678".
# Letters match case-insensitively, forbidden letters included.
_RULES: list[ValidationRule] = [
    # Albania: J/K/L + 8 digits + letter, e.g. K99999999L
    _rule(
        "AL",
        LengthCheck(10),
        PatternCheck(r"[JKL][0-9]{8}[A-Z]"),
        description="J, K or L + 8 digits + 1 letter",
    ),
    # Austria: U + 8 digits, e.g. U12345678
    _rule("AT", LengthCheck(9), PatternCheck(r"U[0-9]{8}"), description="U + 8 digits"),
    # Australia (ABN): 9-digit identifier + 2 check digits
    _digits("AU", 11, description="11 digits"),
    _digits("BE", 10, description="10 digits"),
    _digits("BG", 9, 10, description="9 or 10 digits"),
    _digits("BY", 9, description="9 digits"),
    # Canada (BN): length only, mixed characters are accepted
    _rule("CA", LengthCheck(9), description="9 characters"),
    # Switzerland: 123.456.789
    _rule(
        "CH",
        LengthCheck(11),
        PatternCheck(r"[0-9]{3}\.[0-9]{3}\.[0-9]{3}"),
        description="3 groups of 3 digits separated by dots",
    ),
    # Cyprus: 12345678X
    _rule("CY", LengthCheck(9), PatternCheck(r"[0-9]{8}[A-Z]"), description="8 digits + 1 letter"),
    _digits("CZ", 8, 10, description="8 to 10 digits"),
    _digits("DE", 9, description="9 digits"),
    _digits("DK", 8, description="8 digits"),
    _digits("EE", 9, description="9 digits"),
    _digits("EL", 9, description="9 digits"),
    # Spain: letter or digit at both ends, e.g. X1234567X
    _rule(
        "ES",
        LengthCheck(9),
        PatternCheck(r"[0-9A-Z][0-9]{7}[0-9A-Z]"),
        description="1 alphanumeric + 7 digits + 1 alphanumeric",
    ),
    _digits("FI", 8, description="8 digits"),
    # France: letters allowed in the first two positions, but never O or I.
    # e.g. 12345678901, X1234567890, 1X123456789, XX123456789
    _rule(
        "FR",
        LengthCheck(11),
        ForbiddenCharsCheck("OI"),
        PatternCheck(r"[0-9A-Z]{2}[0-9]{9}"),
        description="2 alphanumerics (no O or I) + 9 digits",
    ),
    _digits("GB", 9, description="9 digits"),
    _digits("HR", 11, description="11 digits"),
    _digits("HU", 8, description="8 digits"),
    _digits("ID", 15, description="15 digits"),
    # Ireland: 1234567X, 1234567XX, 1X23456X, 1X234567X
    _rule(
        "IE",
        LengthCheck(8, 9),
        PatternCheck(r"[0-9]{7,8}[A-Z]{1,2}", r"[0-9][A-Z][0-9]{5,6}[A-Z]"),
        description="7-8 digits + 1-2 letters, or digit + letter + 5-6 digits + letter",
    ),
    _digits("IL", 9, description="9 digits"),
    _digits("IN", 15, description="15 digits"),
    # Iceland: length only
    _rule("IS", LengthCheck(5, 6), description="5 or 6 characters"),
    # Italy: 11 digits, the last a check digit
    _rule(
        "IT",
        LengthCheck(11),
        _DIGITS,
        ItalyChecksumCheck(),
        description="11 digits with check digit",
    ),
    _digits("KZ", 12, description="12 digits"),
    _digits("LT", 9, 12, allowed=(9, 12), description="9 or 12 digits"),
    _digits("LU", 8, description="8 digits"),
    _digits("LV", 11, description="11 digits"),
    # North Macedonia: MK4032013544513
    _rule("MK", LengthCheck(15), PatternCheck(r"MK[0-9]{13}"), description="MK + 13 digits"),
    _digits("MT", 8, description="8 digits"),
    # Nigeria: 01012345-0001
    _rule(
        "NG",
        LengthCheck(13),
        PatternCheck(r"[0-9]{8}-[0-9]{4}"),
        description="8 digits + dash + 4 digits",
    ),
    # Netherlands: the tenth character is always B, e.g. 123456789B01
    _rule(
        "NL",
        LengthCheck(12),
        PatternCheck(r"[0-9]{9}B[0-9]{2}"),
        description="9 digits + B + 2 digits",
    ),
    # Norway: 123456789 or 123456789MVA
    _rule(
        "NO",
        LengthCheck(9, 12, allowed=(9, 12)),
        PatternCheck(r"[0-9]{9}(?:MVA)?"),
        description="9 digits, optionally followed by MVA",
    ),
    _digits("NZ", 9, description="9 digits"),
    _digits("PL", 10, description="10 digits"),
    _digits("PT", 9, description="9 digits"),
    _digits("RO", 2, 10, description="2 to 10 digits"),
    _digits("RS", 9, description="9 digits"),
    # Russia: INN is 10 or 12 characters, 13 for legacy registrations. Length only.
    _rule("RU", LengthCheck(10, 13, allowed=(10, 12, 13)), description="10, 12 or 13 characters"),
    _digits("SA", 15, description="15 digits"),
    _digits("SE", 12, description="12 digits"),
    _digits("SI", 8, description="8 digits"),
    _digits("SK", 10, description="10 digits"),
    _digits("SM", 5, description="5 digits"),
    _digits("TR", 10, description="10 digits"),
    _digits("UA", 12, description="12 digits"),
    _digits("UZ", 9, description="9 digits"),
]


def _build(rules: list[ValidationRule]) -> Mapping[str, ValidationRule]:
    table: dict[str, ValidationRule] = {}
    for rule in rules:
        if rule.jurisdiction in table:
            raise ValueError(f"duplicate rule for {rule.jurisdiction}")
        table[rule.jurisdiction] = rule
    return MappingProxyType(table)


RULES: Mapping[str, ValidationRule] = _build(_RULES)
