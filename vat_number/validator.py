from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Mapping
from .models import CheckResult, FailureReason, ValidationRule
from .table import RULES

logger = logging.getLogger(__name__)


def check(jurisdiction: str, code: str) -> bool:
    """Formal validation of a VAT number against the rule for its jurisdiction.

    Unknown jurisdictions are accepted. Never raises for any str input.
    """
    rule = RULES.get(jurisdiction)
    if rule is None:
        logger.debug("No VAT rule for jurisdiction %r, accepting", jurisdiction)
        return True
    return rule.validate(code)


class VatValidator:
    """Configurable dispatcher over a jurisdiction rule table.

    With strict=True unknown (or disabled) jurisdictions are rejected instead
    of accepted. extra_rules add or replace rules for this instance only.
    """

    def __init__(
        self,
        rules: Mapping[str, ValidationRule] | None = None,
        extra_rules: Mapping[str, ValidationRule] | None = None,
        strict: bool = False,
    ) -> None:
        table = dict(RULES if rules is None else rules)
        for jurisdiction, rule in (extra_rules or {}).items():
            if rule.jurisdiction != jurisdiction:
                raise ValueError(
                    f"rule for {rule.jurisdiction!r} registered under {jurisdiction!r}"
                )
            table[jurisdiction] = rule
        self._rules: Mapping[str, ValidationRule] = MappingProxyType(table)
        self._disabled: set[str] = set()
        self.strict = strict

    def disable_jurisdiction(self, jurisdiction: str) -> None:
        self._disabled.add(jurisdiction)

    def enable_jurisdiction(self, jurisdiction: str) -> None:
        self._disabled.discard(jurisdiction)

    def rule_for(self, jurisdiction: str) -> ValidationRule | None:
        if jurisdiction in self._disabled:
            return None
        return self._rules.get(jurisdiction)

    def is_supported(self, jurisdiction: str) -> bool:
        return self.rule_for(jurisdiction) is not None

    def jurisdictions(self) -> list[str]:
        return sorted(j for j in self._rules if j not in self._disabled)

    def explain(self, jurisdiction: str, code: str) -> CheckResult:
        rule = self.rule_for(jurisdiction)
        if rule is None:
            logger.debug(
                "No VAT rule for jurisdiction %r (strict=%s)", jurisdiction, self.strict
            )
            return CheckResult(
                jurisdiction=jurisdiction,
                code=code,
                valid=not self.strict,
                supported=False,
                reason=FailureReason.UNSUPPORTED if self.strict else None,
            )

        reason = rule.first_failure(code)
        return CheckResult(
            jurisdiction=jurisdiction,
            code=code,
            valid=reason is None,
            supported=True,
            reason=reason,
        )

    def check(self, jurisdiction: str, code: str) -> bool:
        return self.explain(jurisdiction, code).valid
