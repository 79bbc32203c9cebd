"""vat-number: formal (syntactic) validation of VAT identification numbers."""
from .models import CheckResult, FailureReason, ValidationRule
from .table import RULES
from .validator import VatValidator, check

__all__ = [
    "CheckResult",
    "FailureReason",
    "ValidationRule",
    "RULES",
    "VatValidator",
    "check",
]
