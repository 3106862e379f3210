"""Domain services package."""

from .accuracy import (
    add_financial_values,
    enforce_financial_accuracy,
    normalize_financial_metrics,
    round_financial_value,
    subtract_financial_values,
    sum_financial_values,
    validate_financial_metrics,
)
from .finance import (
    apply_balance_drift,
    calculate_financial_metrics,
    compute_financial_metrics,
    compute_snapshot_breakdown,
)
from .normalization import normalize_account_type, normalize_type_tag
from .validation import validate_balance_sign

__all__ = [
    "add_financial_values",
    "apply_balance_drift",
    "calculate_financial_metrics",
    "compute_financial_metrics",
    "compute_snapshot_breakdown",
    "enforce_financial_accuracy",
    "normalize_account_type",
    "normalize_financial_metrics",
    "normalize_type_tag",
    "round_financial_value",
    "subtract_financial_values",
    "sum_financial_values",
    "validate_balance_sign",
    "validate_financial_metrics",
]
