"""Domain package for business rules and core models."""

from .exceptions import (
    FinanceDomainError,
    FinancialAccuracyViolation,
    RecordDecodeError,
)
from .models import (
    CachedSummary,
    CryptoHolding,
    DailySnapshot,
    FinancialData,
    FinancialMetrics,
    FinancialOverview,
    LinkedAccount,
    ManualAsset,
    ManualLiability,
    SnapshotBreakdown,
    Transaction,
    ValidationResult,
)
from .services import (
    apply_balance_drift,
    calculate_financial_metrics,
    compute_financial_metrics,
    enforce_financial_accuracy,
    normalize_financial_metrics,
    round_financial_value,
    sum_financial_values,
    validate_financial_metrics,
)

__all__ = [
    "CachedSummary",
    "CryptoHolding",
    "DailySnapshot",
    "FinanceDomainError",
    "FinancialAccuracyViolation",
    "FinancialData",
    "FinancialMetrics",
    "FinancialOverview",
    "LinkedAccount",
    "ManualAsset",
    "ManualLiability",
    "RecordDecodeError",
    "SnapshotBreakdown",
    "Transaction",
    "ValidationResult",
    "apply_balance_drift",
    "calculate_financial_metrics",
    "compute_financial_metrics",
    "enforce_financial_accuracy",
    "normalize_financial_metrics",
    "round_financial_value",
    "sum_financial_values",
    "validate_financial_metrics",
]
