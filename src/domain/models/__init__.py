"""Domain models package."""

from .finance import (
    CachedSummary,
    DailySnapshot,
    FinancialMetrics,
    FinancialOverview,
    SnapshotBreakdown,
    ValidationResult,
)
from .records import (
    CryptoHolding,
    FinancialData,
    LinkedAccount,
    ManualAsset,
    ManualLiability,
    Transaction,
)

__all__ = [
    "CachedSummary",
    "CryptoHolding",
    "DailySnapshot",
    "FinancialData",
    "FinancialMetrics",
    "FinancialOverview",
    "LinkedAccount",
    "ManualAsset",
    "ManualLiability",
    "SnapshotBreakdown",
    "Transaction",
    "ValidationResult",
]
