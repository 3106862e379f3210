"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from src.domain.models.records import FinancialData


@dataclass(frozen=True)
class FinancialMetrics:
    """Snapshot of the eight headline figures for one user.

    Attributes:
        total_assets: Sum of every asset balance.
        total_liabilities: Sum of every liability amount.
        net_worth: Assets minus liabilities.
        liquid_assets: Cash-equivalent part of the assets.
        monthly_income: Income over the trailing window.
        monthly_expenses: Expenses over the trailing window.
        monthly_cash_flow: Income minus expenses.
        investments: Growth or risk part of the assets.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    liquid_assets: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_cash_flow: Decimal
    investments: Decimal


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the accuracy checks."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True when no hard check failed."""
        return not self.errors


@dataclass(frozen=True)
class FinancialOverview:
    """Records after balance drift, plus the enforced metrics."""

    data: FinancialData
    metrics: FinancialMetrics


@dataclass(frozen=True)
class SnapshotBreakdown:
    """Asset and liability totals per reporting category."""

    cash: Decimal = Decimal("0")
    investments: Decimal = Decimal("0")
    crypto: Decimal = Decimal("0")
    real_estate: Decimal = Decimal("0")
    pension: Decimal = Decimal("0")
    credit_cards: Decimal = Decimal("0")
    loans: Decimal = Decimal("0")
    mortgages: Decimal = Decimal("0")


@dataclass(frozen=True)
class DailySnapshot:
    """Net worth figures recorded once per user per day."""

    user_id: str
    snapshot_date: date
    net_worth: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    liquid_assets: Decimal
    investments: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    breakdown: SnapshotBreakdown
    created_at: datetime


@dataclass(frozen=True)
class CachedSummary:
    """Stored metrics with their freshness metadata."""

    metrics: FinancialMetrics
    last_calculated_at: datetime
    version: int
    is_stale: bool = False


__all__ = [
    "FinancialMetrics",
    "ValidationResult",
    "FinancialOverview",
    "SnapshotBreakdown",
    "DailySnapshot",
    "CachedSummary",
]
