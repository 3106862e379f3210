"""Domain services for finance aggregates."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal
from logging import Logger

from src.domain.constants import CASH_FLOW_WINDOW_DAYS, EXPENSE, INCOME
from src.domain.models import (
    FinancialData,
    FinancialMetrics,
    ManualAsset,
    SnapshotBreakdown,
    Transaction,
)
from src.domain.policies.asset_buckets import (
    is_investment_linked_account,
    is_investment_manual_asset,
    is_liquid_linked_account,
    is_liquid_manual_asset,
)
from src.domain.policies.snapshot_categories import (
    CRYPTO,
    MORTGAGES,
    PENSION,
    REAL_ESTATE,
    resolve_snapshot_category,
)
from src.domain.services.accuracy import (
    enforce_financial_accuracy,
    normalize_financial_metrics,
    sum_financial_values,
)


def transaction_delta(transaction: Transaction) -> Decimal:
    """Return the signed effect of a transaction on its account."""
    if transaction.direction == INCOME:
        return transaction.amount
    return -transaction.amount


def apply_balance_drift(data: FinancialData) -> FinancialData:
    """Recompute manual asset balances from their linked transactions.

    Args:
        data: Records as read from the data source.

    Returns:
        FinancialData: Copy whose manual assets carry
        ``current_balance = amount + sum(linked deltas)``.
    """
    deltas: dict[str, list[Decimal]] = {}
    for transaction in data.transactions:
        if transaction.account_id:
            deltas.setdefault(transaction.account_id, []).append(
                transaction_delta(transaction)
            )

    manual_assets = [
        replace(
            asset,
            current_balance=asset.amount
            + sum_financial_values(deltas.get(asset.id, ())),
        )
        for asset in data.manual_assets
    ]
    return replace(data, manual_assets=manual_assets)


def compute_financial_metrics(
    data: FinancialData,
    *,
    now: datetime,
    window_days: int = CASH_FLOW_WINDOW_DAYS,
) -> FinancialMetrics:
    """Reduce a record bundle into un-rounded metrics.

    Manual asset balances are taken as given; run ``apply_balance_drift``
    first to account for linked transactions.

    Args:
        data: Records for a single user.
        now: Timezone-aware reference instant for the cash flow window.
        window_days: Length of the trailing cash flow window.

    Returns:
        FinancialMetrics: Exact Decimal totals, not yet normalized.
    """
    asset_records = _all_manual_assets(data)

    total_assets = sum_financial_values(
        [asset.current_balance for asset in asset_records]
        + [account.balance for account in data.linked_accounts]
        + [holding.balance for holding in data.crypto_holdings]
    )
    total_liabilities = sum_financial_values(
        liability.amount
        for liability in (
            list(data.manual_liabilities) + list(data.mortgage_liabilities)
        )
    )

    liquid_assets = sum_financial_values(
        [
            asset.current_balance
            for asset in asset_records
            if is_liquid_manual_asset(asset)
        ]
        + [
            account.balance
            for account in data.linked_accounts
            if is_liquid_linked_account(account)
        ]
    )
    investments = sum_financial_values(
        [
            asset.current_balance
            for asset in asset_records
            if is_investment_manual_asset(asset)
        ]
        + [
            account.balance
            for account in data.linked_accounts
            if is_investment_linked_account(account)
        ]
        + [holding.balance for holding in data.crypto_holdings]
    )

    window_start = now - timedelta(days=window_days)
    recent = [
        transaction
        for transaction in data.transactions
        if transaction.timestamp >= window_start
    ]
    monthly_income = sum_financial_values(
        t.amount for t in recent if t.direction == INCOME
    )
    monthly_expenses = sum_financial_values(
        t.amount for t in recent if t.direction == EXPENSE
    )

    return FinancialMetrics(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        liquid_assets=liquid_assets,
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        monthly_cash_flow=monthly_income - monthly_expenses,
        investments=investments,
    )


def calculate_financial_metrics(
    data: FinancialData,
    *,
    now: datetime,
    logger: Logger,
    context: str = "calculate_financial_metrics",
    window_days: int = CASH_FLOW_WINDOW_DAYS,
) -> FinancialMetrics:
    """Compute, round and enforce the metrics for a record bundle.

    Args:
        data: Records for a single user, balance drift already applied.
        now: Timezone-aware reference instant for the cash flow window.
        logger: Logger used for warnings and violations.
        context: Label embedded in accuracy violations.
        window_days: Length of the trailing cash flow window.

    Returns:
        FinancialMetrics: Normalized metrics that passed every check.

    Raises:
        FinancialAccuracyViolation: If the metrics break an identity.
    """
    metrics = compute_financial_metrics(
        data,
        now=now,
        window_days=window_days,
    )
    normalized = normalize_financial_metrics(metrics)
    enforce_financial_accuracy(normalized, context, logger)
    return normalized


def compute_snapshot_breakdown(data: FinancialData) -> SnapshotBreakdown:
    """Aggregate balances into the daily snapshot categories.

    Args:
        data: Records for a single user, balance drift already applied.

    Returns:
        SnapshotBreakdown: Totals per category.
    """
    totals: dict[str, list[Decimal]] = {}

    def _add(category: str, amount: Decimal) -> None:
        totals.setdefault(category, []).append(amount)

    for asset in data.manual_assets:
        _add(resolve_snapshot_category(asset.asset_type), asset.current_balance)
    for account in data.linked_accounts:
        _add(
            resolve_snapshot_category(account.account_type, account.account_type),
            account.balance,
        )
    for liability in data.manual_liabilities:
        _add(resolve_snapshot_category(liability.liability_type), liability.amount)
    for holding in data.crypto_holdings:
        _add(CRYPTO, holding.balance)
    for asset in data.real_estate_assets:
        _add(REAL_ESTATE, asset.current_balance)
    for asset in data.pension_assets:
        _add(PENSION, asset.current_balance)
    for liability in data.mortgage_liabilities:
        _add(MORTGAGES, liability.amount)

    return SnapshotBreakdown(
        **{
            category: sum_financial_values(amounts)
            for category, amounts in totals.items()
        }
    )


def _all_manual_assets(data: FinancialData) -> Iterable[ManualAsset]:
    return (
        list(data.manual_assets)
        + list(data.real_estate_assets)
        + list(data.pension_assets)
    )


__all__ = [
    "transaction_delta",
    "apply_balance_drift",
    "compute_financial_metrics",
    "calculate_financial_metrics",
    "compute_snapshot_breakdown",
]
