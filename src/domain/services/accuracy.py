"""Accuracy checks, rounding and precise sums for financial metrics."""

from collections.abc import Iterable
from dataclasses import fields, replace
from decimal import ROUND_HALF_UP, Decimal
import logging
from logging import Logger

from src.domain.constants import (
    LOW_LIQUIDITY_RATIO,
    NET_WORTH_TOLERANCE,
    OVERSPENDING_RATIO,
)
from src.domain.exceptions import FinancialAccuracyViolation
from src.domain.models.finance import FinancialMetrics, ValidationResult
from src.utils.decimal_utils import coerce_decimal

CENT = Decimal("0.01")

_FIELD_LABELS = {
    "total_assets": "Total assets",
    "total_liabilities": "Total liabilities",
    "net_worth": "Net worth",
    "liquid_assets": "Liquid assets",
    "monthly_income": "Monthly income",
    "monthly_expenses": "Monthly expenses",
    "monthly_cash_flow": "Monthly cash flow",
    "investments": "Investments",
}


def validate_financial_metrics(metrics: FinancialMetrics) -> ValidationResult:
    """Check metrics against the accounting identities.

    Ordering checks only run on finite operands; NaN and Infinity values
    are reported by the finiteness check instead.

    Args:
        metrics: Candidate metrics snapshot.

    Returns:
        ValidationResult: Hard errors and advisory warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    assets = metrics.total_assets
    liabilities = metrics.total_liabilities
    net_worth = metrics.net_worth

    if _all_finite(net_worth, assets, liabilities):
        if abs(net_worth - (assets - liabilities)) > NET_WORTH_TOLERANCE:
            errors.append(
                f"Net worth calculation error: {net_worth} ≠ "
                f"{assets} - {liabilities}"
            )
    if _all_finite(assets) and assets < 0:
        errors.append(f"Total assets cannot be negative: {assets}")
    if _all_finite(liabilities) and liabilities < 0:
        errors.append(f"Total liabilities cannot be negative: {liabilities}")
    if _all_finite(metrics.liquid_assets, assets) and (
        metrics.liquid_assets > assets
    ):
        errors.append(
            f"Liquid assets ({metrics.liquid_assets}) cannot exceed "
            f"total assets ({assets})"
        )
    if _all_finite(metrics.investments, assets) and (
        metrics.investments > assets
    ):
        errors.append(
            f"Investments ({metrics.investments}) cannot exceed "
            f"total assets ({assets})"
        )

    for item in fields(metrics):
        value = getattr(metrics, item.name)
        if not _all_finite(value):
            errors.append(
                f"{_FIELD_LABELS[item.name]} must be a finite number: {value}"
            )

    income = metrics.monthly_income
    expenses = metrics.monthly_expenses
    liquid = metrics.liquid_assets
    if _all_finite(income, expenses) and expenses > income * OVERSPENDING_RATIO:
        warnings.append(
            f"Monthly expenses ({expenses}) are more than 2x "
            f"monthly income ({income})"
        )
    if _all_finite(liquid, expenses) and liquid < expenses * LOW_LIQUIDITY_RATIO:
        if expenses > 0:
            months = (liquid / expenses).quantize(
                Decimal("0.1"),
                rounding=ROUND_HALF_UP,
            )
            warnings.append(
                f"Low liquid assets: only {months} months of expenses"
            )
        else:
            warnings.append(f"Low liquid assets: {liquid}")

    return ValidationResult(errors=errors, warnings=warnings)


def enforce_financial_accuracy(
    metrics: FinancialMetrics,
    context: str,
    logger: Logger | None = None,
) -> None:
    """Raise when metrics fail validation, log warnings otherwise.

    Args:
        metrics: Metrics snapshot to check.
        context: Label of the calling computation, embedded in the error.
        logger: Optional logger for the violation and the warnings; the
            module logger is used when omitted.

    Raises:
        FinancialAccuracyViolation: If any hard check fails.
    """
    logger = logger or logging.getLogger(__name__)
    validation = validate_financial_metrics(metrics)
    if not validation.is_valid:
        violation = FinancialAccuracyViolation(context, validation.errors)
        logger.error(str(violation))
        raise violation
    if validation.warnings:
        logger.warning(
            f"Financial warnings in {context}: "
            + "; ".join(validation.warnings)
        )


def round_financial_value(value) -> Decimal:
    """Round a value to cents with ROUND_HALF_UP.

    NaN and Infinity are returned unchanged so validation can report them.

    Args:
        value: Decimal, int, float or numeric string.

    Returns:
        Decimal: Value quantized to two decimal places.
    """
    amount = coerce_decimal(value)
    if not amount.is_finite():
        return amount
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def normalize_financial_metrics(metrics: FinancialMetrics) -> FinancialMetrics:
    """Return a new snapshot with every field rounded to cents."""
    return replace(
        metrics,
        **{
            item.name: round_financial_value(getattr(metrics, item.name))
            for item in fields(metrics)
        },
    )


def sum_financial_values(values: Iterable) -> Decimal:
    """Sum monetary values exactly; an empty iterable sums to zero."""
    return sum((coerce_decimal(value) for value in values), Decimal("0"))


def add_financial_values(a, b) -> Decimal:
    """Add two monetary values exactly."""
    return coerce_decimal(a) + coerce_decimal(b)


def subtract_financial_values(a, b) -> Decimal:
    """Subtract ``b`` from ``a`` exactly."""
    return coerce_decimal(a) - coerce_decimal(b)


def _all_finite(*values: Decimal) -> bool:
    return all(value.is_finite() for value in values)


__all__ = [
    "validate_financial_metrics",
    "enforce_financial_accuracy",
    "round_financial_value",
    "normalize_financial_metrics",
    "sum_financial_values",
    "add_financial_values",
    "subtract_financial_values",
]
