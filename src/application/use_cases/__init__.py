"""Application use cases package."""

from .financial_summary import FinancialSummaryUseCase
from .get_financial_overview import (
    FinancialOverview,
    GetFinancialOverviewUseCase,
)

__all__ = [
    "FinancialOverview",
    "FinancialSummaryUseCase",
    "GetFinancialOverviewUseCase",
]
