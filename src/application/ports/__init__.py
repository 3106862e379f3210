"""Application ports package."""

from .database import DatabaseEnginePort
from .financial_data_source import FinancialDataSourcePort
from .summary_repository import SummaryRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "FinancialDataSourcePort",
    "SummaryRepositoryPort",
]
