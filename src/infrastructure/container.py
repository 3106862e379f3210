"""Composition root for wiring infrastructure adapters."""

from datetime import timedelta

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.financial_data_source import (
    FinancialDataSourcePort,
)
from src.application.ports.summary_repository import SummaryRepositoryPort
from src.application.use_cases.financial_summary import (
    FinancialSummaryUseCase,
)
from src.application.use_cases.get_financial_overview import (
    GetFinancialOverviewUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.financial_data_repository import (
    SqlAlchemyFinancialDataRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.summary_repository import SqlAlchemySummaryRepository


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_financial_data_source(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> FinancialDataSourcePort:
    """Return the data source reading the finance database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinancialDataRepository(
        resolved_db,
        settings=settings or FinanceSettings.from_env(),
        logger=get_app_logger(),
    )


def build_summary_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SummaryRepositoryPort:
    """Return the store for cached summaries and snapshots."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySummaryRepository(resolved_db)


def build_financial_overview_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> GetFinancialOverviewUseCase:
    """Return the overview use case wired to the finance database."""
    return GetFinancialOverviewUseCase(
        data_source=build_financial_data_source(db_port, settings),
        logger=get_app_logger(),
    )


def build_financial_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> FinancialSummaryUseCase:
    """Return the summary use case sharing one database adapter."""
    resolved_db = db_port or build_database_adapter()
    settings = FinanceSettings.from_env()
    return FinancialSummaryUseCase(
        overview_use_case=build_financial_overview_use_case(
            resolved_db,
            settings,
        ),
        summary_repository=build_summary_repository(resolved_db),
        logger=get_app_logger(),
        ttl=timedelta(seconds=settings.summary_ttl_seconds),
        history_days=settings.history_days,
    )


__all__ = [
    "build_database_adapter",
    "build_financial_data_source",
    "build_summary_repository",
    "build_financial_overview_use_case",
    "build_financial_summary_use_case",
]
