"""Use case caching financial summaries and recording daily snapshots."""

from collections.abc import Callable
from datetime import datetime, timedelta

from src.application.ports.summary_repository import SummaryRepositoryPort
from src.application.use_cases.get_financial_overview import (
    GetFinancialOverviewUseCase,
)
from src.domain.models import CachedSummary, DailySnapshot
from src.domain.services.finance import compute_snapshot_breakdown
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import utc_now

DEFAULT_SUMMARY_TTL = timedelta(minutes=5)
DEFAULT_HISTORY_DAYS = 30


class FinancialSummaryUseCase:
    """Serve cached metrics and keep a daily history of them.

    Every fresh computation goes through GetFinancialOverviewUseCase, so a
    cached summary has always passed the accuracy checks.
    """

    def __init__(
        self,
        overview_use_case: GetFinancialOverviewUseCase,
        summary_repository: SummaryRepositoryPort,
        logger=None,
        ttl: timedelta = DEFAULT_SUMMARY_TTL,
        clock: Callable[[], datetime] | None = None,
        history_days: int = DEFAULT_HISTORY_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            overview_use_case: Use case computing enforced metrics.
            summary_repository: Port storing summaries and snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            ttl: Age after which a stored summary is recomputed.
            clock: Optional callable returning the current aware datetime.
            history_days: Default span of get_history.
        """
        self._overview_use_case = overview_use_case
        self._summary_repository = summary_repository
        self._logger = logger or get_app_logger()
        self._ttl = ttl
        self._clock = clock or utc_now
        self._history_days = history_days

    def get_cached_summary(self, user_id: str) -> CachedSummary:
        """Return the stored summary when fresh, otherwise refresh it.

        Args:
            user_id: Identifier of an already authenticated user.

        Returns:
            CachedSummary: Fresh metrics with their calculation time.
        """
        cached = self._summary_repository.fetch_summary(user_id)
        if cached is not None and not cached.is_stale:
            age = self._clock() - cached.last_calculated_at
            if age < self._ttl:
                self._logger.info(
                    f"Returning cached financial summary for user={user_id} "
                    f"(age={age.total_seconds():.0f}s)"
                )
                return cached
        self._logger.info(f"Calculating fresh financial summary for user={user_id}")
        return self.refresh(user_id)

    def refresh(self, user_id: str) -> CachedSummary:
        """Recompute and store the summary for a user."""
        overview = self._overview_use_case.execute(user_id)
        summary = self._summary_repository.save_summary(
            user_id,
            overview.metrics,
        )
        self._logger.info(
            f"Financial summary cached for user={user_id}: "
            f"net_worth={overview.metrics.net_worth}, version={summary.version}"
        )
        return summary

    def invalidate(self, user_id: str) -> None:
        """Force the next read of the user's summary to recompute it."""
        if self._summary_repository.invalidate_summary(user_id):
            self._logger.info(
                f"Financial summary cache invalidated for user={user_id}"
            )
        else:
            self._logger.warning(
                f"No cached financial summary to invalidate for user={user_id}"
            )

    def save_daily_snapshot(self, user_id: str) -> DailySnapshot:
        """Record today's figures for a user, replacing any earlier run.

        Args:
            user_id: Identifier of an already authenticated user.

        Returns:
            DailySnapshot: The stored snapshot.
        """
        overview = self._overview_use_case.execute(user_id)
        metrics = overview.metrics
        now = self._clock()
        snapshot = DailySnapshot(
            user_id=user_id,
            snapshot_date=now.date(),
            net_worth=metrics.net_worth,
            total_assets=metrics.total_assets,
            total_liabilities=metrics.total_liabilities,
            liquid_assets=metrics.liquid_assets,
            investments=metrics.investments,
            monthly_income=metrics.monthly_income,
            monthly_expenses=metrics.monthly_expenses,
            breakdown=compute_snapshot_breakdown(overview.data),
            created_at=now,
        )
        self._summary_repository.save_snapshot(snapshot)
        self._logger.info(
            f"Daily snapshot saved for user={user_id}, "
            f"date={snapshot.snapshot_date}, net_worth={snapshot.net_worth}"
        )
        return snapshot

    def get_history(
        self,
        user_id: str,
        days: int | None = None,
    ) -> list[DailySnapshot]:
        """Return the snapshots of the last ``days`` days, oldest first."""
        if days is None:
            days = self._history_days
        start_date = (self._clock() - timedelta(days=days)).date()
        return self._summary_repository.fetch_snapshots(user_id, start_date)


__all__ = ["FinancialSummaryUseCase", "CachedSummary", "DailySnapshot"]
