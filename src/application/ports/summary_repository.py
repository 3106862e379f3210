"""Port for storing cached summaries and daily snapshots."""

from datetime import date
from typing import Protocol

from src.domain.models import CachedSummary, DailySnapshot, FinancialMetrics


class SummaryRepositoryPort(Protocol):
    """Port exposing persistence for computed financial summaries."""

    def fetch_summary(self, user_id: str) -> CachedSummary | None:
        """Return the stored summary for a user, if any."""

    def save_summary(
        self,
        user_id: str,
        metrics: FinancialMetrics,
    ) -> CachedSummary:
        """Store metrics as the user's summary and return the stored row."""

    def invalidate_summary(self, user_id: str) -> bool:
        """Mark the stored summary stale; return False when none exists."""

    def save_snapshot(self, snapshot: DailySnapshot) -> None:
        """Insert or replace the snapshot for its user and date."""

    def fetch_snapshots(
        self,
        user_id: str,
        start_date: date,
    ) -> list[DailySnapshot]:
        """Return snapshots on or after start_date, oldest first."""


__all__ = ["SummaryRepositoryPort"]
