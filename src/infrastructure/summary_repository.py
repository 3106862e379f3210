"""SQLAlchemy-backed storage for cached summaries and daily snapshots."""

from datetime import date
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.summary_repository import SummaryRepositoryPort
from src.domain.models import (
    CachedSummary,
    DailySnapshot,
    FinancialMetrics,
    SnapshotBreakdown,
)
from src.utils.date_utils import parse_timestamp, utc_now
from src.utils.decimal_utils import coerce_decimal

METRIC_COLUMNS = (
    "total_assets",
    "total_liabilities",
    "net_worth",
    "liquid_assets",
    "monthly_income",
    "monthly_expenses",
    "monthly_cash_flow",
    "investments",
)

SNAPSHOT_METRIC_COLUMNS = (
    "net_worth",
    "total_assets",
    "total_liabilities",
    "liquid_assets",
    "investments",
    "monthly_income",
    "monthly_expenses",
)

BREAKDOWN_COLUMNS = (
    "cash",
    "investments",
    "crypto",
    "real_estate",
    "pension",
    "credit_cards",
    "loans",
    "mortgages",
)

CREATE_SUMMARIES_SQL = """
CREATE TABLE IF NOT EXISTS financial_summaries (
    user_id TEXT PRIMARY KEY,
    total_assets NUMERIC(18, 2) NOT NULL,
    total_liabilities NUMERIC(18, 2) NOT NULL,
    net_worth NUMERIC(18, 2) NOT NULL,
    liquid_assets NUMERIC(18, 2) NOT NULL,
    monthly_income NUMERIC(18, 2) NOT NULL,
    monthly_expenses NUMERIC(18, 2) NOT NULL,
    monthly_cash_flow NUMERIC(18, 2) NOT NULL,
    investments NUMERIC(18, 2) NOT NULL,
    last_calculated_at TIMESTAMP NOT NULL,
    version INTEGER NOT NULL,
    is_stale BOOLEAN NOT NULL
)
"""

CREATE_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS daily_snapshots (
    user_id TEXT NOT NULL,
    snapshot_date DATE NOT NULL,
    net_worth NUMERIC(18, 2) NOT NULL,
    total_assets NUMERIC(18, 2) NOT NULL,
    total_liabilities NUMERIC(18, 2) NOT NULL,
    liquid_assets NUMERIC(18, 2) NOT NULL,
    investments NUMERIC(18, 2) NOT NULL,
    monthly_income NUMERIC(18, 2) NOT NULL,
    monthly_expenses NUMERIC(18, 2) NOT NULL,
    breakdown_cash NUMERIC(18, 2) NOT NULL,
    breakdown_investments NUMERIC(18, 2) NOT NULL,
    breakdown_crypto NUMERIC(18, 2) NOT NULL,
    breakdown_real_estate NUMERIC(18, 2) NOT NULL,
    breakdown_pension NUMERIC(18, 2) NOT NULL,
    breakdown_credit_cards NUMERIC(18, 2) NOT NULL,
    breakdown_loans NUMERIC(18, 2) NOT NULL,
    breakdown_mortgages NUMERIC(18, 2) NOT NULL,
    created_at TIMESTAMP NOT NULL,
    PRIMARY KEY (user_id, snapshot_date)
)
"""

SELECT_SUMMARY_SQL = text(
    f"""
    SELECT {", ".join(METRIC_COLUMNS)}, last_calculated_at, version, is_stale
    FROM financial_summaries
    WHERE user_id = :user_id
    """
)

DELETE_SUMMARY_SQL = text(
    "DELETE FROM financial_summaries WHERE user_id = :user_id"
)

INSERT_SUMMARY_SQL = text(
    f"""
    INSERT INTO financial_summaries (
        user_id, {", ".join(METRIC_COLUMNS)},
        last_calculated_at, version, is_stale
    )
    VALUES (
        :user_id, {", ".join(f":{column}" for column in METRIC_COLUMNS)},
        :last_calculated_at, :version, :is_stale
    )
    """
)

INVALIDATE_SUMMARY_SQL = text(
    """
    UPDATE financial_summaries
    SET is_stale = :is_stale
    WHERE user_id = :user_id
    """
)

_SNAPSHOT_COLUMNS = (
    ("user_id", "snapshot_date")
    + SNAPSHOT_METRIC_COLUMNS
    + tuple(f"breakdown_{column}" for column in BREAKDOWN_COLUMNS)
    + ("created_at",)
)

DELETE_SNAPSHOT_SQL = text(
    """
    DELETE FROM daily_snapshots
    WHERE user_id = :user_id AND snapshot_date = :snapshot_date
    """
)

INSERT_SNAPSHOT_SQL = text(
    f"""
    INSERT INTO daily_snapshots ({", ".join(_SNAPSHOT_COLUMNS)})
    VALUES ({", ".join(f":{column}" for column in _SNAPSHOT_COLUMNS)})
    """
)

SELECT_SNAPSHOTS_SQL = text(
    f"""
    SELECT {", ".join(_SNAPSHOT_COLUMNS)}
    FROM daily_snapshots
    WHERE user_id = :user_id AND snapshot_date >= :start_date
    ORDER BY snapshot_date ASC
    """
)


class SqlAlchemySummaryRepository(SummaryRepositoryPort):
    """Persist summaries and snapshots in the finance database.

    Amounts are bound as strings and timestamps as ISO-8601 strings so the
    same statements run on PostgreSQL and SQLite.
    """

    def __init__(self, db_port: DatabaseEnginePort, clock=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            clock: Optional callable returning the current aware datetime.
        """
        self._db_port = db_port
        self._clock = clock or utc_now
        self._tables_ready = False

    def fetch_summary(self, user_id: str) -> CachedSummary | None:
        engine = self._engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_SUMMARY_SQL, {"user_id": user_id}).first()
        if row is None:
            return None
        return self._to_cached_summary(row._mapping)

    def save_summary(
        self,
        user_id: str,
        metrics: FinancialMetrics,
    ) -> CachedSummary:
        engine = self._engine()
        calculated_at = self._clock()
        with engine.begin() as conn:
            previous = conn.execute(
                SELECT_SUMMARY_SQL,
                {"user_id": user_id},
            ).first()
            version = int(previous._mapping["version"]) + 1 if previous else 1
            conn.execute(DELETE_SUMMARY_SQL, {"user_id": user_id})
            conn.execute(
                INSERT_SUMMARY_SQL,
                {
                    "user_id": user_id,
                    **{
                        column: str(getattr(metrics, column))
                        for column in METRIC_COLUMNS
                    },
                    "last_calculated_at": calculated_at.isoformat(),
                    "version": version,
                    "is_stale": False,
                },
            )
        return CachedSummary(
            metrics=metrics,
            last_calculated_at=calculated_at,
            version=version,
            is_stale=False,
        )

    def invalidate_summary(self, user_id: str) -> bool:
        engine = self._engine()
        with engine.begin() as conn:
            result = conn.execute(
                INVALIDATE_SUMMARY_SQL,
                {"user_id": user_id, "is_stale": True},
            )
        return bool(result.rowcount)

    def save_snapshot(self, snapshot: DailySnapshot) -> None:
        params: dict[str, Any] = {
            "user_id": snapshot.user_id,
            "snapshot_date": snapshot.snapshot_date.isoformat(),
            "created_at": snapshot.created_at.isoformat(),
        }
        for column in SNAPSHOT_METRIC_COLUMNS:
            params[column] = str(getattr(snapshot, column))
        for column in BREAKDOWN_COLUMNS:
            params[f"breakdown_{column}"] = str(
                getattr(snapshot.breakdown, column)
            )
        engine = self._engine()
        with engine.begin() as conn:
            conn.execute(
                DELETE_SNAPSHOT_SQL,
                {
                    "user_id": snapshot.user_id,
                    "snapshot_date": params["snapshot_date"],
                },
            )
            conn.execute(INSERT_SNAPSHOT_SQL, params)

    def fetch_snapshots(
        self,
        user_id: str,
        start_date: date,
    ) -> list[DailySnapshot]:
        engine = self._engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_SNAPSHOTS_SQL,
                {"user_id": user_id, "start_date": start_date.isoformat()},
            ).all()
        return [self._to_snapshot(row._mapping) for row in rows]

    def _engine(self) -> Engine:
        """Return the finance engine, creating the tables on first use."""
        engine = self._db_port.get_finance_engine()
        if not self._tables_ready:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_SUMMARIES_SQL)
                conn.exec_driver_sql(CREATE_SNAPSHOTS_SQL)
            self._tables_ready = True
        return engine

    @staticmethod
    def _to_cached_summary(row) -> CachedSummary:
        metrics = FinancialMetrics(
            **{column: coerce_decimal(row[column]) for column in METRIC_COLUMNS}
        )
        return CachedSummary(
            metrics=metrics,
            last_calculated_at=parse_timestamp(row["last_calculated_at"]),
            version=int(row["version"]),
            is_stale=bool(row["is_stale"]),
        )

    @staticmethod
    def _to_snapshot(row) -> DailySnapshot:
        snapshot_date = row["snapshot_date"]
        if isinstance(snapshot_date, str):
            snapshot_date = date.fromisoformat(snapshot_date)
        breakdown = SnapshotBreakdown(
            **{
                column: coerce_decimal(row[f"breakdown_{column}"])
                for column in BREAKDOWN_COLUMNS
            }
        )
        return DailySnapshot(
            user_id=row["user_id"],
            snapshot_date=snapshot_date,
            breakdown=breakdown,
            created_at=parse_timestamp(row["created_at"]),
            **{
                column: coerce_decimal(row[column])
                for column in SNAPSHOT_METRIC_COLUMNS
            },
        )


__all__ = ["SqlAlchemySummaryRepository"]
