"""Tests for the SQLAlchemy summary repository."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    DailySnapshot,
    FinancialMetrics,
    SnapshotBreakdown,
)
from src.infrastructure import summary_repository as repo_module
from src.infrastructure.summary_repository import SqlAlchemySummaryRepository

NOW = datetime(2024, 4, 1, 6, 0, tzinfo=timezone.utc)


class FakeRow:
    def __init__(self, **mapping) -> None:
        self._mapping = mapping


class _FakeResult:
    def __init__(self, rows, rowcount=0) -> None:
        self._rows = rows
        self.rowcount = rowcount

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None


def _context(conn: MagicMock) -> MagicMock:
    context = MagicMock()
    context.__enter__.return_value = conn
    return context


def _build_db_port():
    engine = MagicMock()
    read_conn = MagicMock()
    write_conn = MagicMock()
    engine.connect.return_value = _context(read_conn)
    engine.begin.return_value = _context(write_conn)
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return db_port, engine, read_conn, write_conn


def _metrics() -> FinancialMetrics:
    return FinancialMetrics(
        total_assets=Decimal("10.00"),
        total_liabilities=Decimal("4.00"),
        net_worth=Decimal("6.00"),
        liquid_assets=Decimal("10.00"),
        monthly_income=Decimal("1.00"),
        monthly_expenses=Decimal("0.50"),
        monthly_cash_flow=Decimal("0.50"),
        investments=Decimal("0.00"),
    )


def _summary_row(**overrides) -> FakeRow:
    values = {
        "total_assets": "10.00",
        "total_liabilities": "4.00",
        "net_worth": "6.00",
        "liquid_assets": "10.00",
        "monthly_income": "1.00",
        "monthly_expenses": "0.50",
        "monthly_cash_flow": "0.50",
        "investments": "0.00",
        "last_calculated_at": "2024-04-01T05:00:00+00:00",
        "version": 4,
        "is_stale": 0,
    }
    values.update(overrides)
    return FakeRow(**values)


def test_tables_are_created_once() -> None:
    """Table DDL should run on first use only."""
    db_port, _, read_conn, write_conn = _build_db_port()
    read_conn.execute.return_value = _FakeResult([])
    repository = SqlAlchemySummaryRepository(db_port, clock=lambda: NOW)

    repository.fetch_summary("user-1")
    repository.fetch_summary("user-1")

    assert write_conn.exec_driver_sql.call_count == 2
    statements = [c.args[0] for c in write_conn.exec_driver_sql.call_args_list]
    assert statements == [
        repo_module.CREATE_SUMMARIES_SQL,
        repo_module.CREATE_SNAPSHOTS_SQL,
    ]


def test_fetch_summary_converts_row() -> None:
    """Stored strings should come back as Decimal and aware datetimes."""
    db_port, _, read_conn, _ = _build_db_port()
    read_conn.execute.return_value = _FakeResult([_summary_row()])
    repository = SqlAlchemySummaryRepository(db_port)

    summary = repository.fetch_summary("user-1")

    assert summary.metrics == _metrics()
    assert summary.last_calculated_at == datetime(
        2024, 4, 1, 5, 0, tzinfo=timezone.utc
    )
    assert summary.version == 4
    assert summary.is_stale is False


def test_fetch_summary_returns_none_when_missing() -> None:
    """Unknown users have no summary."""
    db_port, _, read_conn, _ = _build_db_port()
    read_conn.execute.return_value = _FakeResult([])

    assert SqlAlchemySummaryRepository(db_port).fetch_summary("x") is None


def test_save_summary_bumps_version() -> None:
    """Saving should replace the row with the next version."""
    db_port, _, _, write_conn = _build_db_port()
    write_conn.execute.side_effect = [
        _FakeResult([_summary_row(version=2)]),
        _FakeResult([]),
        _FakeResult([]),
    ]
    repository = SqlAlchemySummaryRepository(db_port, clock=lambda: NOW)

    summary = repository.save_summary("user-1", _metrics())

    assert summary.version == 3
    assert summary.last_calculated_at == NOW
    insert_call = write_conn.execute.call_args_list[2]
    assert insert_call.args[0] is repo_module.INSERT_SUMMARY_SQL
    params = insert_call.args[1]
    assert params["net_worth"] == "6.00"
    assert params["version"] == 3
    assert params["is_stale"] is False
    assert params["last_calculated_at"] == NOW.isoformat()


def test_save_summary_starts_at_version_one() -> None:
    """The first summary of a user should be version 1."""
    db_port, _, _, write_conn = _build_db_port()
    write_conn.execute.return_value = _FakeResult([])
    repository = SqlAlchemySummaryRepository(db_port, clock=lambda: NOW)

    assert repository.save_summary("user-1", _metrics()).version == 1


def test_invalidate_summary_reports_rowcount() -> None:
    """Invalidation returns whether a row was marked stale."""
    db_port, _, _, write_conn = _build_db_port()
    write_conn.execute.side_effect = [
        _FakeResult([], rowcount=1),
        _FakeResult([], rowcount=0),
    ]
    repository = SqlAlchemySummaryRepository(db_port)

    assert repository.invalidate_summary("user-1") is True
    assert repository.invalidate_summary("user-2") is False


def test_save_and_fetch_snapshots() -> None:
    """Snapshots should be upserted and read back oldest first."""
    db_port, _, read_conn, write_conn = _build_db_port()
    snapshot = DailySnapshot(
        user_id="user-1",
        snapshot_date=date(2024, 4, 1),
        net_worth=Decimal("6.00"),
        total_assets=Decimal("10.00"),
        total_liabilities=Decimal("4.00"),
        liquid_assets=Decimal("10.00"),
        investments=Decimal("0.00"),
        monthly_income=Decimal("1.00"),
        monthly_expenses=Decimal("0.50"),
        breakdown=SnapshotBreakdown(cash=Decimal("10.00"), loans=Decimal("4")),
        created_at=NOW,
    )
    repository = SqlAlchemySummaryRepository(db_port)

    repository.save_snapshot(snapshot)

    delete_call, insert_call = write_conn.execute.call_args_list
    assert delete_call.args[1] == {
        "user_id": "user-1",
        "snapshot_date": "2024-04-01",
    }
    params = insert_call.args[1]
    assert params["breakdown_cash"] == "10.00"
    assert params["breakdown_loans"] == "4"
    assert params["breakdown_crypto"] == "0"
    assert params["created_at"] == NOW.isoformat()

    stored = {key: value for key, value in params.items()}
    read_conn.execute.return_value = _FakeResult([FakeRow(**stored)])

    history = repository.fetch_snapshots("user-1", date(2024, 3, 1))

    assert history == [snapshot]
    query, query_params = read_conn.execute.call_args.args
    assert query is repo_module.SELECT_SNAPSHOTS_SQL
    assert query_params == {"user_id": "user-1", "start_date": "2024-03-01"}
