"""Tests for the SQLAlchemy financial data repository."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.exceptions import RecordDecodeError
from src.infrastructure import financial_data_repository as repo_module
from src.infrastructure.financial_data_repository import (
    SqlAlchemyFinancialDataRepository,
)
from src.infrastructure.settings import FinanceSettings


class FakeRow:
    def __init__(self, **mapping) -> None:
        self._mapping = mapping


class _FakeResult:
    def __init__(self, rows: list[FakeRow]) -> None:
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(results: list[list[FakeRow]]) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return db_port, conn


def test_fetch_financial_data_decodes_every_table() -> None:
    """Each table should be queried by user and decoded in order."""
    results = [
        [FakeRow(id="m1", name="Cash", amount="100", asset_type="Cash")],
        [FakeRow(id="l1", name="Loan", amount="40", liability_type="Loan")],
        [
            FakeRow(
                id="a1",
                name="Chk",
                balance="10",
                account_type="depository",
                subtype="checking",
                institution="Bank",
            )
        ],
        [FakeRow(id="c1", name="BTC", balance="5", source="exchange")],
        [
            FakeRow(
                id="t1",
                account_id="m1",
                amount="3",
                direction="expense",
                occurred_at="2024-01-01T00:00:00",
            )
        ],
        [FakeRow(id="r1", name="Flat", balance="900", property_type="flat")],
        [FakeRow(id="p1", name="Plan", balance="80", fund_type=None)],
        [FakeRow(id="g1", name="Home loan", amount="700")],
    ]
    db_port, conn = _build_db_port(results)
    logger = MagicMock()

    repository = SqlAlchemyFinancialDataRepository(
        db_port,
        settings=FinanceSettings(transaction_limit=25),
        logger=logger,
    )

    data = repository.fetch_financial_data("user-1")

    assert [asset.id for asset in data.manual_assets] == ["m1"]
    assert data.manual_liabilities[0].amount == Decimal("40")
    assert data.linked_accounts[0].subtype == "checking"
    assert data.crypto_holdings[0].source == "exchange"
    assert data.transactions[0].account_id == "m1"
    assert data.real_estate_assets[0].asset_type == "flat"
    assert data.pension_assets[0].asset_type == "pension"
    assert data.mortgage_liabilities[0].liability_type == "mortgage"

    calls = conn.execute.call_args_list
    assert len(calls) == 8
    assert calls[0].args == (repo_module.SELECT_MANUAL_ASSETS_SQL, {"user_id": "user-1"})
    assert calls[4].args == (
        repo_module.SELECT_TRANSACTIONS_SQL,
        {"user_id": "user-1", "limit": 25},
    )
    logger.info.assert_called_once()


def test_fetch_financial_data_returns_empty_lists() -> None:
    """A user without records should get empty collections."""
    db_port, _ = _build_db_port([[] for _ in range(8)])

    data = SqlAlchemyFinancialDataRepository(
        db_port,
        logger=MagicMock(),
    ).fetch_financial_data("nobody")

    assert data.manual_assets == []
    assert data.transactions == []
    assert data.mortgage_liabilities == []


def test_fetch_financial_data_propagates_decode_errors() -> None:
    """A malformed row should raise instead of being skipped."""
    db_port, _ = _build_db_port(
        [[FakeRow(id="m1", name="Broken", amount=None, asset_type="Cash")]]
        + [[] for _ in range(7)]
    )
    repository = SqlAlchemyFinancialDataRepository(db_port, logger=MagicMock())

    with pytest.raises(RecordDecodeError, match="missing amount"):
        repository.fetch_financial_data("user-1")
