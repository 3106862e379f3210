"""Tests for the strict record decoder."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.exceptions import RecordDecodeError
from src.infrastructure.record_decoder import (
    decode_crypto_holding,
    decode_linked_account,
    decode_manual_asset,
    decode_manual_liability,
    decode_mortgage_liability,
    decode_pension_asset,
    decode_real_estate_asset,
    decode_transaction,
)


def test_decode_manual_asset_sets_current_balance() -> None:
    """Current balance should start at the stored amount."""
    asset = decode_manual_asset(
        {"id": 7, "name": " Piggy ", "amount": "12.50", "asset_type": " Cash "},
        MagicMock(),
    )

    assert asset.id == "7"
    assert asset.name == "Piggy"
    assert asset.amount == Decimal("12.50")
    assert asset.current_balance == Decimal("12.50")
    assert asset.asset_type == "Cash"


def test_decode_manual_asset_defaults_name_and_type() -> None:
    """Blank names and tags should get display defaults."""
    asset = decode_manual_asset(
        {"id": "a1", "name": "", "amount": 3, "asset_type": None},
        MagicMock(),
    )

    assert asset.name == "Unknown Asset"
    assert asset.asset_type == "other"


@pytest.mark.parametrize(
    ("row", "reason"),
    [
        ({"amount": "1"}, "missing id"),
        ({"id": "x"}, "missing amount"),
        ({"id": "x", "amount": "abc"}, "Not a numeric value"),
        ({"id": "x", "amount": "NaN"}, "must be finite"),
    ],
)
def test_decode_manual_asset_rejects_bad_rows(row, reason) -> None:
    """Missing or unreadable amounts should raise instead of defaulting."""
    with pytest.raises(RecordDecodeError, match=reason):
        decode_manual_asset(row, MagicMock())


def test_decode_negative_amount_warns() -> None:
    """Negative balances are kept but logged."""
    logger = MagicMock()

    liability = decode_manual_liability(
        {"id": "l1", "amount": "-20", "liability_type": "Loan"},
        logger,
    )

    assert liability.amount == Decimal("-20")
    assert liability.name == "Unknown Liability"
    logger.warning.assert_called_once()


def test_decode_linked_account_normalizes_types() -> None:
    """Aggregator types should be lower-cased, defaulting to depository."""
    account = decode_linked_account(
        {
            "id": "acc",
            "name": None,
            "balance": Decimal("10"),
            "account_type": None,
            "subtype": " Checking ",
            "institution": None,
        },
        MagicMock(),
    )

    assert account.name == "Account"
    assert account.account_type == "depository"
    assert account.subtype == "checking"
    assert account.institution == ""


def test_decode_crypto_holding_requires_known_source() -> None:
    """Only exchange and wallet sources are accepted."""
    holding = decode_crypto_holding(
        {"id": "c1", "balance": "0.5", "source": "Wallet"},
        MagicMock(),
    )
    assert holding.source == "wallet"
    assert holding.name == "Crypto Account"

    with pytest.raises(RecordDecodeError, match="source"):
        decode_crypto_holding(
            {"id": "c2", "balance": "1", "source": "broker"},
            MagicMock(),
        )


def test_decode_transaction_parses_supported_timestamps() -> None:
    """Timestamps may be datetimes, dates, ISO or DD/MM/YYYY strings."""
    base = {"id": "t", "amount": "5", "direction": "Income"}

    iso = decode_transaction({**base, "occurred_at": "2024-02-01T10:00:00Z"})
    slashed = decode_transaction({**base, "occurred_at": "15/03/2024"})
    naive = decode_transaction(
        {**base, "occurred_at": datetime(2024, 1, 1, 9, 0)}
    )
    plain_date = decode_transaction({**base, "occurred_at": date(2024, 1, 2)})

    assert iso.timestamp == datetime(2024, 2, 1, 10, tzinfo=timezone.utc)
    assert slashed.timestamp == datetime(2024, 3, 15, tzinfo=timezone.utc)
    assert naive.timestamp == datetime(2024, 1, 1, 9, tzinfo=timezone.utc)
    assert plain_date.timestamp == datetime(2024, 1, 2, tzinfo=timezone.utc)
    assert iso.direction == "income"
    assert iso.account_id is None


def test_decode_transaction_keeps_account_link() -> None:
    """A non-blank account id should link the transaction to an asset."""
    transaction = decode_transaction(
        {
            "id": "t",
            "amount": "5",
            "direction": "expense",
            "occurred_at": "2024-01-01",
            "account_id": 42,
        }
    )

    assert transaction.account_id == "42"


@pytest.mark.parametrize(
    ("overrides", "reason"),
    [
        ({"amount": "-1"}, "must not be negative"),
        ({"direction": "transfer"}, "direction"),
        ({"occurred_at": "yesterday"}, "yesterday"),
        ({"occurred_at": None}, "Unsupported timestamp"),
    ],
)
def test_decode_transaction_rejects_bad_rows(overrides, reason) -> None:
    """Invalid transactions should raise RecordDecodeError."""
    row = {
        "id": "t9",
        "amount": "5",
        "direction": "expense",
        "occurred_at": "2024-01-01",
        **overrides,
    }

    with pytest.raises(RecordDecodeError, match=reason) as excinfo:
        decode_transaction(row)

    assert excinfo.value.record_kind == "transaction"
    assert excinfo.value.record_id == "t9"


def test_decode_supplementary_records() -> None:
    """Real estate and pensions become assets, mortgages liabilities."""
    logger = MagicMock()

    house = decode_real_estate_asset(
        {"id": "h", "balance": "250000", "property_type": None},
        logger,
    )
    fund = decode_pension_asset(
        {"id": "p", "name": "Plan", "balance": "1000", "fund_type": "401k"},
        logger,
    )
    mortgage = decode_mortgage_liability({"id": "m", "amount": "9"}, logger)

    assert house.asset_type == "residential"
    assert house.current_balance == Decimal("250000")
    assert house.name == "Property"
    assert fund.asset_type == "401k"
    assert fund.name == "Plan"
    assert mortgage.liability_type == "mortgage"
    assert mortgage.name == "Mortgage"


def test_decode_linked_account_ignores_non_text_institution() -> None:
    """A non-string institution should decode as blank instead of crashing."""
    account = decode_linked_account(
        {
            "id": "acc",
            "name": "Savings",
            "balance": "1",
            "account_type": "depository",
            "subtype": "savings",
            "institution": 12345,
        },
        MagicMock(),
    )

    assert account.institution == ""
