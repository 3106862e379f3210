"""Strict decoding of stored rows into financial records.

Every row read from storage goes through one of the ``decode_*`` functions
before reaching the domain. Missing identifiers, missing or non-numeric
amounts, unknown directions and unreadable timestamps raise
``RecordDecodeError`` instead of defaulting to zero.
"""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger
from typing import Any

from src.domain.constants import (
    CRYPTO_SOURCES,
    DEPOSITORY_ACCOUNT_TYPE,
    TRANSACTION_DIRECTIONS,
)
from src.domain.exceptions import RecordDecodeError
from src.domain.models import (
    CryptoHolding,
    LinkedAccount,
    ManualAsset,
    ManualLiability,
    Transaction,
)
from src.domain.services.normalization import (
    normalize_account_type,
    normalize_type_tag,
)
from src.domain.services.validation import validate_balance_sign
from src.utils.date_utils import parse_timestamp
from src.utils.decimal_utils import coerce_decimal

Row = Mapping[str, Any]


def decode_manual_asset(row: Row, logger: Logger) -> ManualAsset:
    """Decode a ``manual_assets`` row; current balance starts at amount."""
    record_id = _require_id(row, "manual_asset")
    amount = _require_amount(row, "amount", "manual_asset", record_id)
    validate_balance_sign("manual_asset", record_id, amount, logger)
    return ManualAsset(
        id=record_id,
        name=_display_name(row, "Unknown Asset"),
        amount=amount,
        asset_type=normalize_type_tag(row.get("asset_type"), "other"),
        current_balance=amount,
    )


def decode_manual_liability(row: Row, logger: Logger) -> ManualLiability:
    """Decode a ``manual_liabilities`` row."""
    record_id = _require_id(row, "manual_liability")
    amount = _require_amount(row, "amount", "manual_liability", record_id)
    validate_balance_sign("manual_liability", record_id, amount, logger)
    return ManualLiability(
        id=record_id,
        name=_display_name(row, "Unknown Liability"),
        amount=amount,
        liability_type=normalize_type_tag(row.get("liability_type"), "other"),
    )


def decode_linked_account(row: Row, logger: Logger) -> LinkedAccount:
    """Decode a ``linked_accounts`` row mirrored from an aggregator."""
    record_id = _require_id(row, "linked_account")
    balance = _require_amount(row, "balance", "linked_account", record_id)
    validate_balance_sign("linked_account", record_id, balance, logger)
    return LinkedAccount(
        id=record_id,
        name=_display_name(row, "Account"),
        balance=balance,
        account_type=(
            normalize_account_type(row.get("account_type"))
            or DEPOSITORY_ACCOUNT_TYPE
        ),
        subtype=normalize_account_type(row.get("subtype")),
        institution=_optional_text(row, "institution"),
    )


def decode_crypto_holding(row: Row, logger: Logger) -> CryptoHolding:
    """Decode a ``crypto_holdings`` row."""
    record_id = _require_id(row, "crypto_holding")
    balance = _require_amount(row, "balance", "crypto_holding", record_id)
    validate_balance_sign("crypto_holding", record_id, balance, logger)
    source = normalize_account_type(row.get("source"))
    if source not in CRYPTO_SOURCES:
        raise RecordDecodeError(
            "crypto_holding",
            record_id,
            f"source must be one of {CRYPTO_SOURCES}, got {row.get('source')!r}",
        )
    return CryptoHolding(
        id=record_id,
        name=_display_name(row, "Crypto Account"),
        balance=balance,
        source=source,
    )


def decode_transaction(row: Row) -> Transaction:
    """Decode a ``transactions`` row.

    Raises:
        RecordDecodeError: On a negative amount, an unknown direction or an
            unreadable timestamp.
    """
    record_id = _require_id(row, "transaction")
    amount = _require_amount(row, "amount", "transaction", record_id)
    if amount < 0:
        raise RecordDecodeError(
            "transaction",
            record_id,
            f"amount must not be negative, got {amount}",
        )
    direction = normalize_account_type(row.get("direction"))
    if direction not in TRANSACTION_DIRECTIONS:
        raise RecordDecodeError(
            "transaction",
            record_id,
            f"direction must be one of {TRANSACTION_DIRECTIONS}, "
            f"got {row.get('direction')!r}",
        )
    try:
        timestamp = parse_timestamp(row.get("occurred_at"))
    except ValueError as exc:
        raise RecordDecodeError("transaction", record_id, str(exc)) from exc
    account_id = str(row.get("account_id") or "").strip()
    return Transaction(
        id=record_id,
        amount=amount,
        direction=direction,
        timestamp=timestamp,
        account_id=account_id or None,
    )


def decode_real_estate_asset(row: Row, logger: Logger) -> ManualAsset:
    """Decode a ``real_estate_assets`` row as a manual asset."""
    return _decode_balance_asset(
        row,
        "real_estate_asset",
        "property_type",
        "residential",
        "Property",
        logger,
    )


def decode_pension_asset(row: Row, logger: Logger) -> ManualAsset:
    """Decode a ``pension_assets`` row as a manual asset."""
    return _decode_balance_asset(
        row,
        "pension_asset",
        "fund_type",
        "pension",
        "Pension Fund",
        logger,
    )


def decode_mortgage_liability(row: Row, logger: Logger) -> ManualLiability:
    """Decode a ``mortgage_liabilities`` row as a manual liability."""
    record_id = _require_id(row, "mortgage_liability")
    amount = _require_amount(row, "amount", "mortgage_liability", record_id)
    validate_balance_sign("mortgage_liability", record_id, amount, logger)
    return ManualLiability(
        id=record_id,
        name=_display_name(row, "Mortgage"),
        amount=amount,
        liability_type="mortgage",
    )


def _decode_balance_asset(
    row: Row,
    record_kind: str,
    type_column: str,
    default_type: str,
    default_name: str,
    logger: Logger,
) -> ManualAsset:
    record_id = _require_id(row, record_kind)
    balance = _require_amount(row, "balance", record_kind, record_id)
    validate_balance_sign(record_kind, record_id, balance, logger)
    return ManualAsset(
        id=record_id,
        name=_display_name(row, default_name),
        amount=balance,
        asset_type=normalize_type_tag(row.get(type_column), default_type),
        current_balance=balance,
    )


def _require_id(row: Row, record_kind: str) -> str:
    value = row.get("id")
    if value is None or not str(value).strip():
        raise RecordDecodeError(record_kind, None, "missing id")
    return str(value).strip()


def _require_amount(
    row: Row,
    column: str,
    record_kind: str,
    record_id: str,
) -> Decimal:
    value = row.get(column)
    if value is None:
        raise RecordDecodeError(record_kind, record_id, f"missing {column}")
    try:
        amount = coerce_decimal(value)
    except ValueError as exc:
        raise RecordDecodeError(record_kind, record_id, str(exc)) from exc
    if not amount.is_finite():
        raise RecordDecodeError(
            record_kind,
            record_id,
            f"{column} must be finite, got {amount}",
        )
    return amount


def _display_name(row: Row, default: str) -> str:
    name = row.get("name")
    if not isinstance(name, str) or not name.strip():
        return default
    return name.strip()


def _optional_text(row: Row, column: str) -> str:
    value = row.get(column)
    if not isinstance(value, str):
        return ""
    return value.strip()


__all__ = [
    "decode_manual_asset",
    "decode_manual_liability",
    "decode_linked_account",
    "decode_crypto_holding",
    "decode_transaction",
    "decode_real_estate_asset",
    "decode_pension_asset",
    "decode_mortgage_liability",
]
