"""Domain models for raw financial records."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class ManualAsset:
    """Asset entered by hand (also used for real estate and pensions).

    Attributes:
        id: Record identifier, referenced by ``Transaction.account_id``.
        name: Display name.
        amount: Originally entered amount.
        asset_type: Free-form type tag used for bucket classification.
        current_balance: Amount adjusted by linked transaction deltas.
    """

    id: str
    name: str
    amount: Decimal
    asset_type: str
    current_balance: Decimal


@dataclass(frozen=True)
class ManualLiability:
    """Liability entered by hand (also used for mortgages)."""

    id: str
    name: str
    amount: Decimal
    liability_type: str


@dataclass(frozen=True)
class LinkedAccount:
    """Account mirrored from a bank or brokerage aggregator."""

    id: str
    name: str
    balance: Decimal
    account_type: str
    subtype: str | None = None
    institution: str = ""


@dataclass(frozen=True)
class CryptoHolding:
    """Crypto exchange account or wallet."""

    id: str
    name: str
    balance: Decimal
    source: str


@dataclass(frozen=True)
class Transaction:
    """Logged income or expense.

    Attributes:
        amount: Non-negative amount; the sign comes from ``direction``.
        direction: ``income`` or ``expense``.
        timestamp: Timezone-aware instant of the transaction.
        account_id: Optional ``ManualAsset.id`` whose balance drifts.
    """

    id: str
    amount: Decimal
    direction: str
    timestamp: datetime
    account_id: str | None = None


@dataclass(frozen=True)
class FinancialData:
    """Every record needed to compute one user's metrics."""

    manual_assets: list[ManualAsset] = field(default_factory=list)
    manual_liabilities: list[ManualLiability] = field(default_factory=list)
    linked_accounts: list[LinkedAccount] = field(default_factory=list)
    crypto_holdings: list[CryptoHolding] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    real_estate_assets: list[ManualAsset] = field(default_factory=list)
    pension_assets: list[ManualAsset] = field(default_factory=list)
    mortgage_liabilities: list[ManualLiability] = field(default_factory=list)


__all__ = [
    "ManualAsset",
    "ManualLiability",
    "LinkedAccount",
    "CryptoHolding",
    "Transaction",
    "FinancialData",
]
