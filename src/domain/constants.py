"""Domain constants for financial metrics."""

from decimal import Decimal

LIQUID_MANUAL_ASSET_TYPES = frozenset(
    {
        "Cash",
        "Wallet",
        "Checking Account",
        "Savings Account",
        "PayPal Balance",
        "Digital Wallet Balance",
        "Bank Account",
    }
)

INVESTMENT_MANUAL_ASSET_TYPES = frozenset(
    {
        "investment",
        "Investment",
        "crypto",
    }
)

DEPOSITORY_ACCOUNT_TYPE = "depository"
INVESTMENT_ACCOUNT_TYPE = "investment"
LIQUID_LINKED_SUBTYPES = frozenset({"checking", "savings"})

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_DIRECTIONS = (INCOME, EXPENSE)

CRYPTO_SOURCES = ("exchange", "wallet")

CASH_FLOW_WINDOW_DAYS = 30

# One cent of slack on the net worth identity.
NET_WORTH_TOLERANCE = Decimal("0.01")
OVERSPENDING_RATIO = Decimal("2")
LOW_LIQUIDITY_RATIO = Decimal("0.5")


__all__ = [
    "LIQUID_MANUAL_ASSET_TYPES",
    "INVESTMENT_MANUAL_ASSET_TYPES",
    "DEPOSITORY_ACCOUNT_TYPE",
    "INVESTMENT_ACCOUNT_TYPE",
    "LIQUID_LINKED_SUBTYPES",
    "INCOME",
    "EXPENSE",
    "TRANSACTION_DIRECTIONS",
    "CRYPTO_SOURCES",
    "CASH_FLOW_WINDOW_DAYS",
    "NET_WORTH_TOLERANCE",
    "OVERSPENDING_RATIO",
    "LOW_LIQUIDITY_RATIO",
]
