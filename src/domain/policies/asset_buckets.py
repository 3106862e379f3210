"""Policies classifying records into liquidity and investment buckets."""

from src.domain.constants import (
    DEPOSITORY_ACCOUNT_TYPE,
    INVESTMENT_ACCOUNT_TYPE,
    INVESTMENT_MANUAL_ASSET_TYPES,
    LIQUID_LINKED_SUBTYPES,
    LIQUID_MANUAL_ASSET_TYPES,
)
from src.domain.models.records import LinkedAccount, ManualAsset


def is_liquid_manual_asset(asset: ManualAsset) -> bool:
    """Return True when the asset type tag is a cash-like type."""
    return asset.asset_type in LIQUID_MANUAL_ASSET_TYPES


def is_investment_manual_asset(asset: ManualAsset) -> bool:
    """Return True when the asset type tag is an investment type."""
    return asset.asset_type in INVESTMENT_MANUAL_ASSET_TYPES


def is_liquid_linked_account(account: LinkedAccount) -> bool:
    """Return True for depository checking or savings accounts."""
    return (
        account.account_type == DEPOSITORY_ACCOUNT_TYPE
        and account.subtype in LIQUID_LINKED_SUBTYPES
    )


def is_investment_linked_account(account: LinkedAccount) -> bool:
    """Return True for aggregator accounts of the investment type."""
    return account.account_type == INVESTMENT_ACCOUNT_TYPE


__all__ = [
    "is_liquid_manual_asset",
    "is_investment_manual_asset",
    "is_liquid_linked_account",
    "is_investment_linked_account",
]
