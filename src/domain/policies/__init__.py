"""Domain policies package."""

from .asset_buckets import (
    is_investment_linked_account,
    is_investment_manual_asset,
    is_liquid_linked_account,
    is_liquid_manual_asset,
)
from .snapshot_categories import resolve_snapshot_category

__all__ = [
    "is_investment_linked_account",
    "is_investment_manual_asset",
    "is_liquid_linked_account",
    "is_liquid_manual_asset",
    "resolve_snapshot_category",
]
