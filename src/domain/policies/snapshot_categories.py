"""Keyword policy mapping type tags to snapshot categories."""

CASH = "cash"
INVESTMENTS = "investments"
CRYPTO = "crypto"
REAL_ESTATE = "real_estate"
PENSION = "pension"
CREDIT_CARDS = "credit_cards"
LOANS = "loans"
MORTGAGES = "mortgages"

# First match wins.
_CATEGORY_KEYWORDS = (
    (CRYPTO, ("crypto", "exchange", "wallet")),
    (REAL_ESTATE, ("real", "property")),
    (PENSION, ("pension", "retirement", "401k")),
    (MORTGAGES, ("mortgage",)),
    (CREDIT_CARDS, ("credit", "card")),
    (LOANS, ("loan", "debt")),
    (INVESTMENTS, ("investment",)),
)


def resolve_snapshot_category(
    type_tag: str,
    account_type: str | None = None,
) -> str:
    """Return the snapshot category for a record type tag.

    Args:
        type_tag: Free-form type tag of the record.
        account_type: Coarse aggregator account type, when there is one.

    Returns:
        str: One of the snapshot category names; ``cash`` when nothing
        matches.
    """
    lowered = (type_tag or "").lower()
    lowered_account_type = (account_type or "").lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    if lowered_account_type == "investment":
        return INVESTMENTS
    return CASH


__all__ = [
    "CASH",
    "INVESTMENTS",
    "CRYPTO",
    "REAL_ESTATE",
    "PENSION",
    "CREDIT_CARDS",
    "LOANS",
    "MORTGAGES",
    "resolve_snapshot_category",
]
