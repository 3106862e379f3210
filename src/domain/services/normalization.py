"""Domain normalization helpers."""


def normalize_account_type(account_type: str | None) -> str | None:
    """Normalize coarse aggregator account types and subtypes.

    Args:
        account_type: Raw type value from a repository.

    Returns:
        str | None: Lower-cased, stripped value.
    """
    if not account_type:
        return None
    cleaned = account_type.strip()
    return cleaned.lower() if cleaned else None


def normalize_type_tag(type_tag: str | None, default: str) -> str:
    """Normalize free-form type tags of manual records.

    Case is preserved because the liquidity taxonomy matches exact labels.

    Args:
        type_tag: Raw tag value from a repository.
        default: Tag used when the value is missing or blank.

    Returns:
        str: Stripped tag value.
    """
    if not type_tag:
        return default
    cleaned = type_tag.strip()
    return cleaned or default


__all__ = ["normalize_account_type", "normalize_type_tag"]
