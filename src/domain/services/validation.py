"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_balance_sign(
    record_kind: str,
    record_id: str,
    amount: Decimal,
    logger: Logger,
) -> None:
    """Warn when a source amount is negative.

    Negative source amounts are legal input but may push totals below zero,
    which the accuracy checks then reject.

    Args:
        record_kind: Kind of record the amount belongs to.
        record_id: Identifier of the record.
        amount: Balance or amount read from the record.
        logger: Logger used for warnings.
    """
    if amount < 0:
        logger.warning(
            f"Negative {record_kind} amount for id={record_id}: {amount}"
        )


__all__ = ["validate_balance_sign"]
