"""Domain-specific exceptions."""


class FinanceDomainError(Exception):
    """Base exception for the finance domain layer."""


class FinancialAccuracyViolation(FinanceDomainError):
    """Computed metrics broke an accounting identity.

    Attributes:
        context: Label of the computation that produced the metrics.
        errors: Itemized list of violated checks.
    """

    def __init__(self, context: str, errors: list[str]) -> None:
        self.context = context
        self.errors = list(errors)
        message = (
            f"FINANCIAL ACCURACY VIOLATION in {context}:\n"
            + "\n".join(self.errors)
        )
        super().__init__(message)


class RecordDecodeError(FinanceDomainError):
    """A stored financial record does not match its schema.

    Attributes:
        record_kind: Kind of record being decoded (e.g. ``manual_asset``).
        record_id: Identifier of the offending record, if known.
        reason: Human-readable description of the problem.
    """

    def __init__(
        self,
        record_kind: str,
        record_id: str | None,
        reason: str,
    ) -> None:
        self.record_kind = record_kind
        self.record_id = record_id
        self.reason = reason
        super().__init__(
            f"Invalid {record_kind} record {record_id or '<unknown>'}: {reason}"
        )


__all__ = [
    "FinanceDomainError",
    "FinancialAccuracyViolation",
    "RecordDecodeError",
]
