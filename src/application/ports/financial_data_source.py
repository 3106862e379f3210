"""Port for reading a user's financial records."""

from typing import Protocol

from src.domain.models import FinancialData


class FinancialDataSourcePort(Protocol):
    """Port exposing every record needed to compute a user's metrics.

    Implementations return fully decoded records: amounts already Decimal,
    timestamps already timezone-aware, missing collections as empty lists.
    """

    def fetch_financial_data(self, user_id: str) -> FinancialData:
        """Return the record bundle for a user."""


__all__ = ["FinancialDataSourcePort"]
