"""SQLAlchemy-backed data source for a user's financial records."""

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.financial_data_source import (
    FinancialDataSourcePort,
)
from src.domain.models import FinancialData
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_decoder import (
    decode_crypto_holding,
    decode_linked_account,
    decode_manual_asset,
    decode_manual_liability,
    decode_mortgage_liability,
    decode_pension_asset,
    decode_real_estate_asset,
    decode_transaction,
)
from src.infrastructure.settings import FinanceSettings

T = TypeVar("T")

SELECT_MANUAL_ASSETS_SQL = text(
    """
    SELECT id, name, amount, asset_type
    FROM manual_assets
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_MANUAL_LIABILITIES_SQL = text(
    """
    SELECT id, name, amount, liability_type
    FROM manual_liabilities
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_LINKED_ACCOUNTS_SQL = text(
    """
    SELECT id, name, balance, account_type, subtype, institution
    FROM linked_accounts
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_CRYPTO_HOLDINGS_SQL = text(
    """
    SELECT id, name, balance, source
    FROM crypto_holdings
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, account_id, amount, direction, occurred_at
    FROM transactions
    WHERE user_id = :user_id
    ORDER BY occurred_at DESC
    LIMIT :limit
    """
)

SELECT_REAL_ESTATE_ASSETS_SQL = text(
    """
    SELECT id, name, balance, property_type
    FROM real_estate_assets
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_PENSION_ASSETS_SQL = text(
    """
    SELECT id, name, balance, fund_type
    FROM pension_assets
    WHERE user_id = :user_id
    ORDER BY id
    """
)

SELECT_MORTGAGE_LIABILITIES_SQL = text(
    """
    SELECT id, name, amount
    FROM mortgage_liabilities
    WHERE user_id = :user_id
    ORDER BY id
    """
)


class SqlAlchemyFinancialDataRepository(FinancialDataSourcePort):
    """Read and decode every record of a user from the finance database."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        settings: FinanceSettings | None = None,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            settings: Optional settings; defaults apply when omitted.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._settings = settings or FinanceSettings()
        self._logger = logger or get_app_logger()

    def fetch_financial_data(self, user_id: str) -> FinancialData:
        """Return the decoded record bundle for a user.

        Args:
            user_id: Identifier of an already authenticated user.

        Returns:
            FinancialData: Every record sequence, empty when the user has none.

        Raises:
            RecordDecodeError: If a stored row does not match its schema.
        """
        params = {"user_id": user_id}
        logger = self._logger
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            data = FinancialData(
                manual_assets=self._load(
                    conn,
                    SELECT_MANUAL_ASSETS_SQL,
                    params,
                    lambda row: decode_manual_asset(row, logger),
                ),
                manual_liabilities=self._load(
                    conn,
                    SELECT_MANUAL_LIABILITIES_SQL,
                    params,
                    lambda row: decode_manual_liability(row, logger),
                ),
                linked_accounts=self._load(
                    conn,
                    SELECT_LINKED_ACCOUNTS_SQL,
                    params,
                    lambda row: decode_linked_account(row, logger),
                ),
                crypto_holdings=self._load(
                    conn,
                    SELECT_CRYPTO_HOLDINGS_SQL,
                    params,
                    lambda row: decode_crypto_holding(row, logger),
                ),
                transactions=self._load(
                    conn,
                    SELECT_TRANSACTIONS_SQL,
                    {**params, "limit": self._settings.transaction_limit},
                    decode_transaction,
                ),
                real_estate_assets=self._load(
                    conn,
                    SELECT_REAL_ESTATE_ASSETS_SQL,
                    params,
                    lambda row: decode_real_estate_asset(row, logger),
                ),
                pension_assets=self._load(
                    conn,
                    SELECT_PENSION_ASSETS_SQL,
                    params,
                    lambda row: decode_pension_asset(row, logger),
                ),
                mortgage_liabilities=self._load(
                    conn,
                    SELECT_MORTGAGE_LIABILITIES_SQL,
                    params,
                    lambda row: decode_mortgage_liability(row, logger),
                ),
            )

        self._logger.info(
            f"Fetched financial data for user={user_id}: "
            f"{len(data.manual_assets)} manual assets, "
            f"{len(data.linked_accounts)} linked accounts, "
            f"{len(data.crypto_holdings)} crypto holdings, "
            f"{len(data.transactions)} transactions"
        )
        return data

    @staticmethod
    def _load(
        conn: Connection,
        query,
        params: dict[str, Any],
        decode: Callable[[Any], T],
    ) -> list[T]:
        """Run a query and decode every row.

        Args:
            conn: Open connection to the finance database.
            query: Prepared text query.
            params: Bound parameters.
            decode: Function turning a row mapping into a record.

        Returns:
            list[T]: Decoded records in query order.
        """
        rows = conn.execute(query, params).all()
        return [decode(row._mapping) for row in rows]


__all__ = ["SqlAlchemyFinancialDataRepository"]
