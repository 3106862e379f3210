"""Use case returning a user's records together with enforced metrics."""

from collections.abc import Callable
from datetime import datetime

from src.application.ports.financial_data_source import (
    FinancialDataSourcePort,
)
from src.domain.constants import CASH_FLOW_WINDOW_DAYS
from src.domain.models import FinancialOverview
from src.domain.services.finance import (
    apply_balance_drift,
    calculate_financial_metrics,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import utc_now


class GetFinancialOverviewUseCase:
    """Compute the financial overview of one user.

    The data source is the only I/O; the metrics are validated before being
    returned and an accuracy violation always propagates to the caller.
    """

    def __init__(
        self,
        data_source: FinancialDataSourcePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
        window_days: int = CASH_FLOW_WINDOW_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            data_source: Port providing the user's decoded records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current aware datetime.
            window_days: Length of the trailing cash flow window.
        """
        self._data_source = data_source
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now
        self._window_days = window_days

    def execute(self, user_id: str) -> FinancialOverview:
        """Return the records and metrics for a user.

        Args:
            user_id: Identifier of an already authenticated user.

        Returns:
            FinancialOverview: Records after balance drift, plus metrics.

        Raises:
            ValueError: If user_id is empty.
            FinancialAccuracyViolation: If the metrics break an identity.
        """
        if not user_id or not user_id.strip():
            raise ValueError("A user id is required")

        raw_data = self._data_source.fetch_financial_data(user_id)
        data = apply_balance_drift(raw_data)
        metrics = calculate_financial_metrics(
            data,
            now=self._clock(),
            logger=self._logger,
            context=f"financial overview for user={user_id}",
            window_days=self._window_days,
        )
        self._logger.info(
            f"Financial overview computed for user={user_id}: "
            f"net_worth={metrics.net_worth}, "
            f"cash_flow={metrics.monthly_cash_flow}"
        )
        return FinancialOverview(data=data, metrics=metrics)


__all__ = ["GetFinancialOverviewUseCase", "FinancialOverview"]
