"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Tunables of the finance metrics engine.

    Attributes:
        transaction_limit: Most recent transactions read per user.
        summary_ttl_seconds: Age after which a cached summary is recomputed.
        history_days: Default span of the snapshot history.
    """

    transaction_limit: int = 200
    summary_ttl_seconds: int = 300
    history_days: int = 30

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        defaults = cls()
        return cls(
            transaction_limit=cls._read_positive_int(
                "FINANCE_TRANSACTION_LIMIT",
                defaults.transaction_limit,
                logger,
            ),
            summary_ttl_seconds=cls._read_positive_int(
                "FINANCE_SUMMARY_TTL_SECONDS",
                defaults.summary_ttl_seconds,
                logger,
            ),
            history_days=cls._read_positive_int(
                "FINANCE_HISTORY_DAYS",
                defaults.history_days,
                logger,
            ),
        )

    @staticmethod
    def _read_positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer, falling back to the default.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"{name}={raw!r} is not an integer, using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name}={value} must be positive, using {default}")
            return default
        return value


__all__ = ["FinanceSettings"]
