"""CLI adapter printing the financial overview of a user.

Usage: ``python -m src.adapters.financial_overview_cli <user_id>``.
"""

import argparse
import sys
from collections.abc import Sequence

from src.domain.exceptions import FinancialAccuracyViolation, RecordDecodeError
from src.domain.models import FinancialMetrics
from src.infrastructure.container import build_financial_overview_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger

METRIC_LABELS = (
    ("total_assets", "Total assets"),
    ("total_liabilities", "Total liabilities"),
    ("net_worth", "Net worth"),
    ("liquid_assets", "Liquid assets"),
    ("investments", "Investments"),
    ("monthly_income", "Monthly income"),
    ("monthly_expenses", "Monthly expenses"),
    ("monthly_cash_flow", "Monthly cash flow"),
)


def format_metrics(metrics: FinancialMetrics) -> list[str]:
    """Return one aligned ``label: amount`` line per metric."""
    width = max(len(label) for _, label in METRIC_LABELS)
    return [
        f"{label:<{width}}  {getattr(metrics, name):>14,.2f}"
        for name, label in METRIC_LABELS
    ]


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="financial_overview_cli",
        description="Print the financial metrics of a user.",
    )
    parser.add_argument("user_id", help="Identifier of the user")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Compute and print the overview for the user given on the command line.

    Returns:
        int: Process exit code; argparse exits with 2 on bad usage.
    """
    args = build_parser().parse_args(argv)
    user_id = args.user_id
    logger = get_app_logger()
    get_usage_logger().info(f"financial_overview_cli user={user_id}")

    use_case = build_financial_overview_use_case()
    try:
        overview = use_case.execute(user_id)
    except (FinancialAccuracyViolation, RecordDecodeError) as exc:
        logger.error(f"Financial overview failed for user={user_id}: {exc}")
        print(str(exc), file=sys.stderr)
        return 1

    print(f"Financial overview for {user_id}")
    for line in format_metrics(overview.metrics):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
