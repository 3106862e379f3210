"""CLI adapter recording today's net worth snapshot for users.

Meant to run once a day from a scheduler:
``python -m src.adapters.daily_snapshot_cli <user_id> [<user_id> ...]``.
"""

import argparse
import sys
from collections.abc import Sequence

from src.domain.exceptions import FinanceDomainError
from src.infrastructure.container import build_financial_summary_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="daily_snapshot_cli",
        description="Save today's net worth snapshot for each user.",
    )
    parser.add_argument(
        "user_ids",
        nargs="+",
        metavar="user_id",
        help="Identifier of a user to snapshot",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Save a snapshot for every user id given on the command line.

    A failing user does not stop the others; the exit code is 1 when at
    least one snapshot could not be saved.
    """
    user_ids = build_parser().parse_args(argv).user_ids
    logger = get_app_logger()
    get_usage_logger().info(f"daily_snapshot_cli users={len(user_ids)}")

    use_case = build_financial_summary_use_case()
    failures = 0
    for user_id in user_ids:
        try:
            snapshot = use_case.save_daily_snapshot(user_id)
        except FinanceDomainError as exc:
            failures += 1
            logger.error(f"Daily snapshot failed for user={user_id}: {exc}")
            continue
        print(
            f"Saved snapshot for {user_id} on {snapshot.snapshot_date}: "
            f"net worth {snapshot.net_worth:,.2f}"
        )

    print(f"Saved {len(user_ids) - failures} of {len(user_ids)} snapshots.")
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
