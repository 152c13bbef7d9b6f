"""Command-line demo entry point."""

import argparse
import sys
from typing import Optional, Sequence, Union

from ledger.app_context import AppContext
from ledger.config.logging_config import setup_logging
from ledger.config.settings import Settings, get_settings
from ledger.core.exceptions import AppError
from ledger.domain.models import Account, Seminar, UNASSIGNED_ID, Workshop
from ledger.domain.views import AccountView


def format_account(account: Union[Account, AccountView]) -> str:
    """One-line human readable account summary."""
    return f"[{account.account_id}] {account.name}: {account.balance:.2f}"


def print_accounts(ctx: AppContext, title: str) -> None:
    print(f"\n{title}")
    if ctx.settings.json_output:
        print(ctx.ledger.summarize().model_dump_json(indent=2))
        return
    for account in ctx.ledger.list_accounts():
        print(format_account(account))


def run_accounts_demo(ctx: AppContext) -> None:
    """Walk through the account lifecycle, printing each outcome."""
    repo = ctx.accounts

    for name, balance in (("Alice", 1000.0), ("Bob", 2000.0)):
        try:
            account_id = repo.insert(Account(UNASSIGNED_ID, name, balance))
        except AppError as exc:
            print(f"Error: {exc.message}")
        else:
            print(f"Added account with ID: {account_id}")

    print_accounts(ctx, "All accounts:")

    found = repo.get(1)
    if found is not None:
        print(f"\nFound account: {format_account(found)}")

    try:
        repo.update_balance(1, 1500.0)
    except AppError as exc:
        print(f"Error updating balance: {exc.message}")
    else:
        print("Updated account 1 balance")

    try:
        removed = repo.remove(2)
    except AppError as exc:
        print(f"Error: {exc.message}")
    else:
        print(f"Removed account: {format_account(removed)}")

    if repo.get(2) is None:
        print("Account with ID 2 not found")

    try:
        repo.insert(Account(1, "Mallory", 0.0))
    except AppError as exc:
        print(f"Error: {exc.message}")

    print_accounts(ctx, "Remaining accounts:")


def run_courses_demo(ctx: AppContext) -> None:
    """Print an overview line for each sample course."""
    courses = [
        Workshop(
            title="Python Programming Workshop",
            instructor="Alice Smith",
            duration="3",
        ),
        Seminar(
            title="Advanced Python Seminar",
            speaker="Bob Johnson",
            location="Room 101",
        ),
    ]
    for line in ctx.catalog.describe_all(courses):
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger",
        description="In-memory account ledger and course catalog demo.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["accounts", "courses", "all"],
        default="all",
        help="which demo to run (default: all)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print account listings as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="override the configured log level (e.g. INFO, DEBUG)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.json:
        overrides["json_output"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = get_settings()
    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})

    ctx = AppContext(settings=settings)
    setup_logging()

    if args.command in ("accounts", "all"):
        run_accounts_demo(ctx)
    if args.command == "all":
        print()
    if args.command in ("courses", "all"):
        run_courses_demo(ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
