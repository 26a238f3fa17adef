"""CLI for recording and checking scores.

Why: Thin shell around the use cases; all validation lives in the domain.
"""

import argparse
import sys

from scorebook.application.dto.score_dto import AddScoreRequest, RemoveScoreRequest
from scorebook.config.composition import (
    build_record_score_use_case,
    build_remove_score_use_case,
    configure_logging,
)
from scorebook.config.settings import AppSettings
from scorebook.domain.errors import DomainError
from scorebook.domain.score import parse_timestamp
from scorebook.domain.score_list import UniqueScoreList


def _print_error(err: BaseException | None) -> None:
    print(f"[ERROR] {type(err).__name__}: {err}")


def cmd_add(args, settings: AppSettings) -> int:
    """Record a single score and print it.

    Returns:
        Exit code (0=success, 1=failure)
    """
    uc = build_record_score_use_case(settings=settings)
    result = uc.execute(AddScoreRequest(title=args.title, value=args.value, date=args.date))
    if result.ok and result.value is not None:
        print(f"✓ {result.value}")
        return 0
    _print_error(result.error)
    return 1


def cmd_batch(args, settings: AppSettings) -> int:
    """Record several scores into one list, apply removals, print the list.

    Every --score and --remove is attempted; the exit code is 1 if any failed.
    """
    scores = UniqueScoreList()
    record = build_record_score_use_case(scores, settings=settings)
    remove = build_remove_score_use_case(scores)
    failures = 0

    for title, value, date in args.score or []:
        result = record.execute(AddScoreRequest(title=title, value=value, date=date))
        if not result.ok:
            _print_error(result.error)
            failures += 1

    for title, value, date in args.remove or []:
        result = remove.execute(RemoveScoreRequest(title=title, value=value, date=date))
        if not result.ok:
            _print_error(result.error)
            failures += 1

    print(f"Scores ({len(scores)}):")
    for i, score in enumerate(scores.sorted_by_date(), 1):
        print(f"[{i}] {score}")
    latest = scores.latest()
    if latest is not None:
        print(f"Latest: {latest}")

    return 1 if failures else 0


def cmd_check_date(args) -> int:
    """Validate a date against the score date pattern."""
    try:
        moment = parse_timestamp(args.text)
    except DomainError as ex:
        _print_error(ex)
        return 1
    print(f"✓ {moment.isoformat(timespec='minutes')}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands.

    Subcommands:
    - add: Record one score
    - batch: Record and remove several scores in one list
    - check-date: Validate a `yyyy-MM-dd HH:mm` date

    Returns:
        Exit code (0=success, 1=failure)
    """
    parser = argparse.ArgumentParser(
        prog="scorebook",
        description="Record dated scores for address book contacts",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # add
    p_add = subparsers.add_parser("add", help="Record one score")
    p_add.add_argument("title", help="Score name, e.g. Midterm")
    p_add.add_argument("value", help="Score value between 0 and 100")
    p_add.add_argument("--date", help="yyyy-MM-dd HH:mm, local time (default: now)")

    # batch
    p_batch = subparsers.add_parser("batch", help="Record several scores into one list")
    p_batch.add_argument(
        "--score",
        nargs=3,
        action="append",
        metavar=("TITLE", "VALUE", "DATE"),
        help="Score to add (repeatable)",
    )
    p_batch.add_argument(
        "--remove",
        nargs=3,
        action="append",
        metavar=("TITLE", "VALUE", "DATE"),
        help="Score to remove after adding (repeatable)",
    )

    # check-date
    p_check = subparsers.add_parser("check-date", help="Validate a score date")
    p_check.add_argument("text", help="Date text, e.g. '2024-03-15 14:30'")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = AppSettings()
    configure_logging(settings)

    # Dispatch to command handlers
    if args.command == "add":
        return cmd_add(args, settings)
    elif args.command == "batch":
        return cmd_batch(args, settings)
    elif args.command == "check-date":
        return cmd_check_date(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
