"""
Command-line interface for tunerec batch jobs.

Usage:
    tunerec generate [--user-id ID] [--limit N] [--dry-run] [--verbose]
    tunerec cleanup [--days N]

``generate`` builds recommendations for one user or for every user, one user
at a time. A failure for one user is logged and reported at the end without
stopping the run. ``cleanup`` deletes recommendations past the retention window.
"""

import argparse
import logging
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from tunerec.config.settings import settings
from tunerec.crud.user import user_crud
from tunerec.db.session import SessionLocal
from tunerec.models.user import User
from tunerec.services.recommendations import get_recommendation_service

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    max_per_user: int
    dry_run: bool = False
    users: int = 0
    total_generated: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def average_per_user(self) -> float:
        if not self.users:
            return 0.0
        return round(self.total_generated / self.users, 2)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="tunerec",
        description="Generate and maintain music recommendations",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate",
        help="Generate recommendations for all users or a specific user",
    )
    generate.add_argument(
        "-u", "--user-id",
        type=int,
        default=None,
        help="Generate recommendations for this user ID only",
    )
    generate.add_argument(
        "-l", "--limit",
        type=int,
        default=settings.RECOMMENDATION_DEFAULT_LIMIT,
        help=f"Maximum number of recommendations per user (default: {settings.RECOMMENDATION_DEFAULT_LIMIT})",
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be generated without saving",
    )
    generate.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report per-user counts and run statistics",
    )

    cleanup = subparsers.add_parser(
        "cleanup",
        help="Delete recommendations older than the retention window",
    )
    cleanup.add_argument(
        "--days",
        type=int,
        default=settings.RECOMMENDATION_RETENTION_DAYS,
        help=f"Retention window in days (default: {settings.RECOMMENDATION_RETENTION_DAYS})",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if (settings.DEBUG or verbose) else getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def generate_for_users(
    db: Session,
    users: Sequence[User],
    limit: int,
    dry_run: bool = False,
    timeout_seconds: float = 0,
    clock: Callable[[], float] = time.monotonic,
) -> GenerationReport:
    """Generate (and unless ``dry_run``, save) recommendations user by user."""
    service = get_recommendation_service(db)
    report = GenerationReport(max_per_user=limit, dry_run=dry_run, users=len(users))
    deadline = clock() + timeout_seconds if timeout_seconds > 0 else None

    for index, user in enumerate(users):
        if deadline is not None and clock() >= deadline:
            skipped = len(users) - index
            message = f"Batch timeout of {timeout_seconds:g}s reached, skipped {skipped} remaining users"
            logger.warning(message)
            report.errors.append(message)
            break
        try:
            recommendations = service.generate(user.id, limit)
            if not dry_run and recommendations:
                service.save(recommendations)
        except Exception as e:
            db.rollback()
            logger.exception("Recommendation generation failed for user %s", user.id)
            report.errors.append(f"Error for user {user.label}: {e}")
            continue

        report.total_generated += len(recommendations)
        logger.info("Generated %d recommendations for user: %s", len(recommendations), user.label)

    return report


def print_report(report: GenerationReport, verbose: bool = False) -> None:
    print(f"Generated {report.total_generated} recommendations for {report.users} users")
    print("(DRY RUN - nothing saved)" if report.dry_run else "All recommendations saved to database")

    if report.errors:
        print("Some errors occurred:")
        for error in report.errors:
            print(f"- {error}")

    if verbose and report.total_generated > 0:
        print(f"Total Users: {report.users}")
        print(f"Total Recommendations: {report.total_generated}")
        print(f"Average per User: {report.average_per_user}")
        print(f"Max per User: {report.max_per_user}")


def run_generate(db: Session, args: argparse.Namespace) -> int:
    if args.limit < 1:
        print("Error: --limit must be a positive integer", file=sys.stderr)
        return 1
    if args.dry_run:
        print("DRY RUN MODE - No recommendations will be saved")

    if args.user_id is not None:
        user = user_crud.get(db, args.user_id)
        if not user:
            print(f"Error: User with ID {args.user_id} not found", file=sys.stderr)
            return 1
        users = [user]
    else:
        users = user_crud.get_all(db)

    report = generate_for_users(
        db,
        users,
        args.limit,
        dry_run=args.dry_run,
        timeout_seconds=settings.BATCH_TIMEOUT_SECONDS,
    )
    print_report(report, verbose=args.verbose)
    return 0


def run_cleanup(db: Session, args: argparse.Namespace) -> int:
    if args.days < 1:
        print("Error: --days must be a positive integer", file=sys.stderr)
        return 1
    service = get_recommendation_service(db)
    deleted = service.store.delete_older_than(args.days)
    logger.info("Deleted %d recommendations older than %d days", deleted, args.days)
    print(f"Deleted {deleted} recommendations older than {args.days} days")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    db = SessionLocal()
    try:
        if args.command == "generate":
            return run_generate(db, args)
        return run_cleanup(db, args)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
