"""Initialise the Budget Tracker MongoDB database.

Creates the application user, the ``notifications`` and ``backups``
collections with their indexes, and the system welcome notification.
Re-running the script is safe: existing objects are reported as skipped.
Run it from the project root with ``python -m scripts.bootstrap_database``.
"""

from __future__ import annotations

import argparse
import logging
from getpass import getpass

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from app.application.errors import BootstrapAbortedError
from app.application.use_cases.bootstrap import run_bootstrap, select_database, verify_bootstrap
from app.config import get_settings
from app.domain.schema import COLLECTIONS
from app.infrastructure.database import create_client


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the bootstrap."""

    parser = argparse.ArgumentParser(
        description="Create the Budget Tracker database user, collections and indexes.",
    )
    parser.add_argument(
        "--skip-seed",
        action="store_true",
        help="Do not insert the system welcome notification.",
    )
    parser.add_argument(
        "--verify-only",
        action="store_true",
        help="Only check that collections, indexes and the user exist; change nothing.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to LOG_LEVEL or INFO).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the bootstrap using environment configuration."""

    args = parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    log_level = (args.log_level or settings.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise SystemExit(f"Unknown log level: {log_level}")
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = create_client(settings)
    try:
        if args.verify_only:
            try:
                result = verify_bootstrap(
                    select_database(client, settings),
                    COLLECTIONS,
                    username=settings.mongodb_app_username,
                )
            except PyMongoError as exc:
                raise SystemExit(f"Verification could not run: {exc}") from exc
            if not result.ok:
                raise SystemExit("Verification failed:\n  " + "\n  ".join(result.problems()))
            print(f"Database '{settings.mongodb_database}' matches the expected schema")
            return

        password = settings.mongodb_app_password or getpass(
            f"Password for database user '{settings.mongodb_app_username}': "
        )
        if not password:
            raise SystemExit("No password was provided for the application user.")

        try:
            report = run_bootstrap(
                client, settings, app_password=password, seed=not args.skip_seed
            )
        except BootstrapAbortedError as exc:
            if exc.report is not None:
                for result in exc.report.results:
                    print(f"  {result.describe()}")
            raise SystemExit(f"Bootstrap failed at step '{exc.step}': {exc.cause}") from exc
    finally:
        client.close()

    print(f"Bootstrap of '{report.database}' completed:")
    for result in report.results:
        print(f"  {result.describe()}")


if __name__ == "__main__":
    main()
