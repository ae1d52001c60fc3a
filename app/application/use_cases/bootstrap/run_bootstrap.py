"""Use case running the complete database bootstrap."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from app.application.errors import BootstrapAbortedError, BootstrapError, classify_error
from app.config import Settings
from app.domain.schema import COLLECTIONS
from app.infrastructure.database import ping

from .create_application_user import STEP_NAME as USER_STEP, create_application_user
from .create_collections import STEP_NAME as COLLECTIONS_STEP, create_collections
from .create_indexes import STEP_NAME as INDEXES_STEP, create_indexes
from .report import BootstrapReport
from .seed_welcome_notification import (
    STEP_NAME as SEED_STEP,
    seed_welcome_notification,
)
from .select_database import select_database

CONNECT_STEP = "connect"

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run_step(report: BootstrapReport, step: str, action: Callable[[], T]) -> T:
    """Run ``action`` and turn any fatal failure into an abort naming ``step``."""

    try:
        return action()
    except PyMongoError as exc:
        error = classify_error(exc)
        cause: BaseException = exc
    except BootstrapError as exc:
        error = exc
        cause = exc.__cause__ or exc
    report.add(*error.results)
    report.aborted_step = step
    logger.error("Step '%s' failed: %s", step, error)
    raise BootstrapAbortedError(step, error, report) from cause


def run_bootstrap(
    client: MongoClient,
    settings: Settings,
    *,
    app_password: str | None = None,
    seed: bool = True,
) -> BootstrapReport:
    """Initialise the target database and return what each step did.

    Steps run in order: connectivity check, user creation, collections,
    indexes and the welcome notification. Duplicates are skipped; the first
    fatal error raises :class:`BootstrapAbortedError` and stops the run.
    """

    password = app_password or settings.mongodb_app_password
    if not password:
        raise ValueError("A password for the application user is required")

    database = select_database(client, settings)
    report = BootstrapReport(database=database.name)

    _run_step(report, CONNECT_STEP, lambda: ping(client))

    report.add(
        _run_step(
            report,
            USER_STEP,
            lambda: create_application_user(
                database,
                username=settings.mongodb_app_username,
                password=password,
                update_existing=settings.update_existing_user,
            ),
        )
    )
    report.add(
        *_run_step(report, COLLECTIONS_STEP, lambda: create_collections(database, COLLECTIONS))
    )
    report.add(*_run_step(report, INDEXES_STEP, lambda: create_indexes(database, COLLECTIONS)))

    if seed:
        report.add(_run_step(report, SEED_STEP, lambda: seed_welcome_notification(database)))
    else:
        logger.info("Skipping welcome notification seed")

    logger.info(
        "Bootstrap of '%s' finished with %d step results", database.name, len(report.results)
    )
    return report
