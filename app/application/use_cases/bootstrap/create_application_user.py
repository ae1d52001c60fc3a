"""Use case for creating the application's database account."""

from __future__ import annotations

import logging

from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.application.errors import AlreadyExistsError, classify_error

from .report import OUTCOME_CREATED, OUTCOME_SKIPPED, OUTCOME_UPDATED, StepResult

STEP_NAME = "create_application_user"

# The only grant the application account receives.
APP_ROLE = "readWrite"

logger = logging.getLogger(__name__)


def build_role_grants(database_name: str) -> list[dict[str, str]]:
    """Return the read/write grant scoped to ``database_name`` only."""

    return [{"role": APP_ROLE, "db": database_name}]


def create_application_user(
    database: Database,
    *,
    username: str,
    password: str,
    update_existing: bool = False,
) -> StepResult:
    """Create ``username`` with read/write access to ``database`` only.

    An existing account is left untouched unless ``update_existing`` is set, in
    which case its password and roles are reset to the configured values.
    """

    roles = build_role_grants(database.name)
    try:
        database.command("createUser", username, pwd=password, roles=roles)
    except PyMongoError as exc:
        error = classify_error(exc)
        if not isinstance(error, AlreadyExistsError):
            raise error from exc
        if not update_existing:
            logger.warning("User '%s' already exists on '%s'; skipping", username, database.name)
            return StepResult(STEP_NAME, OUTCOME_SKIPPED, f"user {username} already exists")
    else:
        logger.info("Created user '%s' with role '%s' on '%s'", username, APP_ROLE, database.name)
        return StepResult(STEP_NAME, OUTCOME_CREATED, f"user {username}")

    try:
        database.command("updateUser", username, pwd=password, roles=roles)
    except PyMongoError as exc:
        raise classify_error(exc) from exc
    logger.info("Updated password and roles of existing user '%s'", username)
    return StepResult(STEP_NAME, OUTCOME_UPDATED, f"user {username}")
