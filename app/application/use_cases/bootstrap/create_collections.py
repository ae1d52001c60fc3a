"""Use case for declaring the application's collections."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.application.errors import AlreadyExistsError, classify_error
from app.domain.schema import CollectionDefinition

from .report import OUTCOME_CREATED, OUTCOME_SKIPPED, StepResult

STEP_NAME = "create_collections"

logger = logging.getLogger(__name__)


def create_collections(
    database: Database, definitions: Iterable[CollectionDefinition]
) -> list[StepResult]:
    """Create every collection in ``definitions``, skipping existing ones."""

    results: list[StepResult] = []
    for definition in definitions:
        try:
            database.create_collection(definition.name)
        except PyMongoError as exc:
            error = classify_error(exc)
            if not isinstance(error, AlreadyExistsError):
                error.results = tuple(results)
                raise error from exc
            logger.warning("Collection '%s' already exists; skipping", definition.name)
            results.append(StepResult(STEP_NAME, OUTCOME_SKIPPED, definition.name))
            continue
        logger.info("Created collection '%s'", definition.name)
        results.append(StepResult(STEP_NAME, OUTCOME_CREATED, definition.name))
    return results
