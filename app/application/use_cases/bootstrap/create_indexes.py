"""Use case for building the secondary indexes."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.application.errors import AlreadyExistsError, classify_error
from app.domain.schema import CollectionDefinition

from .report import OUTCOME_CREATED, OUTCOME_SKIPPED, StepResult

STEP_NAME = "create_indexes"

logger = logging.getLogger(__name__)


def create_indexes(
    database: Database, definitions: Iterable[CollectionDefinition]
) -> list[StepResult]:
    """Ensure every declared index exists.

    Existing indexes are matched by key specification, whatever their name,
    so the report can tell new indexes from ones left by an earlier run.
    A server-side duplicate or conflict is skipped like any other existing
    object.
    """

    results: list[StepResult] = []
    for definition in definitions:
        collection = database[definition.name]
        try:
            existing = collection.index_information()
            for index in definition.indexes:
                label = f"{definition.name}.{index.name}"
                present = index.find_in(existing)
                if present is not None:
                    logger.info("Index '%s' already present as '%s'", label, present)
                    results.append(StepResult(STEP_NAME, OUTCOME_SKIPPED, label))
                    continue
                try:
                    collection.create_index(list(index.keys))
                except PyMongoError as exc:
                    error = classify_error(exc)
                    if not isinstance(error, AlreadyExistsError):
                        raise
                    logger.warning("Index '%s' conflicts with an existing one; skipping", label)
                    results.append(StepResult(STEP_NAME, OUTCOME_SKIPPED, label))
                    continue
                logger.info("Created index '%s'", label)
                results.append(StepResult(STEP_NAME, OUTCOME_CREATED, label))
        except PyMongoError as exc:
            error = classify_error(exc)
            error.results = tuple(results)
            raise error from exc
    return results
