"""Use case for resolving the target database."""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.database import Database

from app.config import Settings
from app.infrastructure.database import get_database

logger = logging.getLogger(__name__)


def select_database(client: MongoClient, settings: Settings) -> Database:
    """Return the target database handle; the server creates it on first write."""

    database = get_database(client, settings)
    logger.info("Using database '%s'", database.name)
    return database
