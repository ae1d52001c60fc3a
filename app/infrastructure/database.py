"""MongoDB client construction and connectivity checks."""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.database import Database

from app.config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> MongoClient:
    """Build a client for the administrative connection string.

    Connecting is lazy in pymongo, so this never blocks; the configured timeout
    bounds how long the first command waits for a reachable server.
    """

    return MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        connectTimeoutMS=settings.mongodb_timeout_ms,
        tz_aware=True,
        appname="budget-tracker-bootstrap",
    )


def get_database(client: MongoClient, settings: Settings) -> Database:
    """Return the handle of the configured target database.

    MongoDB creates the database lazily on the first write, so obtaining the
    handle has no side effects.
    """

    return client.get_database(settings.mongodb_database)


def ping(client: MongoClient) -> None:
    """Round-trip to the server, raising the driver error when unreachable."""

    client.admin.command("ping")
    logger.debug("MongoDB server responded to ping")


__all__ = ["create_client", "get_database", "ping"]
