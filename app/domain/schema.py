"""Collections and secondary indexes required by the budget tracker."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pymongo import ASCENDING, DESCENDING

NOTIFICATIONS_COLLECTION = "notifications"
BACKUPS_COLLECTION = "backups"


@dataclass(frozen=True)
class IndexDefinition:
    """Ordered key specification of a single index."""

    keys: tuple[tuple[str, int], ...]

    @property
    def name(self) -> str:
        """Return the default name MongoDB assigns to this key specification."""

        return "_".join(f"{field}_{direction}" for field, direction in self.keys)

    def find_in(self, index_information: Mapping[str, Mapping[str, Any]]) -> str | None:
        """Return the name of an existing index with the same key specification.

        ``index_information`` is the mapping returned by
        ``Collection.index_information()``; the index may carry any name.
        """

        wanted = [(field, int(direction)) for field, direction in self.keys]
        for name, info in index_information.items():
            keys = [(field, direction) for field, direction in info.get("key", ())]
            if keys == wanted:
                return name
        return None


@dataclass(frozen=True)
class CollectionDefinition:
    """A collection together with the indexes it must carry."""

    name: str
    indexes: tuple[IndexDefinition, ...] = ()


NOTIFICATIONS = CollectionDefinition(
    name=NOTIFICATIONS_COLLECTION,
    indexes=(
        # per-user recency listing
        IndexDefinition(keys=(("userId", ASCENDING), ("createdAt", DESCENDING))),
        IndexDefinition(keys=(("type", ASCENDING), ("status", ASCENDING))),
    ),
)

BACKUPS = CollectionDefinition(
    name=BACKUPS_COLLECTION,
    indexes=(
        IndexDefinition(keys=(("userId", ASCENDING), ("createdAt", DESCENDING))),
        IndexDefinition(keys=(("status", ASCENDING),)),
    ),
)

COLLECTIONS: tuple[CollectionDefinition, ...] = (NOTIFICATIONS, BACKUPS)


__all__ = [
    "BACKUPS",
    "BACKUPS_COLLECTION",
    "COLLECTIONS",
    "CollectionDefinition",
    "IndexDefinition",
    "NOTIFICATIONS",
    "NOTIFICATIONS_COLLECTION",
]
