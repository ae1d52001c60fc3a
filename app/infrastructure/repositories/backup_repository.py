"""Persistence helpers for backup records."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from app.domain.entities import Backup
from app.domain.schema import BACKUPS_COLLECTION
from app.utils import ensure_utc, utc_now


class BackupRepository:
    """Provide CRUD operations for :class:`Backup` records."""

    def __init__(self, database: Database) -> None:
        self.collection = database[BACKUPS_COLLECTION]

    def list_for_user(self, user_id: str, *, limit: int | None = 50) -> Sequence[Backup]:
        cursor = self.collection.find({"userId": user_id}).sort("createdAt", DESCENDING)
        if limit is not None:
            cursor = cursor.limit(limit)
        return [self._to_entity(document) for document in cursor]

    def list_by_status(self, status: str) -> Sequence[Backup]:
        return [self._to_entity(document) for document in self.collection.find({"status": status})]

    def create(self, backup: Backup) -> Backup:
        document: dict[str, Any] = {
            "userId": backup.user_id,
            "status": backup.status,
            "createdAt": backup.created_at or utc_now(),
        }
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return self._to_entity(document)

    def update_status(self, backup_id: str, status: str) -> None:
        result = self.collection.update_one(
            {"_id": ObjectId(backup_id)}, {"$set": {"status": status}}
        )
        if result.matched_count == 0:
            msg = f"Backup with id {backup_id} not found"
            raise ValueError(msg)

    @staticmethod
    def _to_entity(document: Mapping[str, Any]) -> Backup:
        identifier = document.get("_id")
        return Backup(
            id=str(identifier) if identifier is not None else None,
            user_id=document["userId"],
            status=document["status"],
            created_at=ensure_utc(document.get("createdAt")),
        )


__all__ = ["BackupRepository"]
