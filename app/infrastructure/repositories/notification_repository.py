"""Persistence helpers for notification documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Iterable

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from app.domain.entities import NOTIFICATION_STATUS_READ, Notification
from app.domain.schema import NOTIFICATIONS_COLLECTION
from app.utils import ensure_utc, utc_now


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, database: Database) -> None:
        self.collection = database[NOTIFICATIONS_COLLECTION]

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        # served by the (userId, createdAt desc) index
        cursor = self.collection.find({"userId": user_id}).sort("createdAt", DESCENDING)
        if limit is not None:
            cursor = cursor.limit(limit)
        return [self._to_entity(document) for document in cursor]

    def list_by_type_and_status(
        self, notification_type: str, status: str
    ) -> Sequence[Notification]:
        cursor = self.collection.find({"type": notification_type, "status": status})
        return [self._to_entity(document) for document in cursor]

    def find_one(
        self, *, user_id: str, notification_type: str, title: str
    ) -> Notification | None:
        document = self.collection.find_one(
            {"userId": user_id, "type": notification_type, "title": title}
        )
        return self._to_entity(document) if document else None

    def create(self, notification: Notification) -> Notification:
        now = utc_now()
        created_at = notification.created_at or now
        document = self._to_document(notification)
        document["createdAt"] = created_at
        document["updatedAt"] = notification.updated_at or created_at
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return self._to_entity(document)

    def mark_as_read(self, notification_ids: Iterable[str], *, user_id: str) -> int:
        ids = [ObjectId(notification_id) for notification_id in notification_ids if notification_id]
        if not ids:
            return 0
        result = self.collection.update_many(
            {"_id": {"$in": ids}, "userId": user_id},
            {"$set": {"status": NOTIFICATION_STATUS_READ, "updatedAt": utc_now()}},
        )
        return result.modified_count

    @staticmethod
    def _to_document(notification: Notification) -> dict[str, Any]:
        return {
            "userId": notification.user_id,
            "type": notification.type,
            "title": notification.title,
            "message": notification.message,
            "status": notification.status,
        }

    @staticmethod
    def _to_entity(document: Mapping[str, Any]) -> Notification:
        identifier = document.get("_id")
        return Notification(
            id=str(identifier) if identifier is not None else None,
            user_id=document["userId"],
            type=document["type"],
            title=document["title"],
            message=document["message"],
            status=document["status"],
            created_at=ensure_utc(document.get("createdAt")),
            updated_at=ensure_utc(document.get("updatedAt")),
        )


__all__ = ["NotificationRepository"]
