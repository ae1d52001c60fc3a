"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_STATUS_UNREAD = "UNREAD"
NOTIFICATION_STATUS_READ = "READ"

NOTIFICATION_TYPE_SYSTEM = "SYSTEM"

SYSTEM_USER_ID = "system"


@dataclass
class Notification:
    """Information message delivered to a single user (or to ``system``)."""

    id: str | None
    user_id: str
    type: str
    title: str
    message: str
    status: str = NOTIFICATION_STATUS_UNREAD
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_unread(self) -> bool:
        return self.status == NOTIFICATION_STATUS_UNREAD


__all__ = [
    "NOTIFICATION_STATUS_READ",
    "NOTIFICATION_STATUS_UNREAD",
    "NOTIFICATION_TYPE_SYSTEM",
    "Notification",
    "SYSTEM_USER_ID",
]
