"""Domain entities exposed by the application."""

from .backup import (
    BACKUP_STATUS_COMPLETED,
    BACKUP_STATUS_FAILED,
    BACKUP_STATUS_PENDING,
    Backup,
)
from .notification import (
    NOTIFICATION_STATUS_READ,
    NOTIFICATION_STATUS_UNREAD,
    NOTIFICATION_TYPE_SYSTEM,
    SYSTEM_USER_ID,
    Notification,
)

__all__ = [
    "Backup",
    "BACKUP_STATUS_PENDING",
    "BACKUP_STATUS_COMPLETED",
    "BACKUP_STATUS_FAILED",
    "Notification",
    "NOTIFICATION_STATUS_UNREAD",
    "NOTIFICATION_STATUS_READ",
    "NOTIFICATION_TYPE_SYSTEM",
    "SYSTEM_USER_ID",
]
