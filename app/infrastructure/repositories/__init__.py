"""Repository implementations for infrastructure layer."""

from .backup_repository import BackupRepository
from .notification_repository import NotificationRepository

__all__ = [
    "BackupRepository",
    "NotificationRepository",
]
