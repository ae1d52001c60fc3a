"""Domain entity describing a backup operation record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

BACKUP_STATUS_PENDING = "PENDING"
BACKUP_STATUS_COMPLETED = "COMPLETED"
BACKUP_STATUS_FAILED = "FAILED"


@dataclass
class Backup:
    """Record of a backup run owned by a user; the payload lives elsewhere."""

    id: str | None
    user_id: str
    status: str = BACKUP_STATUS_PENDING
    created_at: datetime | None = None


__all__ = [
    "BACKUP_STATUS_COMPLETED",
    "BACKUP_STATUS_FAILED",
    "BACKUP_STATUS_PENDING",
    "Backup",
]
