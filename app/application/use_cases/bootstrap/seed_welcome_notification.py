"""Use case inserting the system welcome notification."""

from __future__ import annotations

import logging
from datetime import datetime

from pymongo.database import Database

from app.domain.entities import (
    NOTIFICATION_STATUS_UNREAD,
    NOTIFICATION_TYPE_SYSTEM,
    SYSTEM_USER_ID,
    Notification,
)
from app.infrastructure.repositories import NotificationRepository
from app.utils import utc_now

from .report import OUTCOME_CREATED, OUTCOME_SKIPPED, StepResult

STEP_NAME = "seed_welcome_notification"

WELCOME_TITLE = "Welcome to Budget Tracker"
WELCOME_MESSAGE = "Welcome to Budget Tracker! Start managing your finances today."

logger = logging.getLogger(__name__)


def build_welcome_notification(now: datetime) -> Notification:
    return Notification(
        id=None,
        user_id=SYSTEM_USER_ID,
        type=NOTIFICATION_TYPE_SYSTEM,
        title=WELCOME_TITLE,
        message=WELCOME_MESSAGE,
        status=NOTIFICATION_STATUS_UNREAD,
        created_at=now,
        updated_at=now,
    )


def seed_welcome_notification(
    database: Database, *, now: datetime | None = None
) -> StepResult:
    """Insert the welcome notification unless a previous run already did."""

    repository = NotificationRepository(database)
    existing = repository.find_one(
        user_id=SYSTEM_USER_ID,
        notification_type=NOTIFICATION_TYPE_SYSTEM,
        title=WELCOME_TITLE,
    )
    if existing is not None:
        logger.info("Welcome notification already present (id=%s)", existing.id)
        return StepResult(STEP_NAME, OUTCOME_SKIPPED, "welcome notification exists")

    saved = repository.create(build_welcome_notification(now or utc_now()))
    logger.info("Inserted welcome notification (id=%s)", saved.id)
    return StepResult(STEP_NAME, OUTCOME_CREATED, "welcome notification")
