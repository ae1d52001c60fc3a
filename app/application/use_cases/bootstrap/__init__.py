"""Use cases for initialising the budget tracker database."""

from .create_application_user import APP_ROLE, build_role_grants, create_application_user
from .create_collections import create_collections
from .create_indexes import create_indexes
from .report import (
    OUTCOME_CREATED,
    OUTCOME_SKIPPED,
    OUTCOME_UPDATED,
    BootstrapReport,
    StepResult,
)
from .run_bootstrap import CONNECT_STEP, run_bootstrap
from .seed_welcome_notification import (
    WELCOME_MESSAGE,
    WELCOME_TITLE,
    build_welcome_notification,
    seed_welcome_notification,
)
from .select_database import select_database
from .verify_bootstrap import VerificationResult, verify_bootstrap

__all__ = [
    "APP_ROLE",
    "BootstrapReport",
    "CONNECT_STEP",
    "OUTCOME_CREATED",
    "OUTCOME_SKIPPED",
    "OUTCOME_UPDATED",
    "StepResult",
    "VerificationResult",
    "WELCOME_MESSAGE",
    "WELCOME_TITLE",
    "build_role_grants",
    "build_welcome_notification",
    "create_application_user",
    "create_collections",
    "create_indexes",
    "run_bootstrap",
    "seed_welcome_notification",
    "select_database",
    "verify_bootstrap",
]
