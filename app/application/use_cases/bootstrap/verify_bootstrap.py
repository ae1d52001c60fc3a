"""Use case checking that a database matches the declared schema."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pymongo.database import Database

from app.domain.schema import CollectionDefinition

from .create_application_user import build_role_grants

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Objects found missing or misconfigured on the server."""

    missing_collections: list[str] = field(default_factory=list)
    missing_indexes: list[str] = field(default_factory=list)
    user_problems: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.missing_collections or self.missing_indexes or self.user_problems)

    def problems(self) -> list[str]:
        return (
            [f"missing collection {name}" for name in self.missing_collections]
            + [f"missing index {label}" for label in self.missing_indexes]
            + self.user_problems
        )


def verify_bootstrap(
    database: Database,
    definitions: Iterable[CollectionDefinition],
    *,
    username: str | None = None,
) -> VerificationResult:
    """Compare the server state with ``definitions`` without writing anything."""

    result = VerificationResult()
    existing_collections = set(database.list_collection_names())
    for definition in definitions:
        if definition.name not in existing_collections:
            result.missing_collections.append(definition.name)
            result.missing_indexes.extend(
                f"{definition.name}.{index.name}" for index in definition.indexes
            )
            continue
        present = database[definition.name].index_information()
        result.missing_indexes.extend(
            f"{definition.name}.{index.name}"
            for index in definition.indexes
            if index.find_in(present) is None
        )

    if username is not None:
        users = database.command("usersInfo", username).get("users", [])
        if not users:
            result.user_problems.append(f"missing user {username}")
        else:
            granted = [
                {"role": grant["role"], "db": grant["db"]} for grant in users[0].get("roles", [])
            ]
            if granted != build_role_grants(database.name):
                result.user_problems.append(f"user {username} has unexpected roles {granted}")

    for problem in result.problems():
        logger.warning("Verification of '%s': %s", database.name, problem)
    return result
