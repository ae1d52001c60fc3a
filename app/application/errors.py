"""Error taxonomy for the bootstrap procedure."""

from __future__ import annotations

from pymongo.errors import (
    CollectionInvalid,
    ConnectionFailure,
    OperationFailure,
    PyMongoError,
)

# Server error codes relevant to the bootstrap.
UNAUTHORIZED = 13
AUTHENTICATION_FAILED = 18
NAMESPACE_EXISTS = 48
INDEX_ALREADY_EXISTS = 68
INDEX_OPTIONS_CONFLICT = 85
INDEX_KEY_SPECS_CONFLICT = 86
USER_ALREADY_EXISTS = 51003

PERMISSION_CODES = frozenset({UNAUTHORIZED, AUTHENTICATION_FAILED})
ALREADY_EXISTS_CODES = frozenset(
    {
        NAMESPACE_EXISTS,
        INDEX_ALREADY_EXISTS,
        INDEX_OPTIONS_CONFLICT,
        INDEX_KEY_SPECS_CONFLICT,
        USER_ALREADY_EXISTS,
    }
)


class BootstrapError(Exception):
    """Base class for failures raised while initialising the database."""

    fatal = True
    # StepResults the failing step recorded before it stopped
    results: tuple = ()


class AlreadyExistsError(BootstrapError):
    """The user, collection or index being created is already present."""

    fatal = False


class ConnectionFailureError(BootstrapError):
    """The server could not be reached or the connection dropped."""


class PermissionDeniedError(BootstrapError):
    """The administrative credential lacks the rights for an operation."""


class BootstrapAbortedError(BootstrapError):
    """A fatal error stopped the procedure before all steps ran."""

    def __init__(self, step: str, cause: BootstrapError, report: object = None) -> None:
        super().__init__(f"Bootstrap aborted during step '{step}': {cause}")
        self.step = step
        self.cause = cause
        # partial BootstrapReport of the steps that completed
        self.report = report


def classify_error(exc: PyMongoError) -> BootstrapError:
    """Translate a driver exception into the bootstrap taxonomy."""

    if isinstance(exc, ConnectionFailure):
        return ConnectionFailureError(str(exc))
    if isinstance(exc, CollectionInvalid):
        # raised client side by create_collection when the name is taken
        return AlreadyExistsError(str(exc))
    if isinstance(exc, OperationFailure):
        if exc.code in ALREADY_EXISTS_CODES:
            return AlreadyExistsError(str(exc))
        if exc.code in PERMISSION_CODES:
            return PermissionDeniedError(str(exc))
    return BootstrapError(str(exc))


__all__ = [
    "AlreadyExistsError",
    "BootstrapAbortedError",
    "BootstrapError",
    "ConnectionFailureError",
    "PermissionDeniedError",
    "classify_error",
]
