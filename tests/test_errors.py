"""Tests for translating driver errors into bootstrap errors."""

from __future__ import annotations

import pytest
from pymongo.errors import (
    AutoReconnect,
    CollectionInvalid,
    NetworkTimeout,
    OperationFailure,
    ServerSelectionTimeoutError,
)

from app.application.errors import (
    AlreadyExistsError,
    BootstrapAbortedError,
    BootstrapError,
    ConnectionFailureError,
    PermissionDeniedError,
    classify_error,
)


@pytest.mark.parametrize(
    ("driver_error", "expected"),
    [
        (ServerSelectionTimeoutError("no servers"), ConnectionFailureError),
        (AutoReconnect("connection reset"), ConnectionFailureError),
        (NetworkTimeout("timed out"), ConnectionFailureError),
        (CollectionInvalid("collection notifications already exists"), AlreadyExistsError),
        (OperationFailure("User already exists", code=51003), AlreadyExistsError),
        (OperationFailure("Collection already exists", code=48), AlreadyExistsError),
        (OperationFailure("Index already exists", code=68), AlreadyExistsError),
        (OperationFailure("Index with name differs", code=85), AlreadyExistsError),
        (OperationFailure("Index key specs conflict", code=86), AlreadyExistsError),
        (OperationFailure("not authorized", code=13), PermissionDeniedError),
        (OperationFailure("Authentication failed", code=18), PermissionDeniedError),
        (OperationFailure("bad value", code=2), BootstrapError),
    ],
)
def test_classify_error(driver_error, expected):
    error = classify_error(driver_error)

    assert type(error) is expected


def test_only_duplicates_are_non_fatal():
    assert AlreadyExistsError.fatal is False
    assert ConnectionFailureError.fatal is True
    assert PermissionDeniedError.fatal is True


def test_aborted_error_names_step():
    cause = ConnectionFailureError("connection refused")

    error = BootstrapAbortedError("create_collections", cause)

    assert error.step == "create_collections"
    assert error.cause is cause
    assert "create_collections" in str(error)
