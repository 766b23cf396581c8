"""Unit tests for the domain exception to HTTP status mapping."""

import json

import pytest
from fastapi import Request

from tracker.core.exception_handlers import _tracker_exception_handler
from tracker.domain.exceptions import (
    AlreadyMemberException,
    AuthenticationException,
    AuthorizationException,
    DuplicateEmailException,
    InvalidVerificationCodeException,
    ResourceNotFoundException,
    SchemaValidationException,
    ServerInactiveException,
    SqlNotConfiguredException,
    TrackerException,
    ValidationException,
)


def _request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


@pytest.mark.parametrize(
    "exc,status",
    [
        (ValidationException("bad"), 400),
        (SchemaValidationException("webhook_payload", []), 400),
        (DuplicateEmailException(), 400),
        (AlreadyMemberException("s", "a"), 400),
        (InvalidVerificationCodeException(), 400),
        (AuthenticationException(), 401),
        (AuthorizationException(), 403),
        (ServerInactiveException(), 403),
        (ResourceNotFoundException("server", "x"), 404),
        (SqlNotConfiguredException(), 503),
        (TrackerException("unmapped"), 400),
    ],
)
def test_status_mapping(exc: TrackerException, status: int) -> None:
    response = _tracker_exception_handler(_request(), exc)
    assert response.status_code == status
    assert json.loads(response.body) == exc.to_dict()
