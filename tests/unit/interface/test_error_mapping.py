"""Unit tests for domain error to HTTP mapping."""

import json

import pytest
from starlette.requests import Request

from agora.domain.error import (
    ConflictError,
    DomainError,
    InternalError,
    InvalidOptionError,
    NotFoundError,
    PollEndedError,
)
from agora.interface.error import domain_error_handler, status_for


def make_request(path: str = "/polls/1/vote") -> Request:
    return Request({"type": "http", "method": "POST", "path": path, "headers": []})


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (NotFoundError("Poll", "x"), 404),
            (PollEndedError("x"), 400),
            (InvalidOptionError("x"), 400),
            (ConflictError("dup"), 409),
            (InternalError("boom"), 500),
            (DomainError("unclassified"), 500),
        ],
    )
    def test_status_by_code(self, error, expected):
        """Each error code maps to one status."""
        assert status_for(error) == expected


class TestDomainErrorHandler:
    """Tests for domain_error_handler."""

    @pytest.mark.asyncio
    async def test_client_error_body(self):
        """Client errors keep their message."""
        response = await domain_error_handler(make_request(), PollEndedError("x"))

        assert response.status_code == 400
        assert json.loads(response.body) == {
            "detail": "This poll has ended",
            "code": "poll_ended",
        }

    @pytest.mark.asyncio
    async def test_server_error_is_masked(self):
        """Storage details never reach the caller."""
        response = await domain_error_handler(
            make_request(), InternalError("connection refused on 10.0.0.5")
        )

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "detail": "Internal server error",
            "code": "internal",
        }
