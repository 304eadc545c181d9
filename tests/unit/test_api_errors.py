"""Unit tests for publink.api.errors handlers.

Usage
-----
Run with pytest::

    pytest tests/unit/test_api_errors.py

"""

from __future__ import annotations

import falcon.asgi
import falcon.testing
import pytest

from publink.api.errors import handle_linear_error, handle_malformed_payload
from publink.figma import MalformedPayloadError
from publink.linear import (
    IssueCreationFailed,
    LinearConfigMissingError,
    LinearError,
    LinearIssueRejectedError,
    LinearTransportError,
)


class _RaisingResource:
    """Resource that raises the exception stored on the instance."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        raise self._error


def _client(error: Exception) -> falcon.testing.TestClient:
    app = falcon.asgi.App()
    app.add_route("/raise", _RaisingResource(error))
    app.add_error_handler(MalformedPayloadError, handle_malformed_payload)
    app.add_error_handler(LinearError, handle_linear_error)
    return falcon.testing.TestClient(app)


class TestMalformedPayloadHandler:
    """Tests for the 400 mapping."""

    def test_returns_400_with_detail(self) -> None:
        """The decoder detail is returned to the caller."""
        client = _client(MalformedPayloadError.invalid_json("unexpected character"))
        result = client.simulate_post("/raise")

        assert result.status == falcon.HTTP_400
        assert result.text == "Invalid JSON: unexpected character"
        assert result.headers["content-type"].startswith("text/plain")


class TestLinearErrorHandler:
    """Tests for the 500 mapping of Linear failures."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (
                LinearConfigMissingError.missing_settings(["LINEAR_API_KEY"]),
                "Failed to create Linear issue: missing LINEAR_API_KEY in env",
            ),
            (
                LinearTransportError.network_error("refused"),
                "Failed to create Linear issue: Linear API network error: refused",
            ),
            (
                LinearIssueRejectedError.from_failure(
                    IssueCreationFailed(status_code=401, body_excerpt="denied")
                ),
                "Failed to create Linear issue: failed to create issue, "
                "status: 401 Unauthorized, body: denied",
            ),
        ],
        ids=["config-missing", "transport", "rejected"],
    )
    def test_returns_500_with_distinct_message(
        self, error: Exception, expected: str
    ) -> None:
        """Each failure kind keeps its own message."""
        result = _client(error).simulate_post("/raise")

        assert result.status == falcon.HTTP_500
        assert result.text == expected
