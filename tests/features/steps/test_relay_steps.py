"""Behavioural coverage for relaying Figma webhooks to Linear."""

from __future__ import annotations

import typing as typ

import falcon.testing
import pytest
from pytest_bdd import given, parsers, scenario, then, when

from publink.api.app import AppDependencies, create_app
from publink.linear import LinearConfig
from tests.helpers.figma_payloads import figma_body
from tests.helpers.linear_transport import TEST_ENDPOINT, FakeLinear

if typ.TYPE_CHECKING:
    from falcon.testing.client import Result


class RelayContext(typ.TypedDict, total=False):
    """Shared mutable scenario state."""

    fake: FakeLinear
    client: falcon.testing.TestClient
    response: Result


@scenario("../relay.feature", "Library publish creates a Linear issue")
def test_library_publish_creates_issue() -> None:
    """Wrap the pytest-bdd scenario for library publishes."""


@scenario("../relay.feature", "Other event types are acknowledged without an issue")
def test_other_event_types_are_acknowledged() -> None:
    """Wrap the pytest-bdd scenario for ignored events."""


@scenario("../relay.feature", "Missing credentials fail the publish")
def test_missing_credentials_fail_the_publish() -> None:
    """Wrap the pytest-bdd scenario for missing credentials."""


@scenario("../relay.feature", "Linear rejects the mutation")
def test_linear_rejects_the_mutation() -> None:
    """Wrap the pytest-bdd scenario for rejected mutations."""


@pytest.fixture
def relay_context() -> RelayContext:
    """Provide a fake Linear endpoint for the scenario."""
    return {"fake": FakeLinear()}


def _build_client(context: RelayContext, config: LinearConfig) -> None:
    fake = context["fake"]
    deps = AppDependencies(config=config, issue_client=fake.client(config))
    context["client"] = falcon.testing.TestClient(create_app(deps))


@given("a relay configured with Linear credentials")
def given_configured_relay(relay_context: RelayContext) -> None:
    """Build the relay with a complete Linear configuration."""
    config = LinearConfig(
        api_token="lin_api_bdd",  # noqa: S106 - fake credential
        team_id="team-bdd",
        endpoint=TEST_ENDPOINT,
    )
    _build_client(relay_context, config)


@given("a relay without Linear credentials")
def given_unconfigured_relay(relay_context: RelayContext) -> None:
    """Build the relay with empty Linear credentials."""
    _build_client(relay_context, LinearConfig(endpoint=TEST_ENDPOINT))


@given(parsers.parse("Linear answers with status {status:d}"))
def given_linear_status(relay_context: RelayContext, status: int) -> None:
    """Make the fake Linear endpoint answer with *status*."""
    relay_context["fake"].status_code = status
    relay_context["fake"].payload = {
        "errors": [{"message": "Authentication required"}]
    }


@when(
    parsers.parse(
        "Figma delivers a {event_type} event for file {file_key} at {timestamp}"
    )
)
def when_figma_delivers(
    relay_context: RelayContext, event_type: str, file_key: str, timestamp: str
) -> None:
    """POST a Figma webhook to the relay."""
    body = figma_body(event_type=event_type, file_key=file_key, timestamp=timestamp)
    relay_context["response"] = relay_context["client"].simulate_post(
        "/create-issue", body=body
    )


@then(parsers.parse("the response status is {status:d}"))
def then_response_status(relay_context: RelayContext, status: int) -> None:
    """Assert the HTTP response status code."""
    response = relay_context["response"]
    assert response.status_code == status, (
        f"expected status {status}, got {response.status_code}: {response.text}"
    )


@then(parsers.parse('the response text is "{text}"'))
def then_response_text(relay_context: RelayContext, text: str) -> None:
    """Assert the plain-text response body."""
    assert relay_context["response"].text == text


@then(parsers.parse('the response text mentions "{fragment}"'))
def then_response_mentions(relay_context: RelayContext, fragment: str) -> None:
    """Assert the response body contains *fragment*."""
    assert fragment in relay_context["response"].text


@then(parsers.parse('Linear received one issue titled "{title}"'))
def then_linear_received_issue(relay_context: RelayContext, title: str) -> None:
    """Assert exactly one mutation with *title* reached Linear."""
    bodies = relay_context["fake"].bodies
    assert len(bodies) == 1, f"expected one request, got {len(bodies)}"
    assert bodies[0]["variables"]["input"]["title"] == title


@then("Linear received no requests")
def then_linear_received_nothing(relay_context: RelayContext) -> None:
    """Assert no outbound call was made."""
    assert relay_context["fake"].requests == []
