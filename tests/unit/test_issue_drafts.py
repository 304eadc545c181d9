"""Unit tests for building Linear issue drafts from Figma events."""

from __future__ import annotations

from publink.figma import FigmaWebhookEvent
from publink.linear import IssueDraft, build_issue_draft


def _event(file_key: str, timestamp: str) -> FigmaWebhookEvent:
    return FigmaWebhookEvent(
        event_type="LIBRARY_PUBLISH",
        file_key=file_key,
        timestamp=timestamp,
        triggered_by="someone",
    )


def test_draft_embeds_file_key_and_timestamp() -> None:
    """Title and description follow the relay's fixed templates."""
    draft = build_issue_draft(
        _event("ABC123", "2024-01-01T00:00:00Z"), team_id="team-42"
    )

    assert draft == IssueDraft(
        title="Figma Library Published: ABC123",
        description=(
            "The Figma file with key ABC123 has published a new library at "
            "2024-01-01T00:00:00Z."
        ),
        team_id="team-42",
    )


def test_team_id_comes_from_configuration() -> None:
    """The Figma team in the event never selects the Linear team."""
    event = FigmaWebhookEvent(
        event_type="LIBRARY_PUBLISH",
        file_key="XYZ",
        timestamp="t",
        webhooks=(),
    )
    assert build_issue_draft(event, team_id="linear-team").team_id == "linear-team"


def test_as_input_uses_graphql_field_names() -> None:
    """``as_input`` produces exactly the ``IssueCreateInput`` fields."""
    draft = IssueDraft(title="T", description="D", team_id="team")
    assert draft.as_input() == {"title": "T", "description": "D", "teamId": "team"}
