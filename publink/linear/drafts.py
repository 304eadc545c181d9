"""Build Linear issue drafts from Figma events."""

from __future__ import annotations

import typing as typ

from .models import IssueDraft

if typ.TYPE_CHECKING:
    from publink.figma.models import FigmaWebhookEvent

_TITLE_TEMPLATE = "Figma Library Published: {file_key}"
_DESCRIPTION_TEMPLATE = (
    "The Figma file with key {file_key} has published a new library at {timestamp}."
)


def build_issue_draft(event: FigmaWebhookEvent, *, team_id: str) -> IssueDraft:
    """Return the issue draft for a library publish event.

    Parameters
    ----------
    event
        Actionable Figma event.
    team_id
        Linear team from configuration; the event never chooses the team.

    Returns
    -------
    IssueDraft
        Draft whose title and description embed the file key and timestamp.

    """
    return IssueDraft(
        title=_TITLE_TEMPLATE.format(file_key=event.file_key),
        description=_DESCRIPTION_TEMPLATE.format(
            file_key=event.file_key,
            timestamp=event.timestamp,
        ),
        team_id=team_id,
    )
