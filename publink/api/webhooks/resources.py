"""Webhook resource turning Figma library publishes into Linear issues.

This module provides ``CreateIssueResource`` which handles
``POST /create-issue``. Other methods are answered with 405 by Falcon
because the resource defines no responder for them.

Usage
-----
Register the resource on the Falcon app::

    app.add_route(
        "/create-issue",
        CreateIssueResource(CreateIssueResourceDependencies(config, client)),
    )

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon

from publink.api.errors import set_plain_text
from publink.figma import decode_event, is_actionable
from publink.linear import (
    IssueCreationFailed,
    LinearConfigMissingError,
    LinearIssueRejectedError,
    LinearTransportError,
    build_issue_draft,
)
from publink.observability import RelayEventLogger

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from publink.figma.models import FigmaWebhookEvent
    from publink.linear.client import LinearIssueClient
    from publink.linear.config import LinearConfig

__all__ = ["CreateIssueResource", "CreateIssueResourceDependencies"]

CREATED_MESSAGE = "Linear issue created successfully"
NOT_HANDLED_MESSAGE = "Event type not handled"


@dc.dataclass(frozen=True, slots=True)
class CreateIssueResourceDependencies:
    """Collaborators for ``CreateIssueResource``.

    Attributes
    ----------
    config
        Linear settings; supplies the team id for drafts.
    issue_client
        Client submitting the ``issueCreate`` mutation.
    event_logger
        Structured relay event logger.

    """

    config: LinearConfig
    issue_client: LinearIssueClient
    event_logger: RelayEventLogger = dc.field(default_factory=RelayEventLogger)


class CreateIssueResource:
    """Resource relaying ``LIBRARY_PUBLISH`` webhooks to Linear."""

    def __init__(self, dependencies: CreateIssueResourceDependencies) -> None:
        """Configure the resource with its dependencies."""
        self._config = dependencies.config
        self._issue_client = dependencies.issue_client
        self._events = dependencies.event_logger

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle a Figma webhook delivery.

        Responds 201 when an issue was created and 200 when the event type
        is not relayed. Malformed bodies and Linear failures propagate to
        the app's error handlers.

        Parameters
        ----------
        req
            Falcon request carrying the webhook body.
        resp
            Falcon response object.

        Raises
        ------
        MalformedPayloadError
            If the body is not a Figma webhook document.
        LinearConfigMissingError
            If Linear credentials are not configured.
        LinearTransportError
            If Linear cannot be reached.
        LinearIssueRejectedError
            If Linear answers with a status other than 200.

        """
        body = await req.stream.read()
        event = decode_event(body)
        self._events.log_webhook_received(event)

        if not is_actionable(event):
            self._events.log_webhook_ignored(event)
            set_plain_text(resp, falcon.HTTP_200, NOT_HANDLED_MESSAGE)
            return

        await self._relay(event)
        set_plain_text(resp, falcon.HTTP_201, CREATED_MESSAGE)

    async def _relay(self, event: FigmaWebhookEvent) -> None:
        """Open a Linear issue for *event* or raise the failure."""
        draft = build_issue_draft(event, team_id=self._config.team_id)
        try:
            outcome = await self._issue_client.create_issue(draft)
        except (LinearConfigMissingError, LinearTransportError) as exc:
            self._events.log_issue_failed(file_key=event.file_key, error=exc)
            raise

        if isinstance(outcome, IssueCreationFailed):
            self._events.log_issue_rejected(file_key=event.file_key, outcome=outcome)
            raise LinearIssueRejectedError.from_failure(outcome)

        self._events.log_issue_created(file_key=event.file_key, outcome=outcome)
