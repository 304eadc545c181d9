"""Emit structured observability events for relayed webhooks.

Usage
-----
>>> event_logger = RelayEventLogger()
>>> event_logger.log_webhook_received(event)

"""

from __future__ import annotations

import enum
import typing as typ

from publink.logging import get_logger, log_error, log_info

if typ.TYPE_CHECKING:
    from publink.figma.models import FigmaWebhookEvent
    from publink.linear.models import IssueCreated, IssueCreationFailed

logger = get_logger(__name__)


class RelayEventType(enum.StrEnum):
    """Structured log event types for the relay."""

    WEBHOOK_RECEIVED = "relay.webhook.received"
    WEBHOOK_IGNORED = "relay.webhook.ignored"
    ISSUE_CREATED = "relay.issue.created"
    ISSUE_REJECTED = "relay.issue.rejected"
    ISSUE_FAILED = "relay.issue.failed"


class RelayEventLogger:
    """Emit relay lifecycle events via femtologging."""

    def log_webhook_received(self, event: FigmaWebhookEvent) -> None:
        """Log a decoded webhook delivery."""
        log_info(
            logger,
            "[%s] event_type=%s file_key=%s timestamp=%s triggered_by=%s "
            "webhooks=%d",
            RelayEventType.WEBHOOK_RECEIVED,
            event.event_type or "<missing>",
            event.file_key,
            event.timestamp,
            event.triggered_by_name,
            len(event.webhooks),
        )

    def log_webhook_ignored(self, event: FigmaWebhookEvent) -> None:
        """Log a delivery whose event type is not relayed."""
        log_info(
            logger,
            "[%s] event_type=%s file_key=%s",
            RelayEventType.WEBHOOK_IGNORED,
            event.event_type or "<missing>",
            event.file_key,
        )

    def log_issue_created(self, *, file_key: str, outcome: IssueCreated) -> None:
        """Log a Linear issue created for *file_key*.

        Parameters
        ----------
        file_key
            Figma file key the issue was opened for.
        outcome
            Success outcome; id and title may be unknown.

        """
        log_info(
            logger,
            "[%s] file_key=%s issue_id=%s issue_title=%r",
            RelayEventType.ISSUE_CREATED,
            file_key,
            outcome.issue_id or "unknown",
            outcome.issue_title,
        )

    def log_issue_rejected(
        self, *, file_key: str, outcome: IssueCreationFailed
    ) -> None:
        """Log a mutation Linear answered with a non-200 status."""
        log_error(
            logger,
            "[%s] file_key=%s status_code=%d body=%s",
            RelayEventType.ISSUE_REJECTED,
            file_key,
            outcome.status_code,
            outcome.body_excerpt,
        )

    def log_issue_failed(self, *, file_key: str, error: Exception) -> None:
        """Log a mutation that could not be submitted.

        Covers missing credentials and transport failures. The exception is
        attached as ``exc_info``.
        """
        log_error(
            logger,
            "[%s] file_key=%s error_type=%s error=%s",
            RelayEventType.ISSUE_FAILED,
            file_key,
            type(error).__name__,
            error,
            exc_info=error,
        )
