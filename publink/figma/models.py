"""Typed models for Figma webhook deliveries.

Figma posts one JSON document per webhook delivery. Only the fields the
relay reads are declared here. The decoder folds JSON null into the empty
defaults and ignores anything else Figma sends (``passcode``,
``webhook_id``, component lists).
"""

from __future__ import annotations

import enum

import msgspec


class FigmaEventType(enum.StrEnum):
    """Figma webhook event types the relay recognises."""

    LIBRARY_PUBLISH = "LIBRARY_PUBLISH"


class FigmaUser(msgspec.Struct, frozen=True, kw_only=True):
    """Figma user object sent as ``triggered_by`` by current webhook payloads."""

    id: str = ""
    handle: str = ""


class WebhookSubscription(msgspec.Struct, frozen=True, kw_only=True):
    """A webhook registration listed in the delivery.

    Attributes
    ----------
    id
        Figma webhook identifier.
    team_id
        Figma team that owns the webhook.
    endpoint
        URL Figma delivers the event to.

    """

    id: str = ""
    team_id: str = ""
    endpoint: str = ""


class FigmaWebhookEvent(msgspec.Struct, frozen=True, kw_only=True):
    """Inbound Figma webhook event.

    Every field has an empty default so a delivery without ``event_type``
    still decodes and is treated as not actionable.

    Attributes
    ----------
    event_type
        Figma event tag, e.g. ``LIBRARY_PUBLISH``.
    file_key
        Key of the Figma file that raised the event.
    timestamp
        Event time as sent by Figma (ISO 8601 text, not parsed).
    triggered_by
        Either a plain identifier or a Figma user object.
    webhooks
        Webhook subscriptions the delivery was sent for, in payload order.

    """

    event_type: str = ""
    file_key: str = ""
    timestamp: str = ""
    triggered_by: str | FigmaUser = ""
    webhooks: tuple[WebhookSubscription, ...] = ()

    @property
    def triggered_by_name(self) -> str:
        """Return a printable name for whoever triggered the event."""
        if isinstance(self.triggered_by, FigmaUser):
            return self.triggered_by.handle or self.triggered_by.id
        return self.triggered_by
