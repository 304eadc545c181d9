"""Decode and filter inbound Figma webhook bodies."""

from __future__ import annotations

import msgspec

from .errors import MalformedPayloadError
from .models import (
    FigmaEventType,
    FigmaUser,
    FigmaWebhookEvent,
    WebhookSubscription,
)

# Wire shapes accept JSON null anywhere a field is read; nulls fold to the
# empty defaults of the public models.


class _WireUser(msgspec.Struct, kw_only=True):
    id: str | None = None
    handle: str | None = None


class _WireSubscription(msgspec.Struct, kw_only=True):
    id: str | None = None
    team_id: str | None = None
    endpoint: str | None = None


class _WireEvent(msgspec.Struct, kw_only=True):
    event_type: str | None = None
    file_key: str | None = None
    timestamp: str | None = None
    triggered_by: str | _WireUser | None = None
    webhooks: list[_WireSubscription | None] | None = None


_DECODER = msgspec.json.Decoder(_WireEvent)


def _triggered_by(value: str | _WireUser | None) -> str | FigmaUser:
    if isinstance(value, _WireUser):
        return FigmaUser(id=value.id or "", handle=value.handle or "")
    return value or ""


def _subscription(hook: _WireSubscription | None) -> WebhookSubscription:
    if hook is None:
        return WebhookSubscription()
    return WebhookSubscription(
        id=hook.id or "",
        team_id=hook.team_id or "",
        endpoint=hook.endpoint or "",
    )


def _to_event(wire: _WireEvent) -> FigmaWebhookEvent:
    return FigmaWebhookEvent(
        event_type=wire.event_type or "",
        file_key=wire.file_key or "",
        timestamp=wire.timestamp or "",
        triggered_by=_triggered_by(wire.triggered_by),
        webhooks=tuple(_subscription(hook) for hook in wire.webhooks or ()),
    )


def decode_event(body: bytes) -> FigmaWebhookEvent:
    """Decode a raw webhook body into a :class:`FigmaWebhookEvent`.

    A JSON ``null`` field is read as if the field were absent.

    Parameters
    ----------
    body
        Raw HTTP request body.

    Returns
    -------
    FigmaWebhookEvent
        The decoded event.

    Raises
    ------
    MalformedPayloadError
        If the body is empty, is not JSON, is not a JSON object, or a field
        does not have the expected shape.

    """
    if not body.strip():
        raise MalformedPayloadError.empty_body()
    try:
        wire = _DECODER.decode(body)
    except msgspec.DecodeError as exc:
        raise MalformedPayloadError.invalid_json(str(exc)) from exc
    return _to_event(wire)


def is_actionable(event: FigmaWebhookEvent) -> bool:
    """Return whether *event* should open a Linear issue.

    Only ``LIBRARY_PUBLISH`` qualifies; the comparison is exact.
    """
    return event.event_type == FigmaEventType.LIBRARY_PUBLISH
