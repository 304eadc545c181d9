"""Figma webhook decoding.

Usage
-----
Decode a delivery and check whether it should be relayed::

    from publink.figma import decode_event, is_actionable

    event = decode_event(body)
    if is_actionable(event):
        ...

"""

from __future__ import annotations

from .decoder import decode_event, is_actionable
from .errors import MalformedPayloadError
from .models import FigmaEventType, FigmaUser, FigmaWebhookEvent, WebhookSubscription

__all__ = [
    "FigmaEventType",
    "FigmaUser",
    "FigmaWebhookEvent",
    "MalformedPayloadError",
    "WebhookSubscription",
    "decode_event",
    "is_actionable",
]
