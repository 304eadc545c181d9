"""Falcon error handlers for relay failures.

Usage
-----
Register error handlers on the Falcon app::

    from publink.api.errors import handle_linear_error, handle_malformed_payload
    from publink.figma import MalformedPayloadError
    from publink.linear import LinearError

    app.add_error_handler(MalformedPayloadError, handle_malformed_payload)
    app.add_error_handler(LinearError, handle_linear_error)

"""

from __future__ import annotations

import typing as typ

import falcon

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from publink.figma.errors import MalformedPayloadError
    from publink.linear.errors import LinearError

__all__ = ["handle_linear_error", "handle_malformed_payload", "set_plain_text"]


def set_plain_text(resp: Response, status: str, text: str) -> None:
    """Populate *resp* with a plain-text body and *status*."""
    resp.status = status
    resp.content_type = falcon.MEDIA_TEXT
    resp.text = text


async def handle_malformed_payload(
    _req: Request,
    resp: Response,
    ex: MalformedPayloadError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``MalformedPayloadError`` to an HTTP 400 plain-text response.

    Parameters
    ----------
    _req
        Falcon request (unused).
    resp
        Falcon response whose status and body are set.
    ex
        The decoding error, whose message includes the decoder detail.
    _params
        URI template parameters (unused).

    """
    set_plain_text(resp, falcon.HTTP_400, str(ex))


async def handle_linear_error(
    _req: Request,
    resp: Response,
    ex: LinearError,
    _params: dict[str, typ.Any],
) -> None:
    """Map any ``LinearError`` to an HTTP 500 plain-text response.

    Missing credentials, transport failures and rejected mutations all
    surface here with their own message so they stay distinguishable.
    """
    set_plain_text(resp, falcon.HTTP_500, f"Failed to create Linear issue: {ex}")
