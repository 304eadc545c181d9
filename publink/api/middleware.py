"""Lifespan middleware closing the Linear HTTP client on shutdown.

Usage
-----
Register the middleware when creating the Falcon app::

    from publink.api.middleware import LinearClientLifecycle

    app = falcon.asgi.App(middleware=[LinearClientLifecycle(issue_client)])

"""

from __future__ import annotations

import typing as typ

from publink.logging import get_logger, log_info

if typ.TYPE_CHECKING:
    from publink.linear.client import LinearIssueClient

__all__ = ["LinearClientLifecycle"]

logger = get_logger(__name__)


class LinearClientLifecycle:
    """Falcon middleware tying the Linear client to the ASGI lifespan.

    Parameters
    ----------
    issue_client
        Client shared by every request handled by the app.

    """

    def __init__(self, issue_client: LinearIssueClient) -> None:
        """Initialise the middleware with the shared client."""
        self._issue_client = issue_client

    async def process_startup(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Log the Linear endpoint the relay will submit to."""
        log_info(
            logger,
            "Relaying library publishes to %s",
            self._issue_client.config.endpoint,
        )

    async def process_shutdown(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Close the client's owned HTTP resources."""
        await self._issue_client.aclose()
