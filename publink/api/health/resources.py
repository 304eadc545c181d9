"""Health probe resources for liveness and readiness checks.

Missing Linear credentials do not make the relay unready: it still accepts
and acknowledges webhooks. Readiness reports the credential state so an
operator can spot the misconfiguration.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from publink.linear.config import LinearConfig

__all__ = ["HealthResource", "ReadyResource"]


class HealthResource:
    """Liveness probe resource returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """Readiness probe resource reporting whether Linear is configured.

    Parameters
    ----------
    config
        Linear settings the relay was started with.

    """

    def __init__(self, config: LinearConfig) -> None:
        """Keep the startup configuration for reporting."""
        self._config = config

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /ready requests.

        Parameters
        ----------
        _req
            Falcon request (unused).
        resp
            Falcon response populated with readiness status.

        """
        resp.media = {
            "status": "ready",
            "linear_configured": self._config.is_complete,
        }
        resp.status = HTTPStatus.OK
