"""Publink runtime entrypoint.

This module provides the ASGI application factory used by Granian. It
loads an optional ``.env`` file, reads Linear settings once, and
delegates app construction to :func:`publink.api.app.create_app`.

Configuration is driven by environment variables:

- ``PUBLINK_HOST``: Bind address (default ``0.0.0.0``)
- ``PORT``: Listen port (default ``80``)
- ``PUBLINK_LOG_LEVEL``: Log level (default ``INFO``)
- ``LINEAR_API_KEY`` / ``LINEAR_TEAM_ID``: Linear credentials. The relay
  starts without them but every library publish then fails with HTTP 500.
- ``LINEAR_API_URL`` / ``LINEAR_TIMEOUT_S``: Optional Linear overrides

Run the service directly with ``python -m publink.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from dotenv import find_dotenv, load_dotenv

from publink.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)

_DEFAULT_PORT = "80"

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        log_error(
            logger,
            "Invalid PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application from environment settings.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    Raises
    ------
    LinearSettingsError
        If ``LINEAR_TIMEOUT_S`` is set to an unusable value.

    """
    from publink.api.app import AppDependencies
    from publink.api.app import create_app as _create_api_app

    load_dotenv(find_dotenv(usecwd=True))
    deps = AppDependencies.from_env()
    missing = deps.config.missing_settings()
    if missing:
        log_warning(
            logger,
            "Linear credentials missing (%s); library publishes will fail",
            ", ".join(missing),
        )
    return _create_api_app(deps)


def main() -> None:
    """Start the relay server using Granian.

    Reads ``PUBLINK_HOST``, ``PORT``, and ``PUBLINK_LOG_LEVEL`` from the
    environment (after loading ``.env``) and starts the ASGI server.
    """
    from granian import Granian
    from granian.constants import Interfaces

    load_dotenv(find_dotenv(usecwd=True))
    host = os.environ.get("PUBLINK_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("PORT") or _DEFAULT_PORT)
    log_level_str = os.environ.get("PUBLINK_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid PUBLINK_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Server starting on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "publink.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
