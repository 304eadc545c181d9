"""Application factory for the Publink Falcon ASGI application.

Usage
-----
Build an app from environment settings::

    app = create_app()

Build an app around an explicit configuration and client::

    from publink.api.app import AppDependencies, create_app
    from publink.linear import LinearConfig, LinearIssueClient

    config = LinearConfig(api_token=token, team_id=team_id)
    deps = AppDependencies(config=config, issue_client=LinearIssueClient(config))
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc

import falcon.asgi

from publink.api.errors import handle_linear_error, handle_malformed_payload
from publink.api.health.resources import HealthResource, ReadyResource
from publink.api.middleware import LinearClientLifecycle
from publink.api.webhooks import CreateIssueResource, CreateIssueResourceDependencies
from publink.figma import MalformedPayloadError
from publink.linear import LinearConfig, LinearError, LinearIssueClient
from publink.observability import RelayEventLogger

__all__ = ["AppDependencies", "create_app"]

CREATE_ISSUE_ROUTE = "/create-issue"


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for the Falcon ASGI application.

    Attributes
    ----------
    config
        Linear settings resolved once at startup.
    issue_client
        Linear client; built from ``config`` when omitted.
    event_logger
        Structured relay event logger.

    """

    config: LinearConfig
    issue_client: LinearIssueClient | None = None
    event_logger: RelayEventLogger = dc.field(default_factory=RelayEventLogger)

    @classmethod
    def from_env(cls) -> AppDependencies:
        """Build dependencies from ``LINEAR_*`` environment variables."""
        return cls(config=LinearConfig.from_env())


def create_app(
    dependencies: AppDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Registers ``POST /create-issue`` plus ``/health`` and ``/ready``, and
    maps relay errors onto HTTP responses.

    Parameters
    ----------
    dependencies
        Optional application dependencies. When ``None``, settings are read
        from the environment.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    deps = dependencies or AppDependencies.from_env()
    issue_client = deps.issue_client or LinearIssueClient(deps.config)

    app = falcon.asgi.App(middleware=[LinearClientLifecycle(issue_client)])  # type: ignore[no-matching-overload]  # Falcon stubs

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource(deps.config))
    app.add_route(
        CREATE_ISSUE_ROUTE,
        CreateIssueResource(
            CreateIssueResourceDependencies(
                config=deps.config,
                issue_client=issue_client,
                event_logger=deps.event_logger,
            )
        ),
    )

    app.add_error_handler(MalformedPayloadError, handle_malformed_payload)
    app.add_error_handler(LinearError, handle_linear_error)

    return app
