"""Configuration for the Linear issue client."""

from __future__ import annotations

import dataclasses
import math
import os

from .errors import LinearSettingsError

_DEFAULT_ENDPOINT = "https://api.linear.app/graphql"
_DEFAULT_TIMEOUT_S = 10.0

API_KEY_ENV = "LINEAR_API_KEY"
TEAM_ID_ENV = "LINEAR_TEAM_ID"


@dataclasses.dataclass(frozen=True, slots=True)
class LinearConfig:
    """Read-only Linear settings resolved once at startup.

    Empty credentials are allowed here: the relay must start without them
    and fail each actionable request instead.

    Attributes
    ----------
    api_token
        Linear API key, sent verbatim in the ``Authorization`` header.
    team_id
        Linear team that owns created issues.
    endpoint
        Linear GraphQL endpoint URL.
    timeout_s
        Timeout applied to the outbound mutation request.

    """

    api_token: str = ""
    team_id: str = ""
    endpoint: str = _DEFAULT_ENDPOINT
    timeout_s: float = _DEFAULT_TIMEOUT_S

    def missing_settings(self) -> tuple[str, ...]:
        """Return the environment variable names whose values are empty."""
        missing: list[str] = []
        if not self.api_token.strip():
            missing.append(API_KEY_ENV)
        if not self.team_id.strip():
            missing.append(TEAM_ID_ENV)
        return tuple(missing)

    @property
    def is_complete(self) -> bool:
        """Return whether both credentials are present."""
        return not self.missing_settings()

    @staticmethod
    def _parse_timeout_from_env() -> float:
        raw_timeout = os.environ.get("LINEAR_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise LinearSettingsError.invalid_timeout(raw_timeout) from exc

        if not math.isfinite(timeout) or timeout <= 0:
            raise LinearSettingsError.invalid_timeout(raw_timeout)

        return timeout

    @classmethod
    def from_env(cls) -> LinearConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``LINEAR_API_KEY``: API key (may be unset)
        - ``LINEAR_TEAM_ID``: Team identifier (may be unset)
        - ``LINEAR_API_URL``: Optional endpoint override
        - ``LINEAR_TIMEOUT_S``: Optional request timeout in seconds

        Returns
        -------
        LinearConfig
            Configuration instance with values from environment.

        Raises
        ------
        LinearSettingsError
            If ``LINEAR_TIMEOUT_S`` is not a positive number.

        """
        return cls(
            api_token=os.environ.get(API_KEY_ENV, "").strip(),
            team_id=os.environ.get(TEAM_ID_ENV, "").strip(),
            endpoint=os.environ.get("LINEAR_API_URL", _DEFAULT_ENDPOINT),
            timeout_s=cls._parse_timeout_from_env(),
        )
