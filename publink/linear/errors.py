"""Custom exceptions for Linear issue creation."""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import IssueCreationFailed


class LinearError(Exception):
    """Base exception for all Linear relay errors.

    Provides a single catch point for failures raised while turning a
    draft into a Linear issue.
    """


class LinearConfigMissingError(LinearError):
    """Raised when Linear credentials are not configured.

    The relay starts without credentials; this error is raised per request
    before any network call is attempted.

    Attributes
    ----------
    missing
        Names of the environment variables that were empty or unset.

    """

    def __init__(self, message: str, *, missing: tuple[str, ...]) -> None:
        """Initialise with a message and the missing setting names."""
        self.missing = missing
        super().__init__(message)

    @classmethod
    def missing_settings(cls, names: cabc.Iterable[str]) -> LinearConfigMissingError:
        """Create error naming the settings that must be provided.

        Parameters
        ----------
        names
            Environment variable names that were empty or unset.

        Returns
        -------
        LinearConfigMissingError
            Error listing every missing setting.

        """
        missing = tuple(names)
        return cls(f"missing {' or '.join(missing)} in env", missing=missing)


class LinearTransportError(LinearError):
    """Raised when the Linear API cannot be reached."""

    @classmethod
    def timeout(cls, timeout_s: float) -> LinearTransportError:
        """Create error for requests exceeding the configured timeout."""
        return cls(f"Linear API request timed out after {timeout_s:g}s")

    @classmethod
    def network_error(cls, detail: str) -> LinearTransportError:
        """Create error for DNS, connection, and TLS failures."""
        return cls(f"Linear API network error: {detail}")


class LinearIssueRejectedError(LinearError):
    """Raised when Linear answers the mutation with a non-200 status.

    Attributes
    ----------
    status_code
        HTTP status returned by Linear.
    body_excerpt
        Possibly truncated response body kept for diagnostics.

    """

    def __init__(self, message: str, *, status_code: int, body_excerpt: str) -> None:
        """Initialise with the rejection status and body excerpt."""
        self.status_code = status_code
        self.body_excerpt = body_excerpt
        super().__init__(message)

    @classmethod
    def from_failure(cls, failure: IssueCreationFailed) -> LinearIssueRejectedError:
        """Create error from a classified mutation failure.

        Parameters
        ----------
        failure
            Outcome returned by :meth:`LinearIssueClient.create_issue`.

        Returns
        -------
        LinearIssueRejectedError
            Error whose message embeds the status line and body excerpt.

        """
        msg = (
            f"failed to create issue, status: {_status_line(failure.status_code)}, "
            f"body: {failure.body_excerpt}"
        )
        return cls(
            msg,
            status_code=failure.status_code,
            body_excerpt=failure.body_excerpt,
        )


class LinearSettingsError(LinearError):
    """Raised when optional Linear settings hold unusable values."""

    @classmethod
    def invalid_timeout(cls, value: str) -> LinearSettingsError:
        """Create error for a non-positive or non-numeric timeout."""
        return cls(f"Invalid LINEAR_TIMEOUT_S '{value}'. Must be a positive number")


def _status_line(status_code: int) -> str:
    try:
        return f"{status_code} {HTTPStatus(status_code).phrase}"
    except ValueError:
        return str(status_code)
