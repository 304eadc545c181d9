"""Typed models for Linear issue creation."""

from __future__ import annotations

import dataclasses
import typing as typ

import msgspec


@dataclasses.dataclass(frozen=True, slots=True)
class IssueDraft:
    """Issue fields ready to submit to Linear.

    Attributes
    ----------
    title
        Issue title.
    description
        Issue description (Markdown accepted by Linear).
    team_id
        Linear team that will own the issue.

    """

    title: str
    description: str
    team_id: str

    def as_input(self) -> dict[str, str]:
        """Return the ``IssueCreateInput`` fields for this draft."""
        return {
            "title": self.title,
            "description": self.description,
            "teamId": self.team_id,
        }


class MutationRequest(msgspec.Struct, frozen=True, kw_only=True):
    """GraphQL request body sent to Linear."""

    query: str
    variables: dict[str, typ.Any]


@dataclasses.dataclass(frozen=True, slots=True)
class IssueCreated:
    """Linear accepted the mutation.

    ``issue_id`` and ``issue_title`` are ``None`` when the response body did
    not report the created issue.
    """

    issue_id: str | None = None
    issue_title: str | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class IssueCreationFailed:
    """Linear answered with a status other than 200."""

    status_code: int
    body_excerpt: str


MutationOutcome: typ.TypeAlias = IssueCreated | IssueCreationFailed
