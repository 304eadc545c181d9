"""Linear issue drafting and GraphQL submission."""

from __future__ import annotations

from .client import (
    ISSUE_CREATE_MUTATION,
    LinearIssueClient,
    build_mutation_request,
    encode_mutation_request,
)
from .config import LinearConfig
from .drafts import build_issue_draft
from .errors import (
    LinearConfigMissingError,
    LinearError,
    LinearIssueRejectedError,
    LinearSettingsError,
    LinearTransportError,
)
from .models import (
    IssueCreated,
    IssueCreationFailed,
    IssueDraft,
    MutationOutcome,
    MutationRequest,
)

__all__ = [
    "ISSUE_CREATE_MUTATION",
    "IssueCreated",
    "IssueCreationFailed",
    "IssueDraft",
    "LinearConfig",
    "LinearConfigMissingError",
    "LinearError",
    "LinearIssueClient",
    "LinearIssueRejectedError",
    "LinearSettingsError",
    "LinearTransportError",
    "MutationOutcome",
    "MutationRequest",
    "build_issue_draft",
    "build_mutation_request",
    "encode_mutation_request",
]
