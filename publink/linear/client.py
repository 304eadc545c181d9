"""Linear GraphQL client used to open issues for relayed events."""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from .errors import LinearConfigMissingError, LinearTransportError
from .models import IssueCreated, IssueCreationFailed, MutationRequest

if typ.TYPE_CHECKING:
    from .config import LinearConfig
    from .models import IssueDraft, MutationOutcome

ISSUE_CREATE_MUTATION = """
mutation IssueCreate($input: IssueCreateInput!) {
  issueCreate(input: $input) {
    issue {
      id
      title
    }
  }
}
"""

_HTTP_OK = 200
_BODY_EXCERPT_LIMIT = 1000
_USER_AGENT = "publink/0.1"


class _CreatedIssue(msgspec.Struct, kw_only=True):
    id: str | None = None
    title: str | None = None


class _IssueCreatePayload(msgspec.Struct, kw_only=True):
    issue: _CreatedIssue | None = None


class _IssueCreateData(msgspec.Struct, kw_only=True):
    issue_create: _IssueCreatePayload | None = msgspec.field(
        default=None, name="issueCreate"
    )


class _IssueCreateResponse(msgspec.Struct, kw_only=True):
    data: _IssueCreateData | None = None


_RESPONSE_DECODER = msgspec.json.Decoder(_IssueCreateResponse)
_ENCODER = msgspec.json.Encoder()


def build_mutation_request(draft: IssueDraft) -> MutationRequest:
    """Return the ``issueCreate`` request for *draft*.

    The variables always hold exactly ``title``, ``description`` and
    ``teamId`` under ``input``.
    """
    return MutationRequest(
        query=ISSUE_CREATE_MUTATION,
        variables={"input": draft.as_input()},
    )


def encode_mutation_request(request: MutationRequest) -> bytes:
    """Serialise *request* to the JSON body Linear expects."""
    return _ENCODER.encode(request)


def _body_excerpt(response: httpx.Response) -> str:
    text = response.text
    if len(text) > _BODY_EXCERPT_LIMIT:
        return text[:_BODY_EXCERPT_LIMIT] + "..."
    return text


def _created_issue(response: httpx.Response) -> IssueCreated:
    """Read the created issue from a 200 response, tolerating odd bodies."""
    try:
        parsed = _RESPONSE_DECODER.decode(response.content)
    except msgspec.DecodeError:
        return IssueCreated()

    data = parsed.data
    if data is None or data.issue_create is None or data.issue_create.issue is None:
        return IssueCreated()
    issue = data.issue_create.issue
    return IssueCreated(issue_id=issue.id, issue_title=issue.title)


class LinearIssueClient:
    """Submit issue drafts to Linear as GraphQL mutations.

    Parameters
    ----------
    config
        Linear settings resolved at startup. Missing credentials are only
        reported when :meth:`create_issue` is called.
    http_client
        Optional ``httpx.AsyncClient`` for testing. If not provided, the
        instance creates and owns its own client.

    Examples
    --------
    >>> import asyncio
    >>> from publink.linear import LinearConfig, LinearIssueClient
    >>> client = LinearIssueClient(LinearConfig(api_token="lin_api_...", team_id="T"))
    >>> # outcome = asyncio.run(client.create_issue(draft))
    >>> asyncio.run(client.aclose())

    """

    def __init__(
        self,
        config: LinearConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with configuration."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers={"User-Agent": _USER_AGENT},
        )

    @property
    def config(self) -> LinearConfig:
        """Read-only access to the client configuration."""
        return self._config

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def create_issue(self, draft: IssueDraft) -> MutationOutcome:
        """Submit *draft* to Linear and classify the response.

        Exactly one request is sent per call and nothing is retried.

        Parameters
        ----------
        draft
            Issue fields to submit.

        Returns
        -------
        MutationOutcome
            ``IssueCreated`` for HTTP 200, otherwise ``IssueCreationFailed``
            carrying the status code and a body excerpt.

        Raises
        ------
        LinearConfigMissingError
            If the API token or team id is empty. No request is sent.
        LinearTransportError
            If the request times out or the connection fails.

        """
        missing = self._config.missing_settings()
        if missing:
            raise LinearConfigMissingError.missing_settings(missing)

        body = encode_mutation_request(build_mutation_request(draft))
        response = await self._send_request(body)

        if response.status_code != _HTTP_OK:
            return IssueCreationFailed(
                status_code=response.status_code,
                body_excerpt=_body_excerpt(response),
            )
        return _created_issue(response)

    def _headers(self) -> dict[str, str]:
        # Linear personal API keys are sent without an auth scheme.
        return {
            "Authorization": self._config.api_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _send_request(self, body: bytes) -> httpx.Response:
        """POST *body* to the configured endpoint.

        Raises
        ------
        LinearTransportError
            If a timeout or network error occurs.

        """
        try:
            return await self._client.post(
                self._config.endpoint,
                content=body,
                headers=self._headers(),
                timeout=self._config.timeout_s,
            )
        except httpx.TimeoutException as exc:
            raise LinearTransportError.timeout(self._config.timeout_s) from exc
        except httpx.RequestError as exc:
            raise LinearTransportError.network_error(str(exc)) from exc
