"""Jira Cloud REST API v3 provider."""

import logging

import httpx

from pr2jira.models import IssueCreationResult, IssuePayload
from pr2jira.providers.base import IssueTracker
from pr2jira.settings import Pr2JiraSettings

logger = logging.getLogger(__name__)

CREATE_ISSUE_PATH = "/rest/api/3/issue"


class IssueCreationError(RuntimeError):
    """Jira answered, but with an error status. Keeps the raw body for the log."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Jira returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class JiraProvider(IssueTracker):
    def __init__(self, settings: Pr2JiraSettings) -> None:
        self._base_url = settings.jira_url.rstrip("/")
        self._auth = (settings.jira_username, settings.jira_api_token.get_secret_value())
        self._timeout = settings.http_timeout
        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def create_issue(self, payload: IssuePayload) -> IssueCreationResult:
        """POST the payload once. No retries.

        Raises httpx.TransportError when Jira can't be reached and
        IssueCreationError when it responds with an error status or with a
        success body that is not an issue reference.
        """
        response = httpx.post(
            f"{self._base_url}{CREATE_ISSUE_PATH}",
            auth=self._auth,
            headers=self._headers,
            json=payload.to_json_body(),
            timeout=self._timeout,
        )
        if response.is_error:
            raise IssueCreationError(response.status_code, response.text)
        logger.debug("Jira accepted issue: %s", response.text)
        try:
            return IssueCreationResult.model_validate(response.json())
        except ValueError as exc:
            # JSONDecodeError and pydantic ValidationError are both ValueErrors
            raise IssueCreationError(response.status_code, response.text) from exc
