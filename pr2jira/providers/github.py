"""GitHub REST API v3 provider: pull request commit listing."""

import logging

import httpx

from pr2jira.models import PullRequestContext
from pr2jira.settings import Pr2JiraSettings

logger = logging.getLogger(__name__)

PER_PAGE = 100


class GitHubProvider:
    def __init__(self, settings: Pr2JiraSettings) -> None:
        self._base_url = settings.github_api_url.rstrip("/")
        self._timeout = settings.http_timeout
        self._headers = {
            "Authorization": f"Bearer {settings.github_token.get_secret_value()}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def _get(self, url: str, params: dict | None = None) -> httpx.Response:
        response = httpx.get(url, headers=self._headers, params=params, timeout=self._timeout)
        if response.status_code == 401:
            raise RuntimeError("GitHub API returned 401. Check that GITHUB_TOKEN is set and still valid.")
        response.raise_for_status()
        return response

    def list_commit_messages(self, pr: PullRequestContext) -> list[str]:
        """Return the message of every commit on the pull request, oldest first.

        Follows the Link header until GitHub stops returning a next page.
        """
        url: str | None = f"{self._base_url}/repos/{pr.owner}/{pr.repo}/pulls/{pr.number}/commits"
        params: dict | None = {"per_page": str(PER_PAGE)}
        messages: list[str] = []
        while url:
            response = self._get(url, params)
            for node in response.json():
                messages.append(node["commit"]["message"])
            # next links already carry the query string
            url = response.links.get("next", {}).get("url")
            params = None
        logger.debug("Fetched %d commit(s) for %s#%d", len(messages), pr.repository, pr.number)
        return messages
