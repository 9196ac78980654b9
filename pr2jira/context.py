"""Pull request discovery from the GitHub Actions event payload."""

import json
from pathlib import Path

from pr2jira.models import PullRequestContext
from pr2jira.settings import Pr2JiraSettings

PULL_REQUEST_EVENTS = ("pull_request", "pull_request_target")


class ContextError(RuntimeError):
    """The run was not triggered by a pull request we can identify."""


def _load_event(event_path: str) -> dict:
    if not event_path:
        raise ContextError("GITHUB_EVENT_PATH is not set. Is this running inside GitHub Actions?")
    path = Path(event_path)
    try:
        event = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ContextError(f"Cannot read event payload {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ContextError(f"Event payload {path} is not valid JSON: {exc}") from exc
    if not isinstance(event, dict):
        raise ContextError(f"Event payload {path} is not a JSON object")
    return event


def resolve_pull_request(settings: Pr2JiraSettings) -> PullRequestContext:
    """Return the number and owner/repo of the pull request that triggered this run.

    Number comes from ``pull_request.number`` (falling back to the top-level
    ``number``); the repository from ``repository.full_name`` or GITHUB_REPOSITORY.
    """
    event_name = settings.github_event_name
    if event_name and event_name not in PULL_REQUEST_EVENTS:
        raise ContextError(f"Event '{event_name}' is not a pull request event. Expected one of: {PULL_REQUEST_EVENTS}")

    event = _load_event(settings.github_event_path)

    pull_request = event.get("pull_request") or {}
    number = pull_request.get("number", event.get("number"))
    # bool is an int subclass; reject it along with strings and null
    if not isinstance(number, int) or isinstance(number, bool):
        raise ContextError("Event payload has no pull request number")

    repository = (event.get("repository") or {}).get("full_name") or settings.github_repository
    if not repository or "/" not in repository:
        raise ContextError("Cannot determine repository. Set GITHUB_REPOSITORY to owner/repo.")

    return PullRequestContext(number=number, repository=repository)
