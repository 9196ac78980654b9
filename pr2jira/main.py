"""pr2jira CLI: open a Jira issue for the pull request that triggered the workflow."""

import logging

import httpx
import typer

from pr2jira.context import ContextError, resolve_pull_request
from pr2jira.keys import extract_issue_keys
from pr2jira.log import configure_logging
from pr2jira.models import IssueCreationResult, IssuePayload, PullRequestContext
from pr2jira.payload import approver_groups, build_issue_payload
from pr2jira.providers.base import IssueTracker
from pr2jira.providers.github import GitHubProvider
from pr2jira.providers.jira import IssueCreationError, JiraProvider
from pr2jira.settings import Pr2JiraSettings, get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(help="pr2jira: create a Jira issue from a GitHub pull request", add_completion=False)


# ---------------------------------------------------------------------------
# Provider factories
# ---------------------------------------------------------------------------


def get_github(settings: Pr2JiraSettings) -> GitHubProvider:
    return GitHubProvider(settings)


def get_tracker(settings: Pr2JiraSettings) -> IssueTracker:
    return JiraProvider(settings)


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------


def collect_issue_keys(settings: Pr2JiraSettings, pr: PullRequestContext) -> set[str]:
    """Fetch the PR's commits and return the Jira keys they mention. Fatal on any error."""
    try:
        messages = get_github(settings).list_commit_messages(pr)
    except (RuntimeError, httpx.HTTPError) as exc:
        logger.error("Failed to fetch commits: %s", exc)
        raise typer.Exit(1) from exc
    keys = extract_issue_keys(messages)
    if keys:
        logger.info("Linking %d issue(s): %s", len(keys), ", ".join(sorted(keys)))
    else:
        logger.info("No issue keys found in %d commit message(s)", len(messages))
    return keys


def submit(tracker: IssueTracker, payload: IssuePayload) -> IssueCreationResult | None:
    """Create the issue. Failures are logged, never raised, and never retried."""
    try:
        result = tracker.create_issue(payload)
    except httpx.TransportError as exc:
        logger.error("Failed to create issue: %s", exc)
        return None
    except IssueCreationError as exc:
        logger.error("Error response: %s", exc.body)
        return None
    logger.info("Issue created: %s", result.self_url)
    return result


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@app.command()
def run() -> None:
    """Create a Jira issue for the current pull request, linked to the keys in its commits."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        pr = resolve_pull_request(settings)
    except ContextError as exc:
        logger.error("Failed getting PR event information: %s", exc)
        raise typer.Exit(1) from exc
    logger.info("Pull request %s#%d", pr.repository, pr.number)

    keys = collect_issue_keys(settings, pr)

    payload = build_issue_payload(
        description=settings.jira_issue_description,
        summary=settings.jira_issue_summary,
        issue_type_id=settings.jira_issue_type,
        project_key=settings.jira_project,
        pr_number=str(pr.number),
        issue_keys=keys,
        groups=approver_groups(settings),
    )

    submit(get_tracker(settings), payload)
