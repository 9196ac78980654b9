"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from pr2jira.models import ApproverGroup, PullRequestContext
from pr2jira.settings import Pr2JiraSettings

_ENV_VARS = (
    "JIRA_URL",
    "JIRA_USERNAME",
    "JIRA_API_TOKEN",
    "JIRA_ISSUE_DESCRIPTION",
    "JIRA_ISSUE_SUMMARY",
    "JIRA_ISSUE_TYPE",
    "JIRA_PROJECT",
    "JIRA_APPROVER_GROUP_NAME",
    "JIRA_APPROVER_GROUP_ID",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "PR2JIRA_HTTP_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the runner's own GITHUB_* variables out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_settings(**kwargs) -> Pr2JiraSettings:
    defaults = {
        "jira_url": "https://jira.example.com/",
        "jira_username": "bot@example.com",
        "jira_api_token": "jira_token",
        "jira_issue_description": "Release the thing",
        "jira_issue_summary": "Deploy PR",
        "jira_issue_type": "10001",
        "jira_project": "CHG",
        "github_token": "ghp_test",
    }
    defaults.update(kwargs)
    return Pr2JiraSettings(_env_file=None, **defaults)  # type: ignore[call-arg]


def write_event(path: Path, event: dict) -> Path:
    path.write_text(json.dumps(event))
    return path


@pytest.fixture
def settings() -> Pr2JiraSettings:
    return make_settings()


@pytest.fixture
def pull_request() -> PullRequestContext:
    return PullRequestContext(number=42, repository="mumosystems/quickstartGitHubActions")


@pytest.fixture
def approver_group() -> ApproverGroup:
    return ApproverGroup(
        name="Change Management Board",
        group_id="5cd2dde1-4263-4b63-8e48-920e1e672e29",
        self_url="https://jira.example.com/rest/api/3/group?groupId=5cd2dde1-4263-4b63-8e48-920e1e672e29",
    )


@pytest.fixture
def pr_event(tmp_path: Path) -> Path:
    return write_event(
        tmp_path / "event.json",
        {
            "action": "opened",
            "number": 42,
            "pull_request": {"number": 42, "title": "Add login page"},
            "repository": {"full_name": "mumosystems/quickstartGitHubActions"},
        },
    )


@pytest.fixture
def settings_factory():
    return make_settings
