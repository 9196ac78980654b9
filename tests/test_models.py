"""Tests for pr2jira.models."""

import pytest

from pr2jira.models import DescriptionDoc, IssueCreationResult, IssueUpdate, PullRequestContext


def test_pull_request_context_splits_repository(pull_request: PullRequestContext) -> None:
    assert pull_request.owner == "mumosystems"
    assert pull_request.repo == "quickstartGitHubActions"


def test_pull_request_context_frozen(pull_request: PullRequestContext) -> None:
    with pytest.raises(Exception):  # ValidationError or TypeError depending on pydantic version
        pull_request.number = 1  # type: ignore[misc]


def test_description_from_text() -> None:
    doc = DescriptionDoc.from_text("hello")
    assert doc.model_dump() == {
        "type": "doc",
        "version": 1,
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": "hello"}]}],
    }


def test_empty_update_dumps_to_empty_object() -> None:
    assert IssueUpdate().model_dump(by_alias=True, exclude_none=True) == {}


def test_creation_result_reads_jira_response() -> None:
    result = IssueCreationResult.model_validate(
        {
            "id": "10000",
            "key": "CHG-24",
            "self": "https://jira.example.com/rest/api/3/issue/10000",
            "transition": {"status": 200},
        }
    )
    assert result.id == "10000"
    assert result.key == "CHG-24"
    assert result.self_url == "https://jira.example.com/rest/api/3/issue/10000"


def test_creation_result_frozen() -> None:
    result = IssueCreationResult(id="1", key="CHG-1", self_url="https://jira.example.com/rest/api/3/issue/1")
    with pytest.raises(Exception):
        result.key = "changed"  # type: ignore[misc]
