"""Assembly of the Jira create-issue document."""

from collections.abc import Iterable, Sequence

from pr2jira.models import (
    ApproverGroup,
    ApproverGroupUpdate,
    DescriptionDoc,
    IssueFields,
    IssueLinkAdd,
    IssueLinkType,
    IssueLinkUpdate,
    IssueLinkValue,
    IssuePayload,
    IssueTypeRef,
    IssueUpdate,
    OutwardIssue,
    ProjectRef,
)
from pr2jira.settings import Pr2JiraSettings

LINK_TYPE = "Blocks"
GROUP_LOOKUP_PATH = "/rest/api/3/group"


def group_url(jira_url: str, group_id: str) -> str:
    """Canonical REST URL of a Jira group: <base>/rest/api/3/group?groupId=<id>."""
    return f"{jira_url.rstrip('/')}{GROUP_LOOKUP_PATH}?groupId={group_id}"


def approver_groups(settings: Pr2JiraSettings) -> list[ApproverGroup]:
    """Approver groups to assign to the new issue. Empty when no group id is configured."""
    if not settings.jira_approver_group_id:
        return []
    return [
        ApproverGroup(
            name=settings.jira_approver_group_name,
            group_id=settings.jira_approver_group_id,
            self_url=group_url(settings.jira_url, settings.jira_approver_group_id),
        )
    ]


def build_issue_payload(
    description: str,
    summary: str,
    issue_type_id: str,
    project_key: str,
    pr_number: str,
    issue_keys: Iterable[str],
    groups: Sequence[ApproverGroup],
) -> IssuePayload:
    """Build the create-issue document.

    Strings go in verbatim, empty or not; Jira decides what it rejects. The issue
    links block is only present when there is at least one key, and likewise the
    approver block only when there is at least one group.
    """
    fields = IssueFields(
        description=DescriptionDoc.from_text(description),
        github_pr_id=pr_number,
        issue_type=IssueTypeRef(id=issue_type_id),
        project=ProjectRef(key=project_key),
        summary=summary,
    )

    # sorted so the document is stable between runs
    outward = [OutwardIssue(key=key) for key in sorted(set(issue_keys))]
    issue_links = None
    if outward:
        value = IssueLinkValue(type=IssueLinkType(name=LINK_TYPE), outward_issues=outward)
        issue_links = [IssueLinkUpdate(add=IssueLinkAdd(values=[value]))]

    approvers = [ApproverGroupUpdate(add=group) for group in groups] or None

    return IssuePayload(fields=fields, update=IssueUpdate(issue_links=issue_links, approver_groups=approvers))
