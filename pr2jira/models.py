"""Shared pydantic models: the GitHub context, the Jira create-issue document and its result.

The document types mirror the JSON body of ``POST /rest/api/3/issue`` one level at a
time. Field aliases carry Jira's names; dump with ``by_alias=True, exclude_none=True``
so optional update blocks disappear instead of serializing as null.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PullRequestContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    repository: str  # owner/repo

    @property
    def owner(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.repository.split("/", 1)[1]


# ---------------------------------------------------------------------------
# fields.description (Atlassian document format, one paragraph)
# ---------------------------------------------------------------------------


class TextNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ParagraphNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["paragraph"] = "paragraph"
    content: list[TextNode]


class DescriptionDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["doc"] = "doc"
    version: int = 1
    content: list[ParagraphNode]

    @classmethod
    def from_text(cls, text: str) -> "DescriptionDoc":
        return cls(content=[ParagraphNode(content=[TextNode(text=text)])])


# ---------------------------------------------------------------------------
# fields
# ---------------------------------------------------------------------------


class IssueTypeRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class ProjectRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str


class IssueFields(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: DescriptionDoc
    github_pr_id: str = Field(alias="customfield_10533")
    issue_type: IssueTypeRef = Field(alias="issuetype")
    project: ProjectRef
    summary: str


# ---------------------------------------------------------------------------
# update.issuelinks
# ---------------------------------------------------------------------------


class OutwardIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str


class IssueLinkType(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class IssueLinkValue(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: IssueLinkType
    outward_issues: list[OutwardIssue] = Field(alias="outwardIssues")


class IssueLinkAdd(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: list[IssueLinkValue]


class IssueLinkUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    add: IssueLinkAdd


# ---------------------------------------------------------------------------
# update.customfield_10080 (approver groups)
# ---------------------------------------------------------------------------


class ApproverGroup(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    group_id: str = Field(alias="groupId")
    self_url: str = Field(alias="self")


class ApproverGroupUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    add: ApproverGroup


# ---------------------------------------------------------------------------
# top level
# ---------------------------------------------------------------------------


class IssueUpdate(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    issue_links: list[IssueLinkUpdate] | None = Field(default=None, alias="issuelinks")
    approver_groups: list[ApproverGroupUpdate] | None = Field(default=None, alias="customfield_10080")


class IssuePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    fields: IssueFields
    update: IssueUpdate = IssueUpdate()

    def to_json_body(self) -> dict:
        """Return the request body exactly as Jira expects it."""
        return self.model_dump(by_alias=True, exclude_none=True)


class IssueCreationResult(BaseModel):
    """Returned by create_issue: just what Jira echoes back."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    key: str
    self_url: str = Field(alias="self")
