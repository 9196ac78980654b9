"""Settings resolution from the process environment and an optional .env file."""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CHANGE_MANAGEMENT_BOARD = "Change Management Board"
CHANGE_MANAGEMENT_BOARD_ID = "5cd2dde1-4263-4b63-8e48-920e1e672e29"
DEFAULT_HTTP_TIMEOUT = 30.0


class Pr2JiraSettings(BaseSettings):
    """Everything the run needs, read once at startup.

    Missing variables resolve to empty strings (or the defaults below). Nothing is
    validated here; an empty token shows up later as an auth failure.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # Jira
    jira_url: str = Field(default="", validation_alias="JIRA_URL")
    jira_username: str = Field(default="", validation_alias="JIRA_USERNAME")
    jira_api_token: SecretStr = Field(default=SecretStr(""), validation_alias="JIRA_API_TOKEN")
    jira_issue_description: str = Field(default="", validation_alias="JIRA_ISSUE_DESCRIPTION")
    jira_issue_summary: str = Field(default="", validation_alias="JIRA_ISSUE_SUMMARY")
    jira_issue_type: str = Field(default="", validation_alias="JIRA_ISSUE_TYPE")  # issue type id, e.g. "10001"
    jira_project: str = Field(default="", validation_alias="JIRA_PROJECT")
    jira_approver_group_name: str = Field(default=CHANGE_MANAGEMENT_BOARD, validation_alias="JIRA_APPROVER_GROUP_NAME")
    jira_approver_group_id: str = Field(default=CHANGE_MANAGEMENT_BOARD_ID, validation_alias="JIRA_APPROVER_GROUP_ID")

    # GitHub (the Actions runner sets everything but the token)
    github_token: SecretStr = Field(default=SecretStr(""), validation_alias="GITHUB_TOKEN")
    github_api_url: str = Field(default="https://api.github.com", validation_alias="GITHUB_API_URL")
    github_repository: str = Field(default="", validation_alias="GITHUB_REPOSITORY")  # owner/repo
    github_event_name: str = Field(default="", validation_alias="GITHUB_EVENT_NAME")
    github_event_path: str = Field(default="", validation_alias="GITHUB_EVENT_PATH")

    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, validation_alias="PR2JIRA_HTTP_TIMEOUT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("http_timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, value: object) -> float:
        # blank (unset Actions input) or unparseable values fall back to the default
        try:
            timeout = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return DEFAULT_HTTP_TIMEOUT
        return timeout if timeout > 0 else DEFAULT_HTTP_TIMEOUT


def get_settings() -> Pr2JiraSettings:
    """Build settings from the environment. Env vars override values from .env."""
    return Pr2JiraSettings()
