"""Abstract base class for issue trackers."""

from abc import ABC, abstractmethod

from pr2jira.models import IssueCreationResult, IssuePayload


class IssueTracker(ABC):
    @abstractmethod
    def create_issue(self, payload: IssuePayload) -> IssueCreationResult: ...
