"""Data source interface used by the exporter."""

from typing import Protocol

from .models import GitHubComment, GitHubIssue, RepositoryRef


class IssueSource(Protocol):
    """Anything that can answer the four questions the exporter asks.

    Implementations raise ``GitHubCLIError`` (or a subclass) on failure.
    """

    def get_current_repository(self) -> RepositoryRef: ...

    def list_issue_numbers(self, repo: RepositoryRef, limit: int) -> list[int]: ...

    def get_issue(self, repo: RepositoryRef, number: int) -> GitHubIssue: ...

    def get_comments(self, repo: RepositoryRef, number: int) -> list[GitHubComment]: ...
