"""GitHub client package for ``gh`` CLI interaction."""

from .client import GitHubCLIClient
from .models import GitHubComment, GitHubIssue, GitHubUser, RepositoryRef
from .source import IssueSource

__all__ = [
    "GitHubCLIClient",
    "IssueSource",
    "GitHubUser",
    "GitHubComment",
    "GitHubIssue",
    "RepositoryRef",
]
