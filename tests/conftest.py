"""Test configuration and fixtures."""

import logging

import pytest

from gh_issue_export.errors import (
    GhCommandError,
    GhNotAuthenticatedError,
    GhNotInstalledError,
)
from gh_issue_export.github_client.models import (
    GitHubComment,
    GitHubIssue,
    GitHubUser,
    RepositoryRef,
)


class FakeIssueSource:
    """In-memory issue source recording every call it receives."""

    def __init__(
        self,
        repo: RepositoryRef | None = None,
        issues: dict[int, GitHubIssue] | None = None,
        comments: dict[int, list[GitHubComment]] | None = None,
    ) -> None:
        self.repo = repo
        self.issues = issues or {}
        self.comments = comments or {}
        self.failing_issues: set[int] = set()
        self.failing_comments: set[int] = set()
        self.list_error = False
        self.installed = True
        self.authenticated = True
        self.calls: list[tuple] = []

    def ensure_available(self) -> None:
        if not self.installed:
            raise GhNotInstalledError("GitHub CLI ('gh') could not be found.")

    def ensure_authenticated(self) -> None:
        if not self.authenticated:
            raise GhNotAuthenticatedError("GitHub CLI is not authenticated.")

    def get_current_repository(self) -> RepositoryRef:
        self.calls.append(("repo",))
        if self.repo is None:
            raise GhCommandError(["gh", "repo", "view"], 1, "not a git repository")
        return self.repo

    def list_issue_numbers(self, repo: RepositoryRef, limit: int) -> list[int]:
        self.calls.append(("list", repo.full_name, limit))
        if self.list_error:
            raise GhCommandError(["gh", "issue", "list"], 1, "HTTP 502")
        return sorted(self.issues)[:limit]

    def get_issue(self, repo: RepositoryRef, number: int) -> GitHubIssue:
        self.calls.append(("issue", number))
        if number in self.failing_issues:
            raise GhCommandError(["gh", "issue", "view", str(number)], 1, "not found")
        return self.issues[number]

    def get_comments(self, repo: RepositoryRef, number: int) -> list[GitHubComment]:
        self.calls.append(("comments", number))
        if number in self.failing_comments:
            raise GhCommandError(["gh", "issue", "view", str(number)], 1, "timeout")
        return self.comments.get(number, [])


def make_issue(number: int, **overrides) -> GitHubIssue:
    data = {
        "number": number,
        "title": f"Issue title {number}",
        "state": "OPEN",
        "author": GitHubUser(login="octocat"),
        "body": f"Body of issue {number}",
        "created_at": "2024-01-15T10:30:00Z",
        "url": f"https://github.com/octo-org/widgets/issues/{number}",
    }
    data.update(overrides)
    return GitHubIssue(**data)


def make_comment(**overrides) -> GitHubComment:
    data = {
        "author": GitHubUser(login="hubot"),
        "body": "Looks good to me",
        "created_at": "2024-01-16T08:00:00Z",
    }
    data.update(overrides)
    return GitHubComment(**data)


@pytest.fixture
def repo() -> RepositoryRef:
    """Repository reference used across tests."""
    return RepositoryRef.parse("octo-org/widgets")


@pytest.fixture
def issue_factory():
    return make_issue


@pytest.fixture
def comment_factory():
    return make_comment


@pytest.fixture
def fake_source(repo: RepositoryRef) -> FakeIssueSource:
    """Source with three issues; issue 2 has two comments."""
    return FakeIssueSource(
        repo=repo,
        issues={n: make_issue(n) for n in (1, 2, 3)},
        comments={
            2: [
                make_comment(body="First reply"),
                make_comment(author=None, body="Second reply"),
            ]
        },
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("gh_issue_export")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
