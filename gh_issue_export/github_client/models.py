"""Pydantic models for the JSON emitted by ``gh``.

These models map to the fields requested through ``gh ... --json``.
Field names follow the GitHub GraphQL API (camelCase) via aliases.
CLI Reference: https://cli.github.com/manual/gh_issue_view
"""

from pydantic import BaseModel, ConfigDict, Field

GHOST_LOGIN = "ghost"


class GitHubUser(BaseModel):
    """GitHub user as returned in ``author`` and ``owner`` fields."""

    login: str | None = Field(None, description="GitHub username/login (string)")


class RepositoryRef(BaseModel):
    """Owner/name pair identifying a repository."""

    model_config = ConfigDict(frozen=True)

    owner: GitHubUser = Field(..., description="Repository owner")
    name: str = Field(..., description="Repository name (string)")

    @property
    def full_name(self) -> str:
        return f"{self.owner.login}/{self.name}"

    @classmethod
    def parse(cls, value: str) -> "RepositoryRef":
        """Build a reference from an ``owner/name`` string.

        Raises:
            ValueError: If the value is not of the form ``owner/name``
        """
        owner, sep, name = value.strip().partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ValueError(
                f"Invalid repository '{value}'. Expected the form OWNER/NAME."
            )
        return cls(owner=GitHubUser(login=owner), name=name)

    def __str__(self) -> str:
        return self.full_name


class GitHubComment(BaseModel):
    """Comment on an issue, from ``gh issue view --comments --json comments``."""

    model_config = ConfigDict(populate_by_name=True)

    author: GitHubUser | None = Field(None, description="Comment author details")
    body: str | None = Field(None, description="Text content of the comment")
    created_at: str = Field(
        ..., alias="createdAt", description="Timestamp of comment creation (ISO 8601)"
    )

    @property
    def author_login(self) -> str:
        """Author login, or the ghost placeholder for deleted accounts."""
        if self.author is None or not self.author.login:
            return GHOST_LOGIN
        return self.author.login


class IssueComments(BaseModel):
    """Envelope returned by ``gh issue view --json comments``."""

    comments: list[GitHubComment] = Field(
        default_factory=list, description="All comments on the issue, oldest first"
    )


class IssueNumber(BaseModel):
    """Single entry of ``gh issue list --json number``."""

    number: int


class GitHubIssue(BaseModel):
    """Issue metadata.

    Timestamps are kept as the strings ``gh`` returns so the report shows
    them unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)

    number: int = Field(..., description="Issue number within the repository")
    title: str = Field(..., description="Title of the issue")
    state: str = Field(..., description="Current state: 'OPEN' or 'CLOSED'")
    author: GitHubUser | None = Field(None, description="Creator of the issue")
    body: str | None = Field(None, description="Issue description in markdown")
    created_at: str = Field(
        ..., alias="createdAt", description="Timestamp of issue creation (ISO 8601)"
    )
    url: str = Field(..., description="Web URL of the issue")

    @property
    def author_login(self) -> str:
        """Author login, or the ghost placeholder for deleted accounts."""
        if self.author is None or not self.author.login:
            return GHOST_LOGIN
        return self.author.login
