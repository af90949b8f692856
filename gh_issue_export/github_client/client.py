"""GitHub data access through the ``gh`` command line tool."""

import logging
import shutil
import subprocess
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import (
    GhCommandError,
    GhNotAuthenticatedError,
    GhNotInstalledError,
    GhResponseError,
)
from .models import (
    GitHubComment,
    GitHubIssue,
    IssueComments,
    IssueNumber,
    RepositoryRef,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

ISSUE_FIELDS = "number,title,state,author,body,createdAt,url"

_issue_numbers = TypeAdapter(list[IssueNumber])


class GitHubCLIClient:
    """Run ``gh`` subprocesses and parse their JSON output.

    The ``gh`` session handles authentication and pagination; this class
    only builds argument lists and validates what comes back.
    """

    def __init__(self, executable: str = "gh"):
        """Initialize the client.

        Args:
            executable: Name or path of the GitHub CLI binary.
        """
        self.executable = executable

    def _run(self, *args: str, quiet: bool = False) -> str:
        """Run ``gh`` with the given arguments and return its stdout.

        Standard error of a failed call is relayed to the log unless
        ``quiet`` is set.
        """
        cmd = [self.executable, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except FileNotFoundError as e:
            raise GhNotInstalledError(
                f"GitHub CLI ('{self.executable}') could not be found."
            ) from e

        if result.returncode != 0:
            if not quiet:
                for line in result.stderr.splitlines():
                    if line.strip():
                        logger.error(line)
            raise GhCommandError(cmd, result.returncode, result.stderr)
        return result.stdout

    def _run_model(self, model: type[ModelT], *args: str) -> ModelT:
        output = self._run(*args)
        try:
            return model.model_validate_json(output)
        except ValidationError as e:
            raise GhResponseError(
                f"Unexpected response from 'gh {' '.join(args)}': {e}"
            ) from e

    def ensure_available(self) -> None:
        """Raise ``GhNotInstalledError`` unless the executable is on PATH."""
        if shutil.which(self.executable) is None:
            raise GhNotInstalledError(
                f"GitHub CLI ('{self.executable}') could not be found. Please "
                "install it (https://cli.github.com/) and authenticate "
                "('gh auth login')."
            )

    def ensure_authenticated(self) -> None:
        """Raise ``GhNotAuthenticatedError`` when no session is logged in."""
        try:
            self._run("auth", "status", quiet=True)
        except GhCommandError as e:
            raise GhNotAuthenticatedError(
                "GitHub CLI is not authenticated. Please run 'gh auth login'."
            ) from e

    def get_current_repository(self) -> RepositoryRef:
        """Resolve the repository for the current working directory."""
        repo = self._run_model(RepositoryRef, "repo", "view", "--json", "owner,name")
        if not repo.owner.login or not repo.name:
            raise GhResponseError("Repository owner or name missing from response")
        return repo

    def list_issue_numbers(self, repo: RepositoryRef, limit: int) -> list[int]:
        """List numbers of issues in any state, in the order ``gh`` returns them."""
        output = self._run(
            "issue",
            "list",
            "--repo",
            repo.full_name,
            "--state",
            "all",
            "--limit",
            str(limit),
            "--json",
            "number",
        )
        try:
            entries = _issue_numbers.validate_json(output)
        except ValidationError as e:
            raise GhResponseError(f"Unexpected issue list response: {e}") from e
        return [entry.number for entry in entries]

    def get_issue(self, repo: RepositoryRef, number: int) -> GitHubIssue:
        """Fetch metadata and body for one issue."""
        return self._run_model(
            GitHubIssue,
            "issue",
            "view",
            str(number),
            "--repo",
            repo.full_name,
            "--json",
            ISSUE_FIELDS,
        )

    def get_comments(self, repo: RepositoryRef, number: int) -> list[GitHubComment]:
        """Fetch the comment thread of one issue, oldest first."""
        envelope = self._run_model(
            IssueComments,
            "issue",
            "view",
            str(number),
            "--repo",
            repo.full_name,
            "--comments",
            "--json",
            "comments",
        )
        return envelope.comments
