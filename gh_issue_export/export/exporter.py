"""Issue export loop: resolve, enumerate, fetch, format, write."""

import logging
from dataclasses import dataclass
from typing import TextIO

from ..config import DEFAULT_ISSUE_LIMIT
from ..errors import GitHubCLIError, IssueListError, RepositoryDetectionError
from ..github_client.models import GitHubComment, RepositoryRef
from ..github_client.source import IssueSource
from .formatter import format_issue

logger = logging.getLogger(__name__)


@dataclass
class ExportSummary:
    """Outcome counts of one export run."""

    repository: str
    found: int = 0
    exported: int = 0
    skipped: int = 0
    comment_fallbacks: int = 0


class IssueExporter:
    """Write a report of every issue in a repository to a text stream.

    Each issue is processed completely before the next one starts. Issues
    whose metadata cannot be fetched are skipped; issues whose comments
    cannot be fetched are written with an empty discussion.
    """

    def __init__(self, source: IssueSource, out: TextIO):
        self.source = source
        self.out = out

    def resolve_repository(self, repo: RepositoryRef | None = None) -> RepositoryRef:
        if repo is not None:
            logger.info("Using repository: %s", repo.full_name)
            return repo

        logger.info("Detecting current GitHub repository...")
        try:
            repo = self.source.get_current_repository()
        except GitHubCLIError as e:
            raise RepositoryDetectionError(
                "Failed to detect GitHub repository information. Make sure you "
                "are in a git repository with a remote pointing to GitHub."
            ) from e
        logger.info("Detected repository: %s", repo.full_name)
        return repo

    def list_issues(self, repo: RepositoryRef, limit: int) -> list[int]:
        logger.info("Fetching list of all issue numbers (limit: %d)...", limit)
        try:
            return self.source.list_issue_numbers(repo, limit)
        except GitHubCLIError as e:
            raise IssueListError(
                f"Failed to list issues for repository '{repo.full_name}'."
            ) from e

    def export_issue(
        self, repo: RepositoryRef, number: int, summary: ExportSummary
    ) -> bool:
        """Fetch and write a single issue.

        Returns:
            True if a block was written, False if the issue was skipped
        """
        logger.info("Processing Issue #%d...", number)

        logger.info("Fetching details for Issue #%d...", number)
        try:
            issue = self.source.get_issue(repo, number)
        except GitHubCLIError as e:
            logger.debug("Issue #%d details failed: %s", number, e)
            logger.info("Skipping Issue #%d: Failed to fetch main details.", number)
            summary.skipped += 1
            return False

        logger.info("Fetching comments for Issue #%d...", number)
        comments: list[GitHubComment]
        try:
            comments = self.source.get_comments(repo, number)
        except GitHubCLIError as e:
            logger.debug("Issue #%d comments failed: %s", number, e)
            logger.warning(
                "Warning for Issue #%d: Failed to fetch comments, but proceeding "
                "with issue details.",
                number,
            )
            comments = []
            summary.comment_fallbacks += 1

        self.out.write(format_issue(issue, comments))
        self.out.flush()
        summary.exported += 1

        logger.info("Finished processing Issue #%d.", number)
        return True

    def prepare(
        self, repo: RepositoryRef | None = None, limit: int = DEFAULT_ISSUE_LIMIT
    ) -> tuple[RepositoryRef, list[int]]:
        """Resolve the repository and list its issue numbers.

        Nothing is written to the output stream.

        Raises:
            RepositoryDetectionError: If no repository can be determined
            IssueListError: If the issue numbers cannot be listed
        """
        repo = self.resolve_repository(repo)
        return repo, self.list_issues(repo, limit)

    def export_numbers(self, repo: RepositoryRef, numbers: list[int]) -> ExportSummary:
        """Write a block for each issue number, in order."""
        summary = ExportSummary(repository=repo.full_name, found=len(numbers))

        if not numbers:
            logger.info("No issues found for repository '%s'.", repo.full_name)
            return summary

        logger.info("Found %d issues. Processing each one...", len(numbers))
        for number in numbers:
            self.export_issue(repo, number, summary)

        return summary

    def run(
        self, repo: RepositoryRef | None = None, limit: int = DEFAULT_ISSUE_LIMIT
    ) -> ExportSummary:
        """Export all issues of ``repo`` (or the detected repository).

        Raises:
            RepositoryDetectionError: If no repository can be determined
            IssueListError: If the issue numbers cannot be listed
        """
        repo, numbers = self.prepare(repo, limit)
        return self.export_numbers(repo, numbers)
