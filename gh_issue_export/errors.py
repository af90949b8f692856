"""Exception hierarchy for issue export.

Fatal errors abort the whole run. ``GitHubCLIError`` raised while fetching a
single issue is handled by the exporter loop instead.
"""


class IssueExportError(Exception):
    """Base class for all export errors."""


class GitHubCLIError(IssueExportError):
    """A call to the GitHub CLI failed."""


class GhNotInstalledError(GitHubCLIError):
    """The GitHub CLI executable could not be found."""


class GhNotAuthenticatedError(GitHubCLIError):
    """The GitHub CLI has no authenticated session."""


class GhCommandError(GitHubCLIError):
    """A ``gh`` invocation exited with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str = ""):
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"'{' '.join(args)}' exited with status {returncode}"
            + (f": {stderr.strip()}" if stderr.strip() else "")
        )


class GhResponseError(GitHubCLIError):
    """``gh`` produced output that could not be parsed."""


class RepositoryDetectionError(IssueExportError):
    """The repository to export could not be determined."""


class IssueListError(IssueExportError):
    """The list of issue numbers could not be retrieved."""
