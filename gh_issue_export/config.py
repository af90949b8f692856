"""Configuration for issue export, read from environment variables."""

import os

DEFAULT_ISSUE_LIMIT = 5000


def parse_issue_limit(value: str, name: str) -> int:
    """Parse a positive issue limit.

    Args:
        value: Raw value from the environment or the command line
        name: Setting name used in the error message

    Raises:
        ValueError: If the value is not a positive integer
    """
    try:
        limit = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'")
    if limit <= 0:
        raise ValueError(f"{name} must be positive, got {limit}")
    return limit


class ExportConfig:
    """Configuration class for an export run."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        self.raw_limit: str | None = os.getenv("GH_ISSUE_EXPORT_LIMIT")
        self.gh_path: str = os.getenv("GH_ISSUE_EXPORT_GH_PATH") or "gh"

    @property
    def issue_limit(self) -> int:
        """Maximum number of issues to enumerate."""
        if not self.raw_limit:
            return DEFAULT_ISSUE_LIMIT
        return parse_issue_limit(self.raw_limit, "GH_ISSUE_EXPORT_LIMIT")

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if self.raw_limit:
            parse_issue_limit(self.raw_limit, "GH_ISSUE_EXPORT_LIMIT")
