"""Allow running as ``python -m gh_issue_export``."""

from .cli.main import app

if __name__ == "__main__":
    app()
