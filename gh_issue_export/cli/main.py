"""Main CLI entry point."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..config import ExportConfig, parse_issue_limit
from ..errors import IssueExportError
from ..export.exporter import ExportSummary, IssueExporter
from ..github_client.client import GitHubCLIClient
from ..github_client.models import RepositoryRef
from ..utils.logging import setup_logging
from .options import LIMIT_OPTION, OUTPUT_OPTION, REPO_OPTION

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-issue-export",
    help="Export all GitHub issues and their discussions as a text report",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
# Diagnostics only; stdout carries the report
console = Console(stderr=True)
logger = logging.getLogger("gh_issue_export.cli")


def _version_callback(value: bool) -> None:
    if value:
        from gh_issue_export import __version__

        typer.echo(f"gh-issue-export v{__version__}")
        raise typer.Exit()


def _print_summary(summary: ExportSummary) -> None:
    table = Table(title="Export Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Repository", summary.repository)
    table.add_row("Issues Found", str(summary.found))
    table.add_row("Issues Exported", str(summary.exported))
    table.add_row("Issues Skipped", str(summary.skipped))
    table.add_row("Missing Comment Threads", str(summary.comment_fallbacks))
    console.print(table)


@app.command()
def export(
    repo: str | None = REPO_OPTION,
    limit: str | None = LIMIT_OPTION,
    output: Path | None = OUTPUT_OPTION,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
) -> None:
    """Export every issue of a repository, open and closed, with comments.

    The report goes to stdout (or --output); progress and errors go to stderr.
    Requires the GitHub CLI, authenticated with 'gh auth login'.

    Examples:
        # Export the repository of the current directory
        gh-issue-export > issues.txt

        # Export another repository, at most 100 issues
        gh-issue-export --repo octocat/hello-world --limit 100 -o issues.txt
    """
    setup_logging()
    logger.info("Starting GitHub issue export")

    config = ExportConfig()
    try:
        if limit is None:
            config.validate()
            issue_limit = config.issue_limit
        else:
            issue_limit = parse_issue_limit(limit, "--limit")
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    repo_ref = None
    if repo:
        try:
            repo_ref = RepositoryRef.parse(repo)
        except ValueError as e:
            logger.error(str(e))
            raise typer.Exit(1)

    client = GitHubCLIClient(executable=config.gh_path)
    try:
        client.ensure_available()
        logger.info("GitHub CLI found.")
        client.ensure_authenticated()
        logger.info("GitHub CLI is authenticated.")

        exporter = IssueExporter(client, sys.stdout)
        repo_ref, numbers = exporter.prepare(repo_ref, issue_limit)

        # Output file is only touched once the issue list is known
        if output is None:
            summary = exporter.export_numbers(repo_ref, numbers)
        else:
            with output.open("w", encoding="utf-8") as f:
                summary = IssueExporter(client, f).export_numbers(repo_ref, numbers)
            logger.info("Report written to %s", output)
    except IssueExportError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    except OSError as e:
        logger.error(
            "Cannot write report to %s: %s",
            output if output is not None else "stdout",
            e,
        )
        raise typer.Exit(1)

    _print_summary(summary)
    logger.info("Export finished successfully.")


if __name__ == "__main__":
    app()
