"""CLI option definitions for the export command."""

import typer

REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    help="Repository as OWNER/NAME (default: detect from the current directory)",
)

LIMIT_OPTION = typer.Option(
    None,
    "--limit",
    "-L",
    help="Maximum number of issues to export (default: 5000)",
)

OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    dir_okay=False,
    help="Output file path (default: print to stdout)",
)
