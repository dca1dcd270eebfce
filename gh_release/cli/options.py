"""Standardized CLI option definitions for consistent shorthand mappings.

This module provides centralized option definitions so that the subcommands
share flag names, shorthands and help texts.
"""

import typer

# Repository selection - global options
OWNER_OPTION = typer.Option(
    None, "--owner", "-o", help="Repository owner (defaults to GRT_OWNER env var)"
)

REPO_OPTION = typer.Option(
    None, "--repo", "-r", help="Repository name (defaults to GRT_REPO env var)"
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")

# Behavior options - control command behavior
DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Don't do it, just report what would be done"
)

FORCE_OPTION = typer.Option(
    False, "--force", "-f", help="Overwrite milestone on already milestoned issues"
)

# Commit range options
FROM_OPTION = typer.Option(
    ..., "--from", metavar="TAG/COMMIT", help="Start tag/commit"
)

TO_REF_OPTION = typer.Option(
    "HEAD", "--to", metavar="TAG/COMMIT", help="End tag/commit"
)

# Changelog options
MARKDOWN_OPTION = typer.Option(False, "--md", help="Markdown headings and links")

SKIP_LABEL_OPTION = typer.Option(
    None,
    "--skip-label",
    metavar="LABEL",
    help=(
        "Issue labels to skip (can be used multiple times, defaults to "
        "comma-separated GRT_SKIPLABELS env var)"
    ),
)

RELEASE_NAME_OPTION = typer.Option(
    None,
    "--to",
    metavar="NAME",
    help="Release name/version (default is milestone name)",
)
