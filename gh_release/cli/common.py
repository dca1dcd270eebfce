"""Helpers shared by the CLI commands."""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ReleaseToolConfig
from ..github_client.client import GitHubClient

console = Console(stderr=True)


def fail(error: Exception | str) -> NoReturn:
    """Report a fatal error and exit with status 1."""
    console.print(f"❌ [red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(1)


def get_config(ctx: typer.Context) -> ReleaseToolConfig:
    """Return the validated configuration stored by the main callback."""
    config = ctx.obj if isinstance(ctx.obj, ReleaseToolConfig) else ReleaseToolConfig()
    try:
        config.validate()
    except ValueError as e:
        fail(e)
    return config


def make_client(config: ReleaseToolConfig) -> GitHubClient:
    """Create a GitHub client for the configured token."""
    return GitHubClient(token=config.token)
