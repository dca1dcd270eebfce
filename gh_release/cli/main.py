"""Main CLI entry point."""

import typer
from rich.console import Console

from ..config import ReleaseToolConfig
from ..log import setup_logging
from .changelog import changelog
from .milestone import milestone
from .options import OWNER_OPTION, REPO_OPTION, TOKEN_OPTION, VERBOSE_OPTION
from .release import release

app = typer.Typer(
    name="github-release",
    help="GitHub milestone, changelog and release automation",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    owner: str | None = OWNER_OPTION,
    repo: str | None = REPO_OPTION,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """GitHub milestone, changelog and release automation."""
    setup_logging(verbose)
    ctx.obj = ReleaseToolConfig(owner=owner, repo=repo, token=token)


# All commands including main command support -h shorthand via context_settings


app.command(
    name="milestone", context_settings={"help_option_names": ["-h", "--help"]}
)(milestone)
app.command(
    name="changelog", context_settings={"help_option_names": ["-h", "--help"]}
)(changelog)
app.command(name="release", context_settings={"help_option_names": ["-h", "--help"]})(
    release
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_release import __version__

    console.print(f"GitHub Release Tool v{__version__}")


if __name__ == "__main__":
    app()
