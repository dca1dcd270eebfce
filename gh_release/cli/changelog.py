"""CLI command for rendering a milestone changelog."""

import typer

from ..release.changelog import generate_changelog
from .common import fail, get_config, make_client
from .options import MARKDOWN_OPTION, SKIP_LABEL_OPTION


def changelog(
    ctx: typer.Context,
    release: str = typer.Argument(
        ..., metavar="RELEASE", help="The release or milestone name"
    ),
    markdown: bool = MARKDOWN_OPTION,
    skip_labels: list[str] | None = SKIP_LABEL_OPTION,
) -> None:
    """Show changelog for milestone.

    The milestone is the part of the release name before the first "-", so
    "v1.2.0-rc.1" shows the changelog of milestone "v1.2.0".
    """
    config = get_config(ctx)

    try:
        client = make_client(config)
        text = generate_changelog(
            client,
            config.owner,
            config.repo,
            release,
            markdown=markdown,
            skip_labels=config.resolve_skip_labels(skip_labels),
            with_subject=True,
        )
    except Exception as e:
        fail(e)

    typer.echo(text, nl=False)
