"""CLI command for publishing a release."""

import typer

from ..release.naming import milestone_for_release
from ..release.publish import publish_release
from .common import console, fail, get_config, make_client
from .options import DRY_RUN_OPTION, RELEASE_NAME_OPTION, SKIP_LABEL_OPTION


def release(
    ctx: typer.Context,
    name: str = typer.Argument(..., metavar="MILESTONE", help="The milestone name"),
    to: str | None = RELEASE_NAME_OPTION,
    skip_labels: list[str] | None = SKIP_LABEL_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
) -> None:
    """Create release from milestone.

    The release is named --to when given, otherwise after the milestone.
    A name with a "-" suffix (e.g. "v1.2.0-rc.1") is published as a
    prerelease and leaves the milestone open; a final release closes it.

    In dry-run mode the release notes are written to stdout instead.

    Examples:
        github-release release v1.2.0
        github-release release --to v1.2.0-rc.1 v1.2.0
    """
    config = get_config(ctx)
    release_name = to or name

    if milestone_for_release(release_name) != milestone_for_release(name):
        fail(f"Release {release_name} does not belong to milestone {name}")

    if dry_run:
        console.print("⚠️  [yellow]Dry run - no changes will be made[/yellow]")

    try:
        client = make_client(config)
        published = publish_release(
            client,
            config.owner,
            config.repo,
            release_name,
            skip_labels=config.resolve_skip_labels(skip_labels),
            dry_run=dry_run,
        )
    except Exception as e:
        fail(e)

    kind = "prerelease" if published.prerelease else "release"
    if dry_run:
        typer.echo(published.body, nl=False)
        return

    console.print(f"✅ [green]Created {kind} {published.name}[/green]")
    if published.html_url:
        console.print(published.html_url)
