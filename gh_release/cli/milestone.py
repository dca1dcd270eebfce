"""CLI command for collecting resolved issues into a milestone."""

import typer
from rich.markup import escape
from rich.table import Table

from ..release.milestone import SyncResult, sync_milestone
from .common import console, fail, get_config, make_client
from .options import DRY_RUN_OPTION, FORCE_OPTION, FROM_OPTION, TO_REF_OPTION


def _print_summary(result: SyncResult) -> None:
    """Show marked and skipped issues as a table."""
    prefix = "Would mark" if result.dry_run else "Marked"
    table = Table(title=f"Milestone {result.milestone}")
    table.add_column("Issue", justify="right", style="cyan")
    table.add_column("Result")

    for number in result.marked:
        table.add_row(f"#{number}", f"[green]{prefix}[/green]")
    for skipped in result.skipped:
        table.add_row(
            f"#{skipped.number}",
            f"[yellow]Skipped: {escape(skipped.reason)}[/yellow]",
        )

    if result.referenced:
        console.print(table)
    console.print(
        f"✅ [green]{prefix} {len(result.marked)} of "
        f"{len(result.referenced)} referenced issue(s)[/green]"
    )


def milestone(
    ctx: typer.Context,
    title: str = typer.Argument(..., metavar="MILESTONE", help="The milestone name"),
    since: str = FROM_OPTION,
    to: str = TO_REF_OPTION,
    force: bool = FORCE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
) -> None:
    """Collect resolved issues into milestone.

    Scans the subjects of the commits between --from and --to for
    "fixes #N" and a trailing "(#N)", then assigns every referenced closed
    issue to the milestone, creating the milestone if needed.

    Examples:
        github-release --owner myorg --repo myrepo milestone \\
            --from v1.1.0 v1.2.0

        # Preview without changing anything
        github-release milestone --from v1.1.0 --to main --dry-run v1.2.0
    """
    config = get_config(ctx)

    if dry_run:
        console.print("⚠️  [yellow]Dry run - no changes will be made[/yellow]")

    try:
        client = make_client(config)
        result = sync_milestone(
            client,
            config.owner,
            config.repo,
            since,
            to,
            title,
            force=force,
            dry_run=dry_run,
        )
    except Exception as e:
        fail(e)

    _print_summary(result)
