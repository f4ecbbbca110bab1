"""Site build command for the folio CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..site import SiteBuilder
from ..utils.context import get_site_context
from ..app import handle_exceptions

console = Console()


@handle_exceptions
def build(
    ctx: typer.Context,
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory (defaults to output_dir from folio.toml)"),
    clean: bool = typer.Option(False, "--clean", help="Remove the output directory first"),
) -> None:
    """Render the blog index, info page and every post to HTML.

    Examples:
        # Build into the configured output directory
        folio build

        # Light theme into a scratch directory
        folio --theme light build --out /tmp/site --clean
    """
    config, theme_mode, _ = get_site_context(ctx)
    dry_run = ctx.obj["dry_run"]

    site_dir = ctx.obj["config_manager"].site_dir
    result = SiteBuilder(config, theme_mode, site_dir).build(out, dry_run=dry_run, clean=clean)

    if dry_run:
        console.print(f"[yellow]DRY RUN: Would write {len(result.files)} files to {result.output_dir}[/yellow]")
        for path in result.files:
            console.print(f"  {path}")
        return

    if ctx.obj["debug"]:
        for path in result.files:
            console.print(f"[dim]wrote {path}[/dim]")

    console.print(
        f"[green]Built {result.post_count} posts ({len(result.files)} files, "
        f"{result.theme_mode.value} theme) into {result.output_dir}[/green]"
    )
