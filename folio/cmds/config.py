"""Configuration commands for the folio CLI."""

import typer
from rich.console import Console

from ..config import ConfigManager
from ..utils.context import get_config
from ..app import handle_exceptions

app = typer.Typer()
console = Console()


@app.command()
@handle_exceptions
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing folio.toml"),
) -> None:
    """Write a starter folio.toml in the site root."""
    manager: ConfigManager = ctx.obj["config_manager"]

    if ctx.obj["dry_run"]:
        console.print(f"[yellow]DRY RUN: Would write {manager.config_file}[/yellow]")
        return

    path = manager.init_config(force=force)
    console.print(f"[green]Wrote {path}[/green]")


@app.command()
@handle_exceptions
def show(ctx: typer.Context) -> None:
    """Show the effective site configuration."""
    config = get_config(ctx)
    ctx.obj["output_formatter"].render(
        config.model_dump(mode="json"),
        format=ctx.obj["output_format"] or "yaml",
    )
