"""Page rendering commands for the folio CLI."""

from pathlib import Path
from typing import Optional

import typer

from ..components import InfoPage
from ..utils.context import get_site_context
from ..app import handle_exceptions

app = typer.Typer()


@app.command()
@handle_exceptions
def info(
    ctx: typer.Context,
    out: Optional[Path] = typer.Option(None, "--out", help="Write to a file instead of stdout"),
) -> None:
    """Render the info page for the ambient theme.

    Examples:
        folio --theme light pages info
    """
    config, theme_mode, _ = get_site_context(ctx)
    html = InfoPage(config).render(theme_mode)

    if out is None:
        typer.echo(html, nl=False)
        return

    if ctx.obj["dry_run"]:
        ctx.obj["console"].print(f"[yellow]DRY RUN: Would write info page to {out}[/yellow]")
        return

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    ctx.obj["console"].print(f"[green]Wrote {out}[/green]")
