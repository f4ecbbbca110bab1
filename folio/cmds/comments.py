"""Comment widget commands for the folio CLI.

This module shows the giscus widget configuration, prints the embed HTML
and checks the configured identifiers against the giscus service.
"""

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..client import GiscusClient
from ..components import CommentWidget
from ..utils.context import get_config
from ..app import handle_exceptions

app = typer.Typer()
console = Console()


@app.command()
@handle_exceptions
def show(ctx: typer.Context) -> None:
    """Show the widget configuration."""
    config = get_config(ctx)
    ctx.obj["output_formatter"].render(
        config.comments.model_dump(),
        format=ctx.obj["output_format"],
        title="giscus configuration",
    )


@app.command()
@handle_exceptions
def embed(ctx: typer.Context) -> None:
    """Print the embed HTML."""
    config = get_config(ctx)
    typer.echo(CommentWidget(config.comments).render(), nl=False)


@app.command()
@handle_exceptions
def verify(
    ctx: typer.Context,
    timeout: int = typer.Option(30, "--timeout", min=1, help="Request timeout in seconds"),
    max_retries: int = typer.Option(3, "--max-retries", min=0, help="Maximum number of retry attempts"),
) -> None:
    """Check the repository and category ids against giscus.

    Exits with status 1 when an identifier does not match.
    """
    config = get_config(ctx)
    comments = config.comments

    if ctx.obj["dry_run"]:
        console.print(f"[yellow]DRY RUN: Would query giscus for {comments.repo}[/yellow]")
        return

    client = GiscusClient(timeout=timeout, retry_attempts=max_retries, debug=ctx.obj["debug"])
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Querying giscus for {comments.repo}...", total=None)
        result = client.verify(comments)

    if ctx.obj["output_format"] in ["json", "yaml"]:
        data = result.model_dump()
        data["ok"] = result.ok
        ctx.obj["output_formatter"].render(data, format=ctx.obj["output_format"])
    else:
        table = Table(title=f"giscus: {comments.repo}")
        table.add_column("Check", style="cyan")
        table.add_column("Configured")
        table.add_column("Remote")
        table.add_column("OK")
        table.add_row("Repository id", comments.repo_id, result.remote_repo_id or "", _mark(result.repo_id_matches))
        table.add_row("Category", comments.category, comments.category if result.category_found else "", _mark(result.category_found))
        table.add_row("Category id", comments.category_id, result.remote_category_id or "", _mark(result.category_id_matches))
        console.print(table)
        if not result.category_found and result.available_categories:
            console.print(f"[dim]Available categories: {', '.join(result.available_categories)}[/dim]")

    if not result.ok:
        raise typer.Exit(1)


def _mark(ok: bool) -> str:
    return "[green]✓[/green]" if ok else "[red]✗[/red]"
