"""Post commands for the folio CLI.

This module provides commands for listing, showing and validating the
blog post documents in the content directory.
"""

import typer
from rich.console import Console
from rich.table import Table

from ..content import ContentLoader
from ..utils.context import get_site_context
from ..utils.exceptions import BulkValidationError
from ..app import handle_exceptions

app = typer.Typer()
console = Console()


@app.command("list")
@handle_exceptions
def list_posts(
    ctx: typer.Context,
    limit: int = typer.Option(0, "--limit", help="Show at most this many posts (0 for all)"),
) -> None:
    """List posts, newest first.

    Examples:
        # List all posts
        folio posts list

        # The three most recent posts as JSON
        folio -o json posts list --limit 3
    """
    config, _, formatter = get_site_context(ctx)
    posts, _ = ContentLoader(config.content_dir).load_all()
    if limit > 0:
        posts = posts[:limit]

    rows = [post.summary_dict() for post in posts]
    formatter.render(
        rows,
        format=ctx.obj["output_format"],
        columns=["slug", "title", "published_at", "reading_time"],
        title=f"Posts ({len(rows)} items)",
    )


@app.command()
@handle_exceptions
def show(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Post slug (file name without extension)"),
    html: bool = typer.Option(False, "--html", help="Render the body to HTML"),
) -> None:
    """Show one post's front-matter and body.

    Examples:
        folio posts show gas-optimization-storage
        folio posts show gas-optimization-storage --html
    """
    config, _, formatter = get_site_context(ctx)
    post = ContentLoader(config.content_dir).get(slug)
    body = post.render_body() if html else post.body

    if ctx.obj["output_format"] in ["json", "yaml"]:
        data = post.summary_dict()
        data["body"] = body
        formatter.render(data, format=ctx.obj["output_format"])
        return

    table = Table(title=post.title, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Slug", post.slug)
    table.add_row("Published", post.published_at)
    table.add_row("Summary", post.summary)
    table.add_row("Reading time", f"{post.reading_time} min")
    table.add_row("File", str(post.path))
    console.print(table)
    console.print(body, markup=False, highlight=False)


@app.command()
@handle_exceptions
def validate(ctx: typer.Context) -> None:
    """Validate the front-matter of every post.

    Exits with status 1 when any document is invalid.
    """
    config, _, _ = get_site_context(ctx)
    loader = ContentLoader(config.content_dir)
    documents = loader.discover()
    failures = loader.validate()

    if failures:
        raise BulkValidationError(
            "Content validation failed",
            valid_documents=len(documents) - len(failures),
            failures=[(str(path), message) for path, message in failures],
        )

    console.print(f"[green]{len(documents)} posts valid[/green]")
