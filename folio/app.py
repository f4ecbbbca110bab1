"""Main Typer application for the folio CLI.

This module contains the main Typer app instance and registers all command
groups. It provides the entry point for the CLI and handles global options
like the site root, ambient theme, debug mode and output formatting.
"""

import os
import sys
from functools import wraps
from typing import Optional
from pathlib import Path

import typer
from rich.console import Console

from . import __version__
from .config import ConfigManager
from .render import OutputFormatter
from .exceptions import FolioError, ConfigError
from .utils.exceptions import format_error_for_user

app = typer.Typer(
    name="folio",
    help="Build and inspect the blog: posts, pages and comments",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
output_formatter = OutputFormatter(console)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"folio {__version__}")
        raise typer.Exit()


def show_environment_info(debug: bool) -> None:
    """Show environment variable information if debug is enabled."""
    if not debug:
        return

    console.print("[dim]Environment variables:[/dim]")
    for var in ("FOLIO_SITE_DIR", "FOLIO_THEME", "FOLIO_OUTPUT_FORMAT"):
        console.print(f"  {var}: {os.getenv(var, '(not set)')}", style="dim", markup=False)


@app.callback()
def main(
    ctx: typer.Context,
    site: Optional[Path] = typer.Option(
        None,
        "--site",
        "-s",
        help="Site root containing folio.toml",
    ),
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        help="Ambient theme mode (light, dark)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be done without writing files",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format (table, json, yaml)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """folio - build and inspect a personal blog.

    Examples:
        # List posts, newest first
        folio posts list

        # Check every post's front-matter
        folio posts validate

        # Render the site for the light theme
        folio --theme light build --out public

        # Check the comment widget identifiers against giscus
        folio comments verify
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["dry_run"] = dry_run
    ctx.obj["output_format"] = output_format
    ctx.obj["theme"] = theme
    ctx.obj["console"] = console
    ctx.obj["output_formatter"] = output_formatter
    ctx.obj["config_manager"] = ConfigManager(site)

    if debug:
        console.print("[dim]Debug mode enabled[/dim]")
        console.print(f"Site root: {ctx.obj['config_manager'].site_dir}", style="dim", markup=False)
        show_environment_info(debug)


def handle_exceptions(func):
    """Decorator to handle common exceptions in commands."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FolioError as e:
            ctx = kwargs.get("ctx")
            debug = ctx.obj.get("debug", False) if ctx and ctx.obj else False
            console.print(format_error_for_user(e, debug), style="red", markup=False, soft_wrap=True)
            if not debug and not isinstance(e, ConfigError):
                console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            raise typer.Exit(130)
        except typer.Exit:
            raise
        except Exception as e:
            ctx = kwargs.get("ctx")
            debug = ctx.obj.get("debug", False) if ctx and ctx.obj else False

            if debug:
                console.print_exception(show_locals=True)
            else:
                console.print(f"Unexpected error: {e}", style="red", markup=False)
                console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
    return wrapper


_registered = False


def register_commands() -> None:
    """Register all command groups with the main app."""
    global _registered
    if _registered:
        return

    from .cmds import (
        posts_app,
        build_command,
        pages_app,
        comments_app,
        config_app,
    )

    app.add_typer(posts_app, name="posts", help="Inspect and validate blog posts")
    app.command(name="build", help="Render the site to HTML")(build_command)
    app.add_typer(pages_app, name="pages", help="Render individual pages")
    app.add_typer(comments_app, name="comments", help="Comment widget configuration")
    app.add_typer(config_app, name="config", help="Manage site configuration")
    _registered = True


def cli():
    """Entry point for the CLI."""
    register_commands()

    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
