"""Shared command context helpers.

Commands pull the loaded site configuration, the ambient theme mode and
the output formatter out of the Typer context through this module.
"""

from typing import Tuple

import typer

from ..config import ConfigManager, SiteConfig, get_ambient_theme
from ..models.theme import ThemeMode
from ..render import OutputFormatter


def get_config(ctx: typer.Context) -> SiteConfig:
    """Load the site configuration once per invocation.

    Raises:
        ConfigError: If folio.toml is invalid
    """
    if "config" not in ctx.obj:
        manager: ConfigManager = ctx.obj["config_manager"]
        ctx.obj["config"] = manager.load()
        if ctx.obj.get("debug"):
            ctx.obj["console"].print(f"[dim]Loaded configuration from {manager.config_file}[/dim]")
    return ctx.obj["config"]


def get_site_context(ctx: typer.Context) -> Tuple[SiteConfig, ThemeMode, OutputFormatter]:
    """Get configuration, ambient theme and formatter from context.

    Raises:
        ConfigError: If folio.toml is invalid
        ThemeError: If the requested theme is not light or dark
    """
    config = get_config(ctx)
    theme_mode = get_ambient_theme(config, ctx.obj.get("theme"))
    if ctx.obj.get("debug"):
        ctx.obj["console"].print(f"[dim]Ambient theme: {theme_mode.value}[/dim]")
    return config, theme_mode, ctx.obj["output_formatter"]
