"""Command modules for the folio CLI.

This module exports all command groups (Typer apps) that can be registered
with the main application.
"""

from .posts import app as posts_app
from .build import build as build_command
from .pages import app as pages_app
from .comments import app as comments_app
from .config import app as config_app

__all__ = [
    "posts_app",
    "build_command",
    "pages_app",
    "comments_app",
    "config_app",
]
