"""Data models for folio.

This package contains Pydantic models for the site's entities:
theme modes and color tokens, the giscus widget configuration,
and blog post documents.
"""

from .theme import ThemeMode, ColorTokens, PALETTE, resolve_color
from .comment import GiscusConfig
from .post import FrontMatter, Post


__all__ = [
    "ThemeMode",
    "ColorTokens",
    "PALETTE",
    "resolve_color",
    "GiscusConfig",
    "FrontMatter",
    "Post",
]
