"""folio package.

A small static site tool for a personal blog: it loads MDX posts with
front-matter headers, renders the info page and post pages for a light
or dark theme, and embeds the giscus comment widget.
"""

__version__ = "0.1.0"
__author__ = "Luca Cespedes"
__description__ = "Personal blog site builder"

# Re-export main classes for convenience
from .config import ConfigManager, SiteConfig
from .content import ContentLoader, load_post, parse_front_matter
from .components import CommentWidget, InfoPage, BlogIndexPage, PostPage
from .models import ThemeMode, ColorTokens, GiscusConfig, FrontMatter, Post
from .render import OutputFormatter
from .site import SiteBuilder, BuildResult
from .client import GiscusClient, VerificationResult
from .exceptions import (
    FolioError,
    ConfigError,
    ValidationError,
    FrontMatterError,
    ThemeError,
    ContentNotFoundError,
    RenderError,
    MaxRetriesExceededError,
    APIError,
    BadRequestError,
    NotFoundError,
    ServerError,
    RateLimitError,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "ConfigManager",
    "SiteConfig",
    "ContentLoader",
    "load_post",
    "parse_front_matter",
    "CommentWidget",
    "InfoPage",
    "BlogIndexPage",
    "PostPage",
    "ThemeMode",
    "ColorTokens",
    "GiscusConfig",
    "FrontMatter",
    "Post",
    "OutputFormatter",
    "SiteBuilder",
    "BuildResult",
    "GiscusClient",
    "VerificationResult",
    "FolioError",
    "ConfigError",
    "ValidationError",
    "FrontMatterError",
    "ThemeError",
    "ContentNotFoundError",
    "RenderError",
    "MaxRetriesExceededError",
    "APIError",
    "BadRequestError",
    "NotFoundError",
    "ServerError",
    "RateLimitError",
]
