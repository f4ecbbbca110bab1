"""Page components for folio."""

from .container import Container
from .comment import CommentWidget, GISCUS_CLIENT_URL
from .info import InfoPage
from .blog import BlogIndexPage, PostPage

__all__ = [
    "Container",
    "CommentWidget",
    "GISCUS_CLIENT_URL",
    "InfoPage",
    "BlogIndexPage",
    "PostPage",
]
