"""Blog index and post pages."""

from typing import List, Optional, Union

from ..config import SiteConfig
from ..models.post import Post
from ..models.theme import ThemeMode, resolve_color
from .comment import CommentWidget
from .container import Container


class BlogIndexPage:
    """Lists every post, newest first."""

    def __init__(self, config: Optional[SiteConfig] = None) -> None:
        self.config = config or SiteConfig()
        self.container = Container(self.config)

    def render(self, posts: List[Post], theme_mode: Union[str, ThemeMode]) -> str:
        return self.container.render(
            "index.html",
            theme_mode,
            posts=posts,
            text_color=resolve_color(self.config.colors.for_mode(theme_mode)),
        )


class PostPage:
    """A single post followed by its comment widget."""

    def __init__(self, config: Optional[SiteConfig] = None) -> None:
        self.config = config or SiteConfig()
        self.container = Container(self.config)
        self.comments = CommentWidget(self.config.comments)

    def render(self, post: Post, theme_mode: Union[str, ThemeMode]) -> str:
        return self.container.render(
            "post.html",
            theme_mode,
            page_title=post.title,
            post=post,
            body_html=post.render_body(),
            comments_html=self.comments.render(theme_mode),
            text_color=resolve_color(self.config.colors.for_mode(theme_mode)),
        )
