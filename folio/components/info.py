"""Info page: static introduction with theme-dependent text color."""

from typing import List, Optional, Union

from ..config import SiteConfig
from ..models.theme import ColorTokens, ThemeMode, resolve_color
from .container import Container


HEADING = "Hi, I'm Luca Cespedes"

PARAGRAPHS: List[str] = [
    "I am a Smart Contract developer and blockchain enthusiast.",
    "In this blog I will be uploading posts about all this, not only to share it with you, "
    "but to help me to have a place to come to when I forget some things 😁.",
    "All comments on the posts are welcome, and in fact if you find any mistakes, "
    "I would appreciate if you mention them to correct them.",
]


class InfoPage:
    """Renders the info page for an ambient theme mode."""

    page_title = "Info"

    def __init__(self, config: Optional[SiteConfig] = None) -> None:
        self.config = config or SiteConfig()
        self.container = Container(self.config)

    @property
    def colors(self) -> ColorTokens:
        return self.config.colors

    def text_color(self, theme_mode: Union[str, ThemeMode]) -> str:
        """Color token for the paragraph text.

        Raises:
            ThemeError: If theme_mode is not light or dark
        """
        return self.colors.for_mode(theme_mode)

    def render(self, theme_mode: Union[str, ThemeMode]) -> str:
        return self.container.render(
            "info.html",
            theme_mode,
            page_title=self.page_title,
            heading=HEADING,
            paragraphs=PARAGRAPHS,
            text_color=resolve_color(self.text_color(theme_mode)),
        )
