"""Page layout container shared by every page."""

from typing import Any, Dict, Optional, Union

from ..config import SiteConfig
from ..models.theme import ThemeMode, resolve_color
from ..templating import render_template


# (background, foreground) per theme mode
SURFACES = {
    ThemeMode.LIGHT: ("white", "black"),
    ThemeMode.DARK: ("gray.800", "white"),
}


class Container:
    """Wraps page content in the site layout with a titled head."""

    def __init__(self, config: Optional[SiteConfig] = None) -> None:
        self.config = config or SiteConfig()

    def context(self, theme_mode: Union[str, ThemeMode], page_title: Optional[str] = None) -> Dict[str, Any]:
        """Base template context for a page in the given theme mode."""
        mode = ThemeMode.parse(theme_mode)
        background, foreground = SURFACES[mode]
        return {
            "title": self.config.page_title(page_title),
            "description": self.config.description,
            "theme_mode": mode.value,
            "background": resolve_color(background),
            "foreground": resolve_color(foreground),
        }

    def render(
        self,
        template_name: str,
        theme_mode: Union[str, ThemeMode],
        page_title: Optional[str] = None,
        **context: Any,
    ) -> str:
        """Render a page template inside the layout."""
        full_context = self.context(theme_mode, page_title)
        full_context.update(context)
        return render_template(template_name, full_context)
