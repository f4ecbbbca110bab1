"""giscus comment widget component.

Renders the third-party giscus embed with a fixed configuration. The
ambient theme mode never affects the output: the widget always uses the
dark theme and pathname mapping.
"""

from typing import Dict, Optional, Union

from ..models.comment import GiscusConfig
from ..models.theme import ThemeMode
from ..templating import render_template


GISCUS_CLIENT_URL = "https://giscus.app/client.js"


class CommentWidget:
    """giscus discussion embed."""

    def __init__(self, config: Optional[GiscusConfig] = None) -> None:
        self.config = config or GiscusConfig()

    def attributes(self) -> Dict[str, str]:
        return self.config.to_data_attributes()

    def render(self, theme_mode: Optional[Union[str, ThemeMode]] = None) -> str:
        """Render the embed HTML.

        Args:
            theme_mode: Ambient theme mode, accepted for a uniform component
                interface and ignored
        """
        return render_template("comment.html", {
            "client_url": GISCUS_CLIENT_URL,
            "attributes": self.attributes(),
        })
