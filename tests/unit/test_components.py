"""Unit tests for the page components.

Tests InfoPage color selection and rendering, the CommentWidget embed,
and the blog pages.
"""

from pathlib import Path

import pytest

from folio.components import BlogIndexPage, CommentWidget, Container, InfoPage, PostPage
from folio.config import SiteConfig
from folio.exceptions import ThemeError
from folio.models import ColorTokens, FrontMatter, GiscusConfig, Post, ThemeMode


@pytest.fixture
def post():
    return Post(
        slug="storage-packing",
        path=Path("storage-packing.mdx"),
        front_matter=FrontMatter(title="Packing storage", publishedAt="2022-06-12", summary="Slots"),
        body="## Slots\n\nPack <b>tight</b>.\n",
    )


class TestInfoPage:
    """Test cases for InfoPage."""

    def test_text_color_light(self):
        """Test light mode selects the light token."""
        assert InfoPage().text_color("light") == "gray.700"
        assert InfoPage().text_color(ThemeMode.LIGHT) == "gray.700"

    def test_text_color_dark(self):
        """Test dark mode selects the dark token."""
        assert InfoPage().text_color("dark") == "gray.400"

    @pytest.mark.parametrize("mode", ["sepia", "", "system"])
    def test_text_color_rejects_third_value(self, mode):
        """Test no other theme value is accepted."""
        with pytest.raises(ThemeError):
            InfoPage().text_color(mode)

    def test_text_color_uses_config_tokens(self):
        """Test configured tokens are used."""
        page = InfoPage(SiteConfig(colors=ColorTokens(light="gray.600", dark="gray.300")))
        assert page.text_color("light") == "gray.600"
        assert page.text_color("dark") == "gray.300"

    @pytest.mark.parametrize("mode", ["light", "dark"])
    def test_render_never_fails(self, mode):
        """Test both supported modes render."""
        html = InfoPage().render(mode)
        assert "Luca Cespedes</h1>" in html
        assert "Smart Contract developer" in html

    def test_render_light(self):
        """Test the light paragraph color."""
        html = InfoPage().render("light")
        assert "<title>Info - Luca Cespedes</title>" in html
        assert 'style="color: #2D3748"' in html
        assert 'data-theme="light"' in html

    def test_render_dark(self):
        """Test the dark paragraph color."""
        html = InfoPage().render("dark")
        assert 'style="color: #A0AEC0"' in html
        assert "#2D3748" not in html
        assert 'data-theme="dark"' in html

    def test_render_invalid_mode(self):
        """Test rendering rejects unknown modes."""
        with pytest.raises(ThemeError):
            InfoPage().render("sepia")


class TestCommentWidget:
    """Test cases for CommentWidget."""

    def test_default_config(self):
        """Test the widget uses the fixed record by default."""
        assert CommentWidget().config == GiscusConfig()

    @pytest.mark.parametrize("mode", [None, "light", "dark", ThemeMode.LIGHT])
    def test_theme_and_mapping_fixed(self, mode):
        """Test the embed is always dark with pathname mapping."""
        html = CommentWidget().render(mode)
        assert 'data-theme="dark"' in html
        assert 'data-mapping="pathname"' in html

    def test_ambient_theme_ignored(self):
        """Test the ambient theme does not change the output."""
        widget = CommentWidget()
        assert widget.render("light") == widget.render("dark") == widget.render()

    def test_embed_attributes(self):
        """Test every configured attribute is on the script tag."""
        html = CommentWidget().render()
        assert '<script src="https://giscus.app/client.js"' in html
        assert 'data-repo="melvnl/melvinliu.com"' in html
        assert 'data-repo-id="R_kgDOHk-dUg"' in html
        assert 'data-category="General"' in html
        assert 'data-category-id="DIC_kwDOHk-dUs4CP-Ao"' in html
        assert 'data-reactions-enabled="0"' in html
        assert 'data-emit-metadata="0"' in html
        assert 'crossorigin="anonymous"' in html
        assert '<div class="giscus"></div>' in html

    def test_attribute_values_escaped(self):
        """Test attribute values are HTML-escaped."""
        html = CommentWidget(GiscusConfig(category='Q&A "x"')).render()
        assert 'data-category="Q&amp;A &#34;x&#34;"' in html


class TestContainer:
    """Test cases for Container."""

    def test_context_light(self):
        """Test light pages use a white background."""
        context = Container().context("light", "Info")
        assert context["title"] == "Info - Luca Cespedes"
        assert context["background"] == "#FFFFFF"
        assert context["theme_mode"] == "light"

    def test_context_dark(self):
        """Test dark pages use a dark background."""
        context = Container(SiteConfig(title="Blog")).context("dark")
        assert context["title"] == "Blog"
        assert context["background"] == "#1A202C"
        assert context["foreground"] == "#FFFFFF"


class TestBlogPages:
    """Test cases for the blog index and post pages."""

    def test_index_lists_posts(self, post):
        """Test the index links every post."""
        html = BlogIndexPage().render([post], "dark")
        assert 'href="/blog/storage-packing/"' in html
        assert "Packing storage" in html
        assert "2022-06-12" in html

    def test_index_empty(self):
        """Test an empty index renders a placeholder."""
        assert "No posts yet." in BlogIndexPage().render([], "light")

    def test_post_page(self, post):
        """Test the post page renders the body and the comment widget."""
        html = PostPage().render(post, "light")
        assert "<title>Packing storage - Luca Cespedes</title>" in html
        assert "<h2>Slots</h2>" in html
        assert "<b>tight</b>" in html
        assert 'data-theme="dark"' in html
        assert 'style="color: #2D3748"' in html
