"""Static site builder.

Renders the blog index, the info page, and every post to HTML files
under the output directory.
"""

import shutil
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from .components import BlogIndexPage, InfoPage, PostPage
from .config import SiteConfig
from .content import ContentLoader
from .exceptions import ConfigError
from .models.theme import ThemeMode
from .utils.exceptions import BulkValidationError


class BuildResult(BaseModel):
    """Files written (or planned, in dry-run mode) by a build."""

    output_dir: Path
    theme_mode: ThemeMode
    files: List[Path] = []
    post_count: int = 0
    dry_run: bool = False


class SiteBuilder:
    """Renders every page of the site for one ambient theme mode."""

    def __init__(
        self,
        config: SiteConfig,
        theme_mode: Union[str, ThemeMode, None] = None,
        site_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        self.config = config
        self.site_dir = Path(site_dir) if site_dir else None
        self.theme_mode = ThemeMode.parse(theme_mode) if theme_mode else config.default_theme
        self.loader = ContentLoader(config.content_dir)

    def render_pages(self) -> Dict[Path, str]:
        """Render every page keyed by its path relative to the output directory.

        Raises:
            BulkValidationError: If any post document is invalid
        """
        posts, errors = self.loader.load_all(strict=False)
        if errors:
            raise BulkValidationError(
                "Content validation failed",
                valid_documents=len(posts),
                failures=[(e.file_path or "", e.message) for e in errors],
            )

        pages: Dict[Path, str] = {
            Path("index.html"): BlogIndexPage(self.config).render(posts, self.theme_mode),
            Path("info") / "index.html": InfoPage(self.config).render(self.theme_mode),
        }

        post_page = PostPage(self.config)
        for post in posts:
            pages[Path("blog") / post.slug / "index.html"] = post_page.render(post, self.theme_mode)

        return pages

    def build(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        dry_run: bool = False,
        clean: bool = False,
    ) -> BuildResult:
        """Render the site to disk.

        Args:
            output_dir: Destination directory, defaults to the configured one
            dry_run: Render but do not write anything
            clean: Remove the output directory before writing

        Returns:
            BuildResult listing the written files

        Raises:
            ConfigError: If clean would remove the site root or the content directory
        """
        out = Path(output_dir) if output_dir else self.config.output_dir
        if clean:
            self._check_clean_target(out)
        pages = self.render_pages()
        files = [out / rel for rel in pages]

        if not dry_run:
            if clean and out.exists():
                shutil.rmtree(out)
            for rel, html in pages.items():
                target = out / rel
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(html, encoding="utf-8")

        return BuildResult(
            output_dir=out,
            theme_mode=self.theme_mode,
            files=files,
            post_count=len(pages) - 2,
            dry_run=dry_run,
        )

    def _check_clean_target(self, out: Path) -> None:
        target = out.resolve()
        if self.config.content_dir.resolve().is_relative_to(target):
            raise ConfigError(
                f"Refusing to clean {out}: it holds the content directory {self.config.content_dir}"
            )
        if self.site_dir is not None and self.site_dir.resolve().is_relative_to(target):
            raise ConfigError(f"Refusing to clean {out}: it holds the site root {self.site_dir}")
