"""Shared fixtures for folio tests."""

import textwrap
from pathlib import Path

import pytest


def write_post(directory: Path, slug: str, title: str = "A post", published_at: str = "2022-06-12",
               summary: str = "Summary", body: str = "Body text.", extension: str = ".mdx") -> Path:
    """Write a post document with a front-matter header."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{slug}{extension}"
    path.write_text(
        f"---\ntitle: '{title}'\npublishedAt: '{published_at}'\nsummary: '{summary}'\n---\n\n{body}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def site_dir(tmp_path):
    """A site root with folio.toml and two valid posts."""
    (tmp_path / "folio.toml").write_text(textwrap.dedent("""\
        [site]
        title = "Test Blog"
        author = "Luca Cespedes"
        content_dir = "data/blog"
        output_dir = "public"
        default_theme = "dark"
    """), encoding="utf-8")
    content = tmp_path / "data" / "blog"
    write_post(content, "storage-packing", title="Packing storage", published_at="2022-06-12",
               body="# Slots\n\nPack your variables.")
    write_post(content, "calldata", title="Calldata", published_at="2022-06-26",
               body="Use calldata for read-only arrays.")
    return tmp_path


@pytest.fixture
def make_post():
    """Factory writing post documents."""
    return write_post
