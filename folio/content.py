"""Blog content loading.

This module parses front-matter headers out of markdown/MDX documents and
loads the blog post collection from the content directory.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ContentNotFoundError, FrontMatterError
from .models.post import FrontMatter, Post


DELIMITER = "---"
POST_EXTENSIONS = (".mdx", ".md")


def parse_front_matter(text: str, file_path: Optional[Union[str, Path]] = None) -> Tuple[Dict[str, Any], str]:
    """Split a document into its front-matter mapping and body.

    Args:
        text: Full document text
        file_path: Source path, used in error messages

    Returns:
        Tuple of (front-matter dict, body text)

    Raises:
        FrontMatterError: If the header is missing, unterminated, or not a YAML mapping
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != DELIMITER:
        raise FrontMatterError("Document does not start with a front-matter header", file_path=file_path)

    for idx in range(1, len(lines)):
        if lines[idx].strip() == DELIMITER:
            header = "".join(lines[1:idx])
            body = "".join(lines[idx + 1:])
            break
    else:
        raise FrontMatterError("Front-matter header is not terminated", file_path=file_path)

    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML in front-matter: {e}", file_path=file_path)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("Front-matter must be a mapping", file_path=file_path)

    return data, body.lstrip("\n")


def load_post(path: Union[str, Path]) -> Post:
    """Load and validate a single post document.

    Raises:
        FrontMatterError: If the document cannot be read or fails validation
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FrontMatterError(f"Failed to read document: {e}", file_path=path)

    data, body = parse_front_matter(text, file_path=path)

    try:
        front_matter = FrontMatter(**data)
        return Post(slug=path.stem, path=path, front_matter=front_matter, body=body)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise FrontMatterError(
            f"Invalid front-matter: {first.get('msg', str(e))}",
            file_path=path,
            field=field,
            details={"errors": [err.get("msg") for err in e.errors()]},
        )


class ContentLoader:
    """Loads the blog post collection from a content directory."""

    def __init__(self, content_dir: Union[str, Path]) -> None:
        self.content_dir = Path(content_dir)

    def discover(self) -> List[Path]:
        """List post documents sorted by file name."""
        if not self.content_dir.is_dir():
            return []
        return sorted(
            p for p in self.content_dir.iterdir()
            if p.is_file() and p.suffix.lower() in POST_EXTENSIONS
        )

    def load_all(self, strict: bool = True) -> Tuple[List[Post], List[FrontMatterError]]:
        """Load every post, newest first.

        Args:
            strict: Raise on the first invalid document instead of collecting it

        Returns:
            Tuple of (posts, errors). errors is always empty in strict mode.
        """
        posts: List[Post] = []
        errors: List[FrontMatterError] = []

        for path in self.discover():
            try:
                posts.append(load_post(path))
            except FrontMatterError as e:
                if strict:
                    raise
                errors.append(e)

        posts = self._drop_duplicate_slugs(posts, errors, strict)

        posts.sort(key=lambda p: p.slug)
        posts.sort(key=lambda p: p.published_at, reverse=True)
        return posts, errors

    def get(self, slug: str) -> Post:
        """Load a post by slug.

        Raises:
            ContentNotFoundError: If no document has that slug
            FrontMatterError: If more than one document has that slug
        """
        matches = [path for path in self.discover() if path.stem.lower() == slug.lower()]
        if not matches:
            raise ContentNotFoundError(f"Post '{slug}' not found in {self.content_dir}", slug=slug)
        if len(matches) > 1:
            raise _duplicate_slug_error(slug.lower(), matches[0], matches)
        return load_post(matches[0])

    def validate(self) -> List[Tuple[Path, str]]:
        """Validate every document and return (path, message) for each failure."""
        _, errors = self.load_all(strict=False)
        return [(Path(e.file_path), e.message) for e in errors]

    @staticmethod
    def _drop_duplicate_slugs(posts: List[Post], errors: List[FrontMatterError], strict: bool) -> List[Post]:
        """Remove posts whose slug is shared by another document, recording an error for each."""
        by_slug: Dict[str, List[Post]] = {}
        for post in posts:
            by_slug.setdefault(post.slug, []).append(post)

        duplicates = {slug: group for slug, group in by_slug.items() if len(group) > 1}
        for slug, group in duplicates.items():
            paths = [post.path for post in group]
            for post in group:
                error = _duplicate_slug_error(slug, post.path, paths)
                if strict:
                    raise error
                errors.append(error)

        return [post for post in posts if post.slug not in duplicates]


def _duplicate_slug_error(slug: str, path: Path, paths: List[Path]) -> FrontMatterError:
    names = ", ".join(sorted(p.name for p in paths))
    return FrontMatterError(f"Duplicate slug '{slug}' shared by {names}", file_path=path, field="slug")
