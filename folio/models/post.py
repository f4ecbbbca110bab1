"""Blog post and front-matter models."""

import math
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional

import markdown
from pydantic import BaseModel, ConfigDict, Field, field_validator


WORDS_PER_MINUTE = 200
ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class FrontMatter(BaseModel):
    """Metadata header of a blog post document."""

    model_config = ConfigDict(extra="allow")

    title: str
    published_at: str = Field(..., alias="publishedAt")
    summary: str = ""
    image: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title is not blank."""
        if not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()

    @field_validator("published_at", mode="before")
    @classmethod
    def validate_published_at(cls, v: Any) -> str:
        """Normalize publishedAt to an ISO date string.

        YAML loads unquoted dates as ``date`` objects, so both forms are accepted.
        """
        if isinstance(v, datetime):
            return v.date().isoformat()
        if isinstance(v, date):
            return v.isoformat()
        if not isinstance(v, str):
            raise ValueError("publishedAt must be a date string (YYYY-MM-DD)")
        v = v.strip()
        if not ISO_DATE.fullmatch(v):
            raise ValueError(f"publishedAt must use the YYYY-MM-DD format: {v!r}")
        try:
            return date.fromisoformat(v).isoformat()
        except ValueError:
            raise ValueError(f"publishedAt is not a valid date: {v!r}")

    @field_validator("summary", mode="before")
    @classmethod
    def validate_summary(cls, v: Any) -> str:
        """Treat a null summary as empty."""
        return "" if v is None else str(v)

    @property
    def published_date(self) -> date:
        return date.fromisoformat(self.published_at)


class Post(BaseModel):
    """A blog post loaded from a markdown/MDX document."""

    slug: str
    path: Path
    front_matter: FrontMatter
    body: str

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate slug is URL-safe."""
        if not re.fullmatch(r"[A-Za-z0-9][A-Za-z0-9_-]*", v):
            raise ValueError("Slug must be URL-safe (alphanumeric, hyphens, underscores)")
        return v.lower()

    @property
    def title(self) -> str:
        return self.front_matter.title

    @property
    def published_at(self) -> str:
        return self.front_matter.published_at

    @property
    def summary(self) -> str:
        return self.front_matter.summary

    @property
    def word_count(self) -> int:
        return len(self.body.split())

    @property
    def reading_time(self) -> int:
        """Estimated reading time in whole minutes, at least one."""
        return max(1, math.ceil(self.word_count / WORDS_PER_MINUTE))

    @property
    def url_path(self) -> str:
        return f"/blog/{self.slug}"

    def render_body(self) -> str:
        """Render the markdown body to HTML."""
        return markdown.markdown(self.body, extensions=["fenced_code", "tables"])

    def summary_dict(self) -> Dict[str, Any]:
        """Flat representation used by listings and JSON/YAML output."""
        return {
            "slug": self.slug,
            "title": self.title,
            "published_at": self.published_at,
            "summary": self.summary,
            "reading_time": self.reading_time,
            "path": str(self.path),
        }
