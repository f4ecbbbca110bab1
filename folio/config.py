"""Configuration management for folio.

This module loads the site configuration from ``folio.toml`` in the site
root, applies environment overrides, and writes a starter configuration.
"""

import os
import tomllib
from pathlib import Path
from typing import Dict, Optional, Any, Union

from pydantic import BaseModel, Field, field_validator, ValidationError as PydanticValidationError

from .exceptions import ConfigError
from .models.comment import GiscusConfig
from .models.theme import ColorTokens, ThemeMode


CONFIG_FILENAME = "folio.toml"

DEFAULT_CONFIG = """# folio site configuration
[site]
title = "Luca Cespedes"
author = "Luca Cespedes"
description = "Posts about Solidity, gas optimization and smart contract development."
content_dir = "data/blog"
output_dir = "public"
default_theme = "dark"

[comments]
repo = "melvnl/melvinliu.com"
repo_id = "R_kgDOHk-dUg"
category = "General"
category_id = "DIC_kwDOHk-dUs4CP-Ao"

[colors]
light = "gray.700"
dark = "gray.400"
"""


class SiteConfig(BaseModel):
    """Configuration for a folio site."""

    title: str = Field(default="Luca Cespedes", description="Site title")
    author: str = Field(default="Luca Cespedes", description="Author shown in page titles")
    description: str = Field(default="", description="Site description")
    url: Optional[str] = Field(default=None, description="Public base URL")
    content_dir: Path = Field(default=Path("data/blog"), description="Directory of post documents")
    output_dir: Path = Field(default=Path("public"), description="Build output directory")
    default_theme: ThemeMode = Field(default=ThemeMode.DARK, description="Ambient theme mode")
    comments: GiscusConfig = Field(default_factory=GiscusConfig)
    colors: ColorTokens = Field(default_factory=ColorTokens)

    @field_validator("default_theme", mode="before")
    @classmethod
    def validate_default_theme(cls, v: Any) -> Any:
        """Accept theme names in any letter case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate and normalize the base URL."""
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return v.rstrip("/")

    def page_title(self, page: Optional[str] = None) -> str:
        """Build a page title such as ``Info - Luca Cespedes``."""
        return f"{page} - {self.author}" if page else self.title


class ConfigManager:
    """Loads and writes the site configuration."""

    def __init__(self, site_dir: Optional[Union[str, Path]] = None) -> None:
        """Initialize configuration manager.

        Args:
            site_dir: Site root. Falls back to FOLIO_SITE_DIR, then the working directory.
        """
        env_site_dir = os.getenv("FOLIO_SITE_DIR")
        self.site_dir = Path(site_dir or env_site_dir or Path.cwd())
        self.config_file = self.site_dir / CONFIG_FILENAME

    def load(self) -> SiteConfig:
        """Load the site configuration.

        A missing config file yields the defaults. Relative content and
        output directories are resolved against the site root.

        Raises:
            ConfigError: If the file cannot be parsed or holds invalid values
        """
        raw: Dict[str, Any] = {}
        if self.config_file.exists():
            try:
                with open(self.config_file, "rb") as f:
                    raw = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Failed to load configuration: {e}")

        for section in ("site", "comments", "colors"):
            if section in raw and not isinstance(raw[section], dict):
                raise ConfigError(
                    f"Invalid configuration in {self.config_file}: [{section}] must be a table"
                )

        data: Dict[str, Any] = dict(raw.get("site", {}))
        if "comments" in raw:
            data["comments"] = raw["comments"]
        if "colors" in raw:
            data["colors"] = raw["colors"]

        try:
            config = SiteConfig(**data)
        except PydanticValidationError as e:
            messages = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigError(f"Invalid configuration in {self.config_file}: {messages}")

        return config.model_copy(update={
            "content_dir": self._resolve(config.content_dir),
            "output_dir": self._resolve(config.output_dir),
        })

    def init_config(self, force: bool = False) -> Path:
        """Write a starter configuration file.

        Args:
            force: Overwrite an existing file

        Returns:
            Path of the written file

        Raises:
            ConfigError: If the file exists and force is False, or writing fails
        """
        if self.config_file.exists() and not force:
            raise ConfigError(f"Configuration already exists: {self.config_file}")

        try:
            self.site_dir.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(DEFAULT_CONFIG, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}")

        return self.config_file

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.site_dir / path


def get_ambient_theme(config: SiteConfig, override: Optional[str] = None) -> ThemeMode:
    """Determine the ambient theme mode.

    Precedence: explicit override, FOLIO_THEME, then the site default.
    """
    value = override or os.getenv("FOLIO_THEME")
    if value:
        return ThemeMode.parse(value)
    return config.default_theme
