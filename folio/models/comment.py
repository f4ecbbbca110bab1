"""giscus comment widget configuration model."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Literal


class GiscusConfig(BaseModel):
    """Fixed configuration record for the giscus discussion widget.

    Only the repository and category identifiers can be overridden.
    The mapping strategy and theme are pinned to a single value each.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    repo: str = "melvnl/melvinliu.com"
    repo_id: str = "R_kgDOHk-dUg"
    category: str = "General"
    category_id: str = "DIC_kwDOHk-dUs4CP-Ao"
    mapping: Literal["pathname"] = "pathname"
    reactions_enabled: Literal["0", "1"] = "0"
    emit_metadata: Literal["0", "1"] = "0"
    theme: Literal["dark"] = "dark"

    @field_validator("reactions_enabled", "emit_metadata", mode="before")
    @classmethod
    def serialize_flag(cls, v: Any) -> Any:
        """Serialize boolean-like flags as "0"/"1"."""
        if isinstance(v, bool):
            return "1" if v else "0"
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("repo")
    @classmethod
    def validate_repo(cls, v: str) -> str:
        """Validate repo is in owner/name form."""
        owner, _, name = v.partition("/")
        if not owner or not name or "/" in name:
            raise ValueError("repo must be in 'owner/name' format")
        return v

    def to_data_attributes(self) -> Dict[str, str]:
        """Attributes for the giscus client script tag."""
        return {
            "data-repo": self.repo,
            "data-repo-id": self.repo_id,
            "data-category": self.category,
            "data-category-id": self.category_id,
            "data-mapping": self.mapping,
            "data-reactions-enabled": self.reactions_enabled,
            "data-emit-metadata": self.emit_metadata,
            "data-theme": self.theme,
        }
