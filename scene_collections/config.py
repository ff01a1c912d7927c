"""Scene collections configuration loaded from environment variables."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_MANIFEST_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def _default_user_data_dir() -> Path:
    return Path.home() / ".local" / "share" / "scene-collections"


class Settings(BaseSettings):
    """Scene collections settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Paths
    user_data_dir: Path = Field(default_factory=_default_user_data_dir)
    scene_collections_dir: Path | None = None

    # Manifest file stem; stored as <collections_directory>/<manifest_name>.json
    manifest_name: str = "manifest"

    @field_validator("manifest_name")
    @classmethod
    def validate_manifest_name(cls, v: str) -> str:
        if not _MANIFEST_NAME_RE.match(v):
            raise ValueError(f"Invalid manifest name: {v!r}")
        return v

    @property
    def collections_directory(self) -> Path:
        """Directory holding the manifest and the per-collection files."""
        if self.scene_collections_dir is not None:
            return self.scene_collections_dir
        return self.user_data_dir / "SceneCollections"
