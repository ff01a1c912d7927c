"""Shared test fixtures for scene collections."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from scene_collections.config import Settings
from scene_collections.filesystem.file_manager import FileManager
from scene_collections.services.manifest_store import ManifestStore
from scene_collections.services.state_service import SceneCollectionsStateService

if TYPE_CHECKING:
    from pathlib import Path

T1 = "2026-02-02T22:21:29.975359+00:00"
T2 = "2026-03-01T08:00:00+00:00"


@pytest.fixture
def collections_dir(tmp_path: Path) -> Path:
    """Scene collections directory (not created yet)."""
    return tmp_path / "userData" / "SceneCollections"


@pytest.fixture
def test_settings(tmp_path: Path, collections_dir: Path) -> Settings:
    """Create test settings with temporary paths."""
    return Settings(
        _env_file=None,
        debug=True,
        user_data_dir=tmp_path / "userData",
        scene_collections_dir=collections_dir,
    )


@pytest.fixture
def store() -> ManifestStore:
    return ManifestStore()


@pytest.fixture
def state_service(
    test_settings: Settings, store: ManifestStore
) -> SceneCollectionsStateService:
    return SceneCollectionsStateService(
        settings=test_settings,
        store=store,
        file_manager=FileManager(),
    )
