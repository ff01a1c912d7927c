"""Logging setup and startup wiring for the scene collections manifest."""

from __future__ import annotations

import logging
import sys

from scene_collections.config import Settings
from scene_collections.filesystem.file_manager import FileManager
from scene_collections.services.manifest_store import ManifestStore
from scene_collections.services.state_service import SceneCollectionsStateService

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )


async def init_scene_collections(
    settings: Settings | None = None,
    *,
    setup_logging: bool = True,
) -> SceneCollectionsStateService:
    """Build the manifest store and state service, then load the manifest from disk.

    Call once at startup; the returned service owns the store for the rest of
    the process.
    """
    settings = settings if settings is not None else Settings()
    if setup_logging:
        configure_logging(settings.debug)

    state = SceneCollectionsStateService(
        settings=settings,
        store=ManifestStore(),
        file_manager=FileManager(),
    )
    status = await state.load_manifest_file()
    logger.info(
        "Loaded scene collections manifest from %s (%s, %d active collections)",
        state.manifest_path,
        status,
        len(state.store.list_active()),
    )
    return state
