"""Scene collections state service: keeps the manifest file and the store in sync."""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from pathlib import PurePath
from typing import TYPE_CHECKING

from scene_collections.exceptions import InvalidCollectionIdError
from scene_collections.filesystem.manifest_file import decode_manifest_text, serialize_manifest
from scene_collections.services.recovery_service import recover_manifest

if TYPE_CHECKING:
    from pathlib import Path

    from scene_collections.config import Settings
    from scene_collections.filesystem.file_manager import FileManager
    from scene_collections.schemas.server import SceneCollectionsResponse
    from scene_collections.services.manifest_store import ManifestStore

logger = logging.getLogger(__name__)


class ManifestLoadStatus(StrEnum):
    """Outcome of loading the manifest file."""

    LOADED = "loaded"
    RECOVERED = "recovered"
    MISSING = "missing"
    READ_FAILED = "read_failed"
    DECODE_FAILED = "decode_failed"
    UNRECOVERABLE = "unrecoverable"


class SceneCollectionsStateService:
    """Loads, repairs and flushes the manifest; file helpers for collection files.

    The manifest is written in full on every flush. Loading always ends with
    a flush, so whatever the store holds afterwards (repaired data or the
    empty default) is what is on disk.
    """

    def __init__(self, settings: Settings, store: ManifestStore, file_manager: FileManager) -> None:
        self.settings = settings
        self.store = store
        self.file_manager = file_manager

    @property
    def collections_directory(self) -> Path:
        return self.settings.collections_directory

    @property
    def manifest_path(self) -> Path:
        return self.collections_directory / f"{self.settings.manifest_name}.json"

    def collection_file_path(self, collection_id: str) -> Path:
        """Path of ``<collections_directory>/<collection_id>.json``.

        Raises InvalidCollectionIdError if the id would escape the directory.
        """
        if (
            not collection_id
            or "\\" in collection_id
            or PurePath(collection_id).name != collection_id
        ):
            raise InvalidCollectionIdError(f"Invalid scene collection id: {collection_id!r}")
        return self.collections_directory / f"{collection_id}.json"

    async def ensure_directory(self) -> None:
        await self.file_manager.ensure_directory(self.collections_directory)

    async def setup_new_user(self, server_collections: SceneCollectionsResponse) -> None:
        """Handle a new user login.

        If the account already has collections on the server, local manifest
        state is discarded so that sync treats this machine as starting fresh.
        Otherwise nothing changes: the local collections will be synced up.
        """
        if not server_collections.data:
            return
        logger.info(
            "Account has %d server scene collections; resetting local manifest",
            len(server_collections.data),
        )
        self.store.reset()
        await self.ensure_directory()
        await self.flush_manifest_file()

    async def load_manifest_file(self) -> ManifestLoadStatus:
        """Load the manifest file into the store, repairing it if needed.

        A missing, unreadable, malformed or unrecoverable file leaves the store
        as it was and is reported through the returned status. Failures to
        create the directory or to write the manifest propagate.
        """
        await self.ensure_directory()
        status = await self._load_into_store()
        await self.flush_manifest_file()
        return status

    async def _load_into_store(self) -> ManifestLoadStatus:
        try:
            data = await self.file_manager.read(self.manifest_path)
        except UnicodeDecodeError:
            logger.exception("Error loading manifest file from %s", self.manifest_path)
            return ManifestLoadStatus.DECODE_FAILED
        except OSError:
            logger.exception("Error reading manifest file from %s", self.manifest_path)
            return ManifestLoadStatus.READ_FAILED

        if data is None:
            logger.info("No manifest at %s; starting with an empty manifest", self.manifest_path)
            return ManifestLoadStatus.MISSING

        try:
            parsed = decode_manifest_text(data)
        except json.JSONDecodeError:
            logger.exception("Error loading manifest file from %s", self.manifest_path)
            return ManifestLoadStatus.DECODE_FAILED

        recovered = recover_manifest(parsed)
        if recovered is None:
            logger.warning("Manifest at %s is unrecoverable; ignoring it", self.manifest_path)
            return ManifestLoadStatus.UNRECOVERABLE

        self.store.replace_all(recovered.manifest)
        if recovered.was_repaired:
            logger.warning(
                "Recovered manifest: %d entries dropped, %d entries repaired",
                recovered.dropped,
                recovered.repaired,
            )
            return ManifestLoadStatus.RECOVERED
        return ManifestLoadStatus.LOADED

    async def flush_manifest_file(self) -> None:
        """Write the full store state to the manifest file."""
        data = serialize_manifest(self.store.snapshot())
        await self.file_manager.write(self.manifest_path, data)
        logger.debug("Flushed manifest to %s", self.manifest_path)

    async def collection_file_exists(self, collection_id: str) -> bool:
        return await self.file_manager.exists(self.collection_file_path(collection_id))

    async def read_collection_file(self, collection_id: str) -> str | None:
        """Read a collection file's text, or None if it does not exist."""
        return await self.file_manager.read(self.collection_file_path(collection_id))

    async def write_collection_file(self, collection_id: str, data: str) -> None:
        await self.file_manager.write(self.collection_file_path(collection_id), data)

    async def copy_collection_file(self, source_id: str, dest_id: str) -> None:
        """Copy one collection's file to another id, e.g. to duplicate a collection."""
        await self.file_manager.copy(
            self.collection_file_path(source_id),
            self.collection_file_path(dest_id),
        )
