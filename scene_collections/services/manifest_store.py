"""In-memory manifest store: the ordered entry list plus the active collection id."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from scene_collections.exceptions import CollectionNotFoundError
from scene_collections.filesystem.manifest_file import Manifest, ManifestEntry

if TYPE_CHECKING:
    from collections.abc import Sequence


class ManifestStore:
    """Holds the manifest for the lifetime of the process.

    Each mutator changes at most one entry and either applies fully or raises
    before touching anything. Nothing here is persisted; the state service
    flushes the store when a change needs to survive a restart.

    ``active_id`` is not checked against the entries: a stale id is a valid
    transient state, and ``active()`` simply returns None for it.
    """

    def __init__(self, manifest: Manifest | None = None) -> None:
        manifest = manifest if manifest is not None else Manifest.empty()
        self._active_id = manifest.active_id
        self._collections = list(manifest.collections)

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def entries(self) -> Sequence[ManifestEntry]:
        """All entries, soft-deleted ones included, newest first."""
        return tuple(self._collections)

    def list_active(self) -> list[ManifestEntry]:
        """Entries that are not soft-deleted, in manifest order."""
        return [entry for entry in self._collections if not entry.deleted]

    def active(self) -> ManifestEntry | None:
        """The active collection, if it exists and is not deleted."""
        for entry in self.list_active():
            if entry.id == self._active_id:
                return entry
        return None

    def get(self, collection_id: str) -> ManifestEntry | None:
        """Find an entry by id, deleted or not."""
        for entry in self._collections:
            if entry.id == collection_id:
                return entry
        return None

    def _require(self, collection_id: str) -> ManifestEntry:
        entry = self.get(collection_id)
        if entry is None:
            raise CollectionNotFoundError(collection_id)
        return entry

    def snapshot(self) -> Manifest:
        """Return a deep copy of the current manifest."""
        return Manifest(
            active_id=self._active_id,
            collections=copy.deepcopy(self._collections),
        )

    # Mutations

    def set_active(self, collection_id: str | None) -> None:
        self._active_id = collection_id

    def add(self, collection_id: str, name: str, modified: str) -> ManifestEntry:
        """Prepend a new entry. The caller guarantees the id is unused."""
        entry = ManifestEntry(
            id=collection_id,
            name=name,
            deleted=False,
            modified=modified,
            needs_rename=False,
        )
        self._collections.insert(0, entry)
        return entry

    def mark_needs_rename(self, collection_id: str) -> None:
        self._require(collection_id).needs_rename = True

    def set_modified(self, collection_id: str, modified: str) -> None:
        self._require(collection_id).modified = modified

    def set_server_id(self, collection_id: str, server_id: int) -> None:
        self._require(collection_id).server_id = server_id

    def rename(self, collection_id: str, name: str, modified: str) -> None:
        """Rename an entry and clear its pending-rename flag."""
        entry = self._require(collection_id)
        entry.name = name
        entry.modified = modified
        entry.needs_rename = False

    def soft_delete(self, collection_id: str) -> None:
        """Mark an entry deleted. Its data stays in the manifest."""
        self._require(collection_id).deleted = True

    def hard_delete(self, collection_id: str) -> bool:
        """Remove an entry permanently. Returns True if an entry was removed."""
        remaining = [entry for entry in self._collections if entry.id != collection_id]
        removed = len(remaining) != len(self._collections)
        self._collections = remaining
        return removed

    def replace_all(self, manifest: Manifest) -> None:
        """Replace the whole manifest, field by field."""
        self._active_id = manifest.active_id
        self._collections = list(manifest.collections)

    def reset(self) -> None:
        """Return to the empty manifest used on first run."""
        self.replace_all(Manifest.empty())
