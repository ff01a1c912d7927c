"""Scene collections exception types.

Convention:
- ``CollectionNotFoundError``: a manifest mutation targeted an id that is not
  in the manifest. Callers only mutate entries they just created or fetched,
  so this signals a programming error and is never caught internally.
- ``InvalidCollectionIdError``: an id that cannot be mapped to a file inside
  the storage directory (empty, or containing a path separator).
- ``OSError``: file-system failures are not wrapped; apart from reading the
  manifest itself, they propagate from ``FileManager`` to the caller
  untouched and are never retried.

Unreadable, malformed or unrecoverable manifest files are *not* exceptions:
the state service contains them and reports a ``ManifestLoadStatus`` instead.
"""

from __future__ import annotations


class SceneCollectionsError(Exception):
    """Base class for scene collections errors."""


class CollectionNotFoundError(SceneCollectionsError, LookupError):
    """Raised when a manifest mutation targets an unknown collection id."""

    def __init__(self, collection_id: str) -> None:
        super().__init__(f"Scene collection not found in manifest: {collection_id!r}")
        self.collection_id = collection_id


class InvalidCollectionIdError(SceneCollectionsError, ValueError):
    """Raised when a collection id would resolve outside the storage directory."""
