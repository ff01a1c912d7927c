"""Manifest recovery: validate a decoded manifest and repair what can be repaired."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from scene_collections.filesystem.manifest_file import (
    Manifest,
    ManifestEntry,
    entry_from_payload,
)
from scene_collections.services.datetime_service import now_iso

logger = logging.getLogger(__name__)


@dataclass
class RecoveredManifest:
    """A manifest that passed recovery, with counts of what had to change."""

    manifest: Manifest
    dropped: int = 0
    repaired: int = 0

    @property
    def was_repaired(self) -> bool:
        return self.dropped > 0 or self.repaired > 0


def _recover_entry(raw: Any, modified_default: str) -> tuple[ManifestEntry | None, bool]:
    """Recover a single entry. Returns (entry or None if dropped, repaired flag)."""
    if not isinstance(raw, Mapping) or raw.get("id") is None:
        return None, False

    payload = dict(raw)
    repaired = False
    if payload.get("deleted") is None:
        payload["deleted"] = False
        repaired = True
    if payload.get("modified") is None:
        payload["modified"] = modified_default
        repaired = True
    return entry_from_payload(payload), repaired


def recover_manifest(obj: Any) -> RecoveredManifest | None:
    """Check a decoded manifest for integrity errors and repair it if possible.

    Returns None when the object is not a manifest at all (not a mapping, or
    ``collections`` is missing or not a list). Entries without an id are
    dropped; entries missing ``deleted`` or ``modified`` get defaults. Every
    other field, ``activeId`` included, passes through untouched. The input
    object is not modified.
    """
    if not isinstance(obj, Mapping):
        logger.warning("Manifest is not a JSON object (got %s)", type(obj).__name__)
        return None

    raw_collections = obj.get("collections")
    if not isinstance(raw_collections, list):
        logger.warning("Manifest has no collections list; it cannot be recovered")
        return None

    modified_default = now_iso()
    collections: list[ManifestEntry] = []
    dropped = 0
    repaired = 0
    for index, raw in enumerate(raw_collections):
        entry, was_repaired = _recover_entry(raw, modified_default)
        if entry is None:
            logger.warning("Dropping manifest entry %d: missing collection id", index)
            dropped += 1
            continue
        if was_repaired:
            logger.warning("Repaired manifest entry %s: filled in missing fields", entry.id)
            repaired += 1
        collections.append(entry)

    manifest = Manifest(active_id=obj.get("activeId"), collections=collections)
    return RecoveredManifest(manifest=manifest, dropped=dropped, repaired=repaired)
