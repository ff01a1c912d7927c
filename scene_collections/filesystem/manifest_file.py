"""Manifest record types and their JSON representation.

The manifest file is the only persisted description of which scene
collections exist::

    {
      "activeId": "abc",
      "collections": [
        {"id": "abc", "name": "My Scenes", "deleted": false,
         "modified": "2026-02-02T22:21:29.975359+00:00", "needsRename": false}
      ]
    }

Keys this module does not know about are kept on the entry and written
back unchanged, so a newer manifest survives a round-trip through an older
reader.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from typing import Any

# On-disk key -> attribute name
_ENTRY_FIELDS = {
    "id": "id",
    "name": "name",
    "deleted": "deleted",
    "modified": "modified",
    "needsRename": "needs_rename",
    "serverId": "server_id",
}

# Keys that may be missing from an entry and must stay missing on write
_OPTIONAL_KEYS = ("name", "needsRename", "serverId")


@dataclass
class ManifestEntry:
    """Metadata for a single scene collection."""

    id: str
    name: str | None = None
    modified: str | None = None
    deleted: bool = False
    needs_rename: bool | None = None
    server_id: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    # On-disk keys that were absent; omitted on write while their value is None
    absent_keys: frozenset[str] = field(
        default=frozenset({"needsRename", "serverId"}), repr=False, compare=False
    )

    @property
    def is_clean(self) -> bool:
        """True unless a naming conflict is waiting on the user."""
        return not self.needs_rename


@dataclass
class Manifest:
    """Root manifest record: ordered entries, newest first, plus the active id."""

    active_id: str | None = None
    collections: list[ManifestEntry] = field(default_factory=list)

    @classmethod
    def empty(cls) -> Manifest:
        return cls(active_id=None, collections=[])


def entry_from_payload(payload: dict[str, Any]) -> ManifestEntry:
    """Build an entry from its decoded JSON object.

    Values are taken as-is; checking and defaulting them is the job of the
    recovery service.
    """
    known = {attr: payload[key] for key, attr in _ENTRY_FIELDS.items() if key in payload}
    if known.get("deleted") is None:
        known.pop("deleted", None)
    extra = {k: copy.deepcopy(v) for k, v in payload.items() if k not in _ENTRY_FIELDS}
    absent_keys = frozenset(key for key in _OPTIONAL_KEYS if key not in payload)
    return ManifestEntry(**known, extra=extra, absent_keys=absent_keys)


def entry_to_payload(entry: ManifestEntry) -> dict[str, Any]:
    """Return the JSON object for an entry, omitting absent optional fields."""
    payload: dict[str, Any] = {}
    for key, attr in _ENTRY_FIELDS.items():
        value = getattr(entry, attr)
        if value is None and key in entry.absent_keys:
            continue
        payload[key] = value
    for key, value in entry.extra.items():
        payload[key] = copy.deepcopy(value)
    return payload


def manifest_to_payload(manifest: Manifest) -> dict[str, Any]:
    """Return the JSON object for the whole manifest."""
    return {
        "activeId": manifest.active_id,
        "collections": [entry_to_payload(entry) for entry in manifest.collections],
    }


def serialize_manifest(manifest: Manifest) -> str:
    """Serialize a manifest to pretty-printed JSON text."""
    return json.dumps(manifest_to_payload(manifest), indent=2, ensure_ascii=False) + "\n"


def decode_manifest_text(text: str) -> Any:
    """Decode manifest file text.

    Returns whatever JSON value the file holds; it may not be a manifest at
    all. Raises ``json.JSONDecodeError`` for malformed text.
    """
    return json.loads(text)
