"""Property-based tests for manifest recovery and store invariants."""

from __future__ import annotations

import string

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from scene_collections.filesystem.manifest_file import manifest_to_payload
from scene_collections.services.manifest_store import ManifestStore
from scene_collections.services.recovery_service import recover_manifest

PROPERTY_SETTINGS = settings(
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

_ID = st.text(alphabet=string.ascii_lowercase + string.digits, min_size=1, max_size=8)
_TIMESTAMP = st.sampled_from(
    ["2026-02-02T22:21:29.975359+00:00", "2026-03-01T08:00:00+00:00", "2025-12-31T23:59:59Z"]
)
_RAW_ENTRY = st.fixed_dictionaries(
    {"name": st.text(max_size=10)},
    optional={
        "id": st.one_of(st.none(), _ID),
        "deleted": st.one_of(st.none(), st.booleans()),
        "modified": st.one_of(st.none(), _TIMESTAMP),
        "serverId": st.integers(min_value=1, max_value=10_000),
        "needsRename": st.booleans(),
    },
)
_NOT_A_LIST = st.one_of(
    st.none(),
    st.integers(),
    st.text(max_size=5),
    st.dictionaries(st.text(max_size=3), st.integers(), max_size=3),
)


class TestRecoveryProperties:
    @PROPERTY_SETTINGS
    @given(collections=_NOT_A_LIST, active_id=st.one_of(st.none(), _ID))
    def test_non_list_collections_is_unrecoverable(
        self, collections: object, active_id: str | None
    ) -> None:
        assert recover_manifest({"activeId": active_id, "collections": collections}) is None

    @PROPERTY_SETTINGS
    @given(raw=st.lists(_RAW_ENTRY, max_size=12))
    def test_entries_with_id_are_kept_and_defaulted(self, raw: list[dict[str, object]]) -> None:
        result = recover_manifest({"activeId": None, "collections": raw})
        assert result is not None

        expected_ids = [e["id"] for e in raw if e.get("id") is not None]
        assert [e.id for e in result.manifest.collections] == expected_ids
        assert result.dropped == len(raw) - len(expected_ids)
        for entry in result.manifest.collections:
            assert isinstance(entry.deleted, bool)
            assert entry.modified is not None

    @PROPERTY_SETTINGS
    @given(raw=st.lists(_RAW_ENTRY, max_size=12))
    def test_recovery_is_idempotent(self, raw: list[dict[str, object]]) -> None:
        first = recover_manifest({"activeId": "x", "collections": raw})
        assert first is not None
        second = recover_manifest(manifest_to_payload(first.manifest))
        assert second is not None
        assert second.was_repaired is False
        assert second.manifest == first.manifest


_OPS = st.lists(
    st.tuples(
        st.sampled_from(["add", "soft_delete", "hard_delete", "rename", "set_active"]),
        st.sampled_from(["a", "b", "c", "d"]),
    ),
    max_size=30,
)


class TestStoreProperties:
    @PROPERTY_SETTINGS
    @given(ops=_OPS)
    def test_list_active_never_contains_deleted(self, ops: list[tuple[str, str]]) -> None:
        store = ManifestStore()
        for op, collection_id in ops:
            known = store.get(collection_id) is not None
            if op == "add" and not known:
                store.add(collection_id, collection_id.upper(), "2026-01-01T00:00:00+00:00")
            elif op == "soft_delete" and known:
                store.soft_delete(collection_id)
            elif op == "hard_delete":
                store.hard_delete(collection_id)
            elif op == "rename" and known:
                store.rename(collection_id, "renamed", "2026-01-02T00:00:00+00:00")
            elif op == "set_active":
                store.set_active(collection_id)

            active = store.list_active()
            assert all(not entry.deleted for entry in active)
            assert [e.id for e in active] == [e.id for e in store.entries if not e.deleted]
