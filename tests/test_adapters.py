"""Tests for the Lightroom and Google-Drive collection adapters."""

import pytest

from assettreelib import AssetTreeConfig, AssetType
from assettreelib.adapters import GDriveAdapter, LightroomAdapter
from assettreelib.testing import make_asset, make_folder


LIGHTROOM_RECORDS = [
    {"id": "lr-1", "asset_name": "Pre-folder upload", "lightroom_url": "https://lr/1"},
    {
        "id": "lr-f", "asset_name": "Selects", "asset_type": "folder", "parent_id": None,
        "color": "#3b82f6", "created_at": "2024-03-02T09:00:00Z",
    },
    {
        "id": "lr-2", "asset_name": "hero.jpg", "asset_type": "file", "parent_id": "lr-f",
        "lightroom_url": "https://lr/2", "gdrive_url": "https://drive/2", "asset_id": "deliv-9",
    },
]


class TestLightroomAdapter:

    def test_legacy_records_load_as_root_files(self):
        adapter = LightroomAdapter.from_records(LIGHTROOM_RECORDS)
        legacy = adapter.get("lr-1")

        assert legacy.type is AssetType.FILE
        assert legacy.is_root
        assert [n.id for n in adapter.roots()] == ["lr-1", "lr-f"]

    def test_links(self):
        adapter = LightroomAdapter.from_records(LIGHTROOM_RECORDS)

        assert adapter.get_links(adapter.get("lr-2")) == {
            "lightroom_url": "https://lr/2",
            "gdrive_url": "https://drive/2",
        }
        assert adapter.get_links(adapter.get("lr-f")) == {}

    def test_color_only_on_folders(self):
        adapter = LightroomAdapter.from_records(LIGHTROOM_RECORDS)

        assert adapter.get_color(adapter.get("lr-f")) == "#3b82f6"
        assert adapter.get_color(make_asset("x", color="#fff")) is None
        assert adapter.get_color(make_folder("plain")) is None

    def test_records_round_trip_after_normalize(self):
        adapter = LightroomAdapter.from_records(LIGHTROOM_RECORDS)
        again = LightroomAdapter.from_records(adapter.to_records())

        assert again.nodes == adapter.nodes


class TestGDriveAdapter:

    def test_link(self):
        adapter = GDriveAdapter([make_asset("a", gdrive_link="https://drive/a"), make_asset("b")])

        assert adapter.get_link(adapter.get("a")) == "https://drive/a"
        assert adapter.get_link(adapter.get("b")) is None

    def test_object_previews(self):
        node = make_asset("a", preview_urls=[
            {"id": "p1", "url": "https://img/1", "name": "front"},
            {"id": "p2", "url": "https://img/2", "name": "back"},
        ])
        adapter = GDriveAdapter([node])

        assert [p["id"] for p in adapter.get_previews(node)] == ["p1", "p2"]
        assert adapter.get_preview_url(node) == "https://img/1"

    def test_string_previews_get_positional_ids(self):
        node = make_asset("a", preview_urls=["https://img/1", "https://img/2"])

        assert GDriveAdapter([node]).get_previews(node) == [
            {"id": "preview-0", "url": "https://img/1", "name": None},
            {"id": "preview-1", "url": "https://img/2", "name": None},
        ]

    def test_single_preview_fallback(self):
        node = make_asset("a", preview_url="https://img/only", preview_urls=[])

        assert GDriveAdapter([node]).get_previews(node) == [
            {"id": "single-preview", "url": "https://img/only", "name": None},
        ]

    @pytest.mark.parametrize("node,expected", [
        (make_folder("f"), "https://img/folder.png"),
        (make_asset("a"), None),
    ])
    def test_default_folder_preview(self, node, expected):
        config = AssetTreeConfig(default_folder_preview="https://img/folder.png")
        adapter = GDriveAdapter([node], config)

        assert adapter.get_preview_url(node) == expected

    def test_no_default_configured(self):
        folder = make_folder("f")
        assert GDriveAdapter([folder]).get_preview_url(folder) is None
