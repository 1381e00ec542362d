"""Lightroom adapter for AssetTreeLib.

Lightroom folders are purely organisational: they carry no external link
of their own, only an optional colour tag. Records created before folders
existed have neither ``asset_type`` nor ``parent_id`` and load as root
level files.
"""

from typing import Dict, Optional

from ..core.adapter import ParentPointerAdapter
from ..core.node import AssetNode


class LightroomAdapter(ParentPointerAdapter):
    """Adapter for a project's Lightroom asset collection.

    Wire records look like::

        {"id": "...", "asset_name": "...", "asset_type": "folder",
         "parent_id": null, "lightroom_url": "...", "gdrive_url": "...",
         "asset_id": "...", "color": "#f97316", "created_at": "..."}
    """

    LINK_FIELDS = ("lightroom_url", "gdrive_url")

    def get_links(self, node: AssetNode) -> Dict[str, str]:
        """Return the external links set on a node, by field name."""
        return {key: node.payload[key] for key in self.LINK_FIELDS if node.payload.get(key)}

    def get_color(self, node: AssetNode) -> Optional[str]:
        """Return a folder's colour tag (None for files and untagged folders)."""
        if not node.is_folder:
            return None
        return node.payload.get("color") or None
