"""Google-Drive adapter for AssetTreeLib.

Drive assets carry a Drive link and up to many preview images. Previews
were first stored as bare URL strings and later as ``{id, url, name}``
objects; both shapes are still found in stored projects.
"""

from typing import Any, Dict, List, Optional

from ..core.adapter import ParentPointerAdapter
from ..core.node import AssetNode


class GDriveAdapter(ParentPointerAdapter):
    """Adapter for a project's Google-Drive asset collection.

    Wire records look like::

        {"id": "...", "asset_name": "...", "asset_type": "file",
         "gdrive_link": "...", "parent_id": "...", "preview_url": "...",
         "preview_urls": [{"id": "...", "url": "...", "name": "..."}],
         "asset_id": "...", "created_at": "..."}
    """

    def get_link(self, node: AssetNode) -> Optional[str]:
        return node.payload.get("gdrive_link") or None

    def get_previews(self, node: AssetNode) -> List[Dict[str, Any]]:
        """Return every preview of a node as ``{id, url, name}`` dicts.

        Old string entries get positional ids (``preview-0``, ...). A node
        with only the single ``preview_url`` gets one ``single-preview``.
        """
        previews = node.payload.get("preview_urls") or []
        if previews:
            result = []
            for index, preview in enumerate(previews):
                if isinstance(preview, str):
                    result.append({"id": f"preview-{index}", "url": preview, "name": None})
                else:
                    result.append({
                        "id": preview.get("id"),
                        "url": preview.get("url"),
                        "name": preview.get("name"),
                    })
            return result

        single = node.payload.get("preview_url")
        if single:
            return [{"id": "single-preview", "url": single, "name": None}]
        return []

    def get_preview_url(self, node: AssetNode) -> Optional[str]:
        """Return the URL to show as a node's thumbnail.

        First preview, then the single preview, then the configured
        default folder preview for folders. Files with no preview get None.
        """
        previews = self.get_previews(node)
        if previews:
            return previews[0]["url"]
        if node.is_folder:
            return self.config.default_folder_preview
        return None
