#!/usr/bin/env python3
"""Demo script for the asset folder tree in AssetTreeLib.

Loads a small Google-Drive collection (including a record saved before
folders existed), then walks through what an asset browser does with it:
render the tree, show breadcrumbs, search, count, and validate moves.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from assettreelib import (
    FolderViewPlan,
    ViewConfig,
    build_tree,
    flatten_tree,
    get_asset_path,
    get_available_parent_folders,
    get_total_item_count,
    move_asset,
    normalize,
    search_assets,
    validate_folder_name,
)


RECORDS = [
    {"id": "w", "asset_name": "Wedding Shoots", "asset_type": "folder", "parent_id": None},
    {"id": "s", "asset_name": "Smith Wedding", "asset_type": "folder", "parent_id": "w"},
    {"id": "e", "asset_name": "Final Edits", "asset_type": "folder", "parent_id": "s"},
    {"id": "p1", "asset_name": "first_dance.jpg", "asset_type": "file", "parent_id": "e"},
    {"id": "p2", "asset_name": "beach_portraits.jpg", "asset_type": "file", "parent_id": "s"},
    {"id": "old", "asset_name": "contract_scan.pdf"},
]


def demo_tree(nodes):
    """Show the nested tree as an indented listing."""
    print("\n=== Folder Tree ===")
    for entry in flatten_tree(build_tree(nodes)):
        indent = "  " * entry.depth
        kind = "[D]" if entry.asset.is_folder else "[F]"
        print(f"{indent}{kind} {entry.asset.name}")


def demo_browse(nodes):
    """Show a folder listing with breadcrumbs."""
    print("\n=== Browsing 'Smith Wedding' ===")
    plan = FolderViewPlan(ViewConfig(current_folder_id="s"), nodes)
    print("Path: " + " > ".join(crumb.name for crumb in plan.breadcrumbs()))
    for node in plan.execute():
        print(f"  - {node.name}")
    print(f"Up goes to: {plan.navigate_up()}")


def demo_search(nodes):
    """Show that search surfaces the folders around a match."""
    print("\n=== Search 'beach' ===")
    results = search_assets(nodes, "beach")
    for node in results.combined:
        print(f"  {' > '.join(get_asset_path(nodes, node.id))}")

    count = get_total_item_count(nodes, "w")
    print(f"\n'Wedding Shoots' holds {count.total} items "
          f"({count.folders} folders, {count.files} files)")


def demo_validation(nodes):
    """Show the checks that run before a move or rename is saved."""
    print("\n=== Validation ===")
    result = move_asset(nodes, "w", "e")
    print(f"Move 'Wedding Shoots' into 'Final Edits': {result.error}")

    result = move_asset(nodes, "old", "s")
    print(f"Move 'contract_scan.pdf' into 'Smith Wedding': success={result.success}")

    for name in ["Proofs", "Client: Final", "   "]:
        check = validate_folder_name(name)
        print(f"  Folder name {name!r}: {'ok' if check.valid else check.error}")

    print("\nMove-to dropdown for 'Final Edits':")
    for option in get_available_parent_folders(nodes, exclude_id="e"):
        print(f"  {option.path}")


def main():
    logging.basicConfig(level=logging.INFO)
    nodes = normalize(RECORDS)

    demo_tree(nodes)
    demo_browse(nodes)
    demo_search(nodes)
    demo_validation(nodes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
