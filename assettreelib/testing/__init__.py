"""Testing utilities for AssetTreeLib consumers."""

from .fixtures import index_by_id, make_asset, make_chain, make_folder, make_forest

__all__ = ['index_by_id', 'make_asset', 'make_chain', 'make_folder', 'make_forest']
