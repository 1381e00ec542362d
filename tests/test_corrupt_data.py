"""Tests for collections that already contain a parent cycle.

Validation keeps cycles out, but stored data can still be corrupted from
outside. Read-time walks are bounded and raise CorruptTreeError instead of
recursing forever.
"""

import logging

import pytest

from assettreelib import (
    AssetTreeConfig,
    AssetTreeError,
    CorruptTreeError,
    build_tree,
    flatten_tree,
    get_all_descendants,
    get_asset_depth,
    get_parent_chain,
    get_total_item_count,
    is_descendant_of,
    move_asset,
    remove_asset,
    search_assets,
    validate_no_circular_reference,
)
from assettreelib.testing import make_asset, make_chain, make_folder


@pytest.fixture
def two_cycle():
    return [
        make_folder("A", parent="B"),
        make_folder("B", parent="A"),
        make_asset("inside", parent="A"),
    ]


@pytest.fixture
def self_loop():
    return [make_folder("S", parent="S")]


@pytest.mark.parametrize("operation", [
    lambda nodes: get_asset_depth(nodes, "A"),
    lambda nodes: get_all_descendants(nodes, "A"),
    lambda nodes: build_tree(nodes, "A"),
    lambda nodes: get_parent_chain(nodes, "inside"),
    lambda nodes: is_descendant_of(nodes, "A", "elsewhere"),
    lambda nodes: get_total_item_count(nodes, "B"),
    lambda nodes: search_assets(nodes, "zzz"),
])
def test_cycle_raises(two_cycle, operation):
    with pytest.raises(CorruptTreeError):
        operation(two_cycle)


def test_self_loop_raises(self_loop):
    with pytest.raises(CorruptTreeError):
        get_asset_depth(self_loop, "S")
    with pytest.raises(CorruptTreeError):
        get_all_descendants(self_loop, "S")


def test_cycle_not_reachable_from_root_level(two_cycle):
    """A detached cycle has no root, so the root-level forest is empty."""
    assert build_tree(two_cycle) == []


def test_move_into_cycle_raises(two_cycle):
    nodes = two_cycle + [make_asset("photo")]
    with pytest.raises(CorruptTreeError):
        move_asset(nodes, "photo", "A")


def test_error_details(self_loop, caplog):
    with caplog.at_level(logging.ERROR, logger="assettreelib"):
        with pytest.raises(CorruptTreeError) as exc_info:
            get_asset_depth(self_loop, "S")

    error = exc_info.value
    assert isinstance(error, AssetTreeError)
    assert error.node_id == "S"
    assert error.limit == 1
    assert "cycle" in str(error)
    assert "Parent cycle detected" in caplog.text


def test_guarded_config_uses_fixed_bound(two_cycle):
    config = AssetTreeConfig.guarded()
    with pytest.raises(CorruptTreeError) as exc_info:
        get_asset_depth(two_cycle, "inside", config=config)
    assert exc_info.value.limit == 20


def test_valid_deep_chain_passes_guard():
    nodes = make_chain(10)
    config = AssetTreeConfig.guarded(factor=1)

    assert get_asset_depth(nodes, "F10", config=config) == 9
    assert len(get_all_descendants(nodes, "F1", config=config)) == 9
    assert len(build_tree(nodes, config=config)) == 1


@pytest.fixture
def cycle_in_large_collection(two_cycle):
    """The two-folder cycle buried among thousands of unrelated root files."""
    return two_cycle + [make_asset(f"file-{i}") for i in range(3000)]


@pytest.mark.parametrize("operation", [
    lambda nodes: get_all_descendants(nodes, "A"),
    lambda nodes: build_tree(nodes, "A"),
    lambda nodes: search_assets(nodes, "zzz"),
    lambda nodes: get_total_item_count(nodes, "B"),
    lambda nodes: remove_asset(nodes, "A"),
    lambda nodes: validate_no_circular_reference(nodes, "A", "file-0"),
    lambda nodes: move_asset(nodes, "B", "file-0"),
])
def test_cycle_in_large_collection_raises(cycle_in_large_collection, operation):
    with pytest.raises(CorruptTreeError) as exc_info:
        operation(cycle_in_large_collection)
    assert exc_info.value.revisited in ("A", "B")


def test_revisit_reported(two_cycle, caplog):
    with caplog.at_level(logging.ERROR, logger="assettreelib"):
        with pytest.raises(CorruptTreeError) as exc_info:
            get_all_descendants(two_cycle, "A")

    assert exc_info.value.node_id == "A"
    assert exc_info.value.revisited == "A"
    assert "inside itself" in str(exc_info.value)
    assert "Parent cycle detected at 'A'" in caplog.text


def test_very_deep_valid_chain():
    """Walks use an explicit stack, so depth is not limited by recursion."""
    nodes = make_chain(3000)

    assert len(get_all_descendants(nodes, "F1")) == 2999
    flat = flatten_tree(build_tree(nodes))
    assert len(flat) == 3000
    assert (flat[-1].asset.id, flat[-1].depth) == ("F3000", 2999)
    assert get_asset_depth(nodes, "F3000") == 2999


def test_sibling_folders_sharing_an_id_are_not_a_cycle():
    nodes = [
        make_folder("dup", name="first"),
        make_folder("dup", name="second"),
        make_asset("inside", parent="dup"),
    ]
    tree = build_tree(nodes)

    assert [t.asset.name for t in tree] == ["first", "second"]
    assert [len(t.children) for t in tree] == [1, 1]
