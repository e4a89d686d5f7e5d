"""Tests for building navigation trees from flat menu item rows."""

from types import SimpleNamespace

from fullsco.services.menu_tree import build_menu_tree, descendant_ids


def item(id, parent_id=None):
    return SimpleNamespace(id=id, parent_id=parent_id)


class TestBuildMenuTree:
    def test_nests_children_under_parents(self):
        tree = build_menu_tree([item(1), item(2, 1), item(3, 1), item(4, 2)])
        assert [n.item.id for n in tree.roots] == [1]
        root = tree.roots[0]
        assert [c.item.id for c in root.children] == [2, 3]
        assert [c.item.id for c in root.children[0].children] == [4]
        assert tree.detached == []

    def test_siblings_keep_input_order(self):
        tree = build_menu_tree([item(5), item(3), item(9, 5), item(7, 5)])
        assert [n.item.id for n in tree.roots] == [5, 3]
        assert [c.item.id for c in tree.roots[0].children] == [9, 7]

    def test_every_item_appears_exactly_once(self):
        items = [item(1), item(2, 1), item(3, 2), item(4), item(5, 4), item(6, 1)]
        tree = build_menu_tree(items)
        seen = [node.item.id for node, _ in tree.walk()]
        assert sorted(seen) == [1, 2, 3, 4, 5, 6]
        assert len(seen) == len(set(seen))

    def test_walk_reports_depth_in_display_order(self):
        tree = build_menu_tree([item(1), item(2, 1), item(3, 2), item(4)])
        assert [(n.item.id, d) for n, d in tree.walk()] == [(1, 0), (2, 1), (3, 2), (4, 0)]

    def test_no_node_is_its_own_ancestor(self):
        tree = build_menu_tree([item(1), item(2, 1), item(3, 2)])
        ancestors = {}
        for node, _ in tree.walk():
            for child in node.children:
                ancestors[child.item.id] = ancestors.get(node.item.id, set()) | {node.item.id}
        for item_id, chain in ancestors.items():
            assert item_id not in chain

    def test_orphan_is_detached(self):
        tree = build_menu_tree([item(1), item(2, 99)])
        assert [n.item.id for n in tree.roots] == [1]
        assert tree.detached_ids == [2]

    def test_cycle_is_detached_instead_of_looping(self):
        # 2 -> 3 -> 2 never reaches a root
        tree = build_menu_tree([item(1), item(2, 3), item(3, 2)])
        assert [n.item.id for n in tree.roots] == [1]
        assert sorted(tree.detached_ids) == [2, 3]

    def test_self_parent_is_detached(self):
        tree = build_menu_tree([item(1, 1)])
        assert tree.roots == []
        assert tree.detached_ids == [1]

    def test_empty_input(self):
        tree = build_menu_tree([])
        assert tree.roots == []
        assert list(tree.walk()) == []


class TestDescendantIds:
    def test_collects_all_levels(self):
        items = [item(1), item(2, 1), item(3, 2), item(4, 3), item(5)]
        assert descendant_ids(items, 1) == {2, 3, 4}

    def test_leaf_has_none(self):
        assert descendant_ids([item(1), item(2, 1)], 2) == set()

    def test_terminates_on_cycle(self):
        items = [item(1, 3), item(2, 1), item(3, 2)]
        assert descendant_ids(items, 1) == {2, 3}
