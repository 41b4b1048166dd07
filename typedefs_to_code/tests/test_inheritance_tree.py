import pytest

from typedefs_to_code.pipeline.analyzer import InheritanceTree, build_tree
from typedefs_to_code.pipeline.config import SiblingOrder
from typedefs_to_code.pipeline.errors import CyclicInheritanceError, MissingParentError
from typedefs_to_code.pipeline.model_ast import ModelParser


def parse(model):
    return ModelParser().parse(model)


def walk_names(tree):
    return [node.name for node in tree.walk()]


class TestInsert:
    def test_root_level_type(self):
        tree = InheritanceTree(parse({"A": {"fields": {"a": "string"}}}))
        node = tree.insert("A")
        assert node.name == "A"
        assert node.parent is tree.root
        assert tree.root.children == [node]

    def test_insert_is_idempotent(self):
        tree = InheritanceTree(parse({"A": {"fields": {"a": "string"}}}))
        first = tree.insert("A")
        second = tree.insert("A")
        assert first is second
        assert len(tree.root.children) == 1
        assert len(tree) == 1

    def test_forward_reference_resolves_parent_first(self):
        model = parse(
            {
                "C": {"extends": "B", "fields": {"c": "string"}},
                "B": {"extends": "A", "fields": {"b": "string"}},
                "A": {"fields": {"a": "string"}},
            }
        )
        tree = InheritanceTree(model)
        tree.insert("C")
        assert "A" in tree and "B" in tree and "C" in tree
        assert tree.find("C").parent is tree.find("B")
        assert tree.find("B").parent is tree.find("A")
        assert tree.find("A").parent is tree.root
        assert tree.ancestors("C") == ["B", "A"]

    def test_enum_is_attached_to_root(self):
        tree = build_tree(parse({"Color": {"values": ["RED"]}}))
        assert tree.find("Color").parent is tree.root

    def test_every_type_appears_once(self):
        model = parse(
            {
                "D": {"extends": "B"},
                "B": {"extends": "A", "fields": {"b": "string"}},
                "A": {"fields": {"a": "string"}},
                "C": {"extends": "A", "fields": {"c": "string"}},
                "E": {"values": ["X"]},
            }
        )
        tree = build_tree(model)
        names = walk_names(tree)
        assert sorted(names) == ["A", "B", "C", "D", "E"]
        assert len(names) == len(set(names))


class TestErrors:
    def test_missing_parent(self):
        tree = InheritanceTree(parse({"Orphan": {"extends": "Ghost"}}))
        with pytest.raises(MissingParentError) as exc_info:
            tree.insert("Orphan")
        assert exc_info.value.type_name == "Orphan"
        assert exc_info.value.parent_name == "Ghost"
        assert "Orphan" not in tree

    def test_transitive_missing_parent_leaves_tree_unchanged(self):
        model = parse({"Child": {"extends": "Middle"}, "Middle": {"extends": "Ghost", "fields": {"m": "string"}}})
        tree = InheritanceTree(model)
        with pytest.raises(MissingParentError) as exc_info:
            tree.insert("Child")
        assert exc_info.value.type_name == "Middle"
        assert len(tree) == 0
        assert tree.root.children == []

    def test_self_reference(self):
        tree = InheritanceTree(parse({"Loop": {"extends": "Loop", "fields": {"a": "string"}}}))
        with pytest.raises(CyclicInheritanceError) as exc_info:
            tree.insert("Loop")
        assert exc_info.value.chain == ["Loop", "Loop"]

    def test_cycle(self):
        model = parse(
            {
                "A": {"extends": "C", "fields": {"a": "string"}},
                "B": {"extends": "A", "fields": {"b": "string"}},
                "C": {"extends": "B", "fields": {"c": "string"}},
            }
        )
        with pytest.raises(CyclicInheritanceError) as exc_info:
            build_tree(model)
        assert exc_info.value.chain == ["A", "C", "B", "A"]
        assert "A -> C -> B -> A" in str(exc_info.value)

    def test_cycle_below_valid_root(self):
        model = parse(
            {
                "Leaf": {"extends": "X", "fields": {"l": "string"}},
                "X": {"extends": "Y", "fields": {"x": "string"}},
                "Y": {"extends": "X", "fields": {"y": "string"}},
            }
        )
        with pytest.raises(CyclicInheritanceError):
            build_tree(model)


class TestWalk:
    MODEL = {
        "Zed": {"extends": "Base", "fields": {"z": "string"}},
        "Base": {"fields": {"a": "string"}},
        "Color": {"values": ["RED"]},
        "Alpha": {"extends": "Base", "fields": {"b": "string"}},
        "Deep": {"extends": "Zed"},
    }

    def test_discovery_order(self):
        tree = build_tree(parse(self.MODEL))
        assert walk_names(tree) == ["Base", "Zed", "Deep", "Alpha", "Color"]

    def test_name_order(self):
        tree = build_tree(parse(self.MODEL), SiblingOrder.NAME)
        assert walk_names(tree) == ["Base", "Alpha", "Zed", "Deep", "Color"]

    def test_parents_before_children(self):
        for order in SiblingOrder:
            tree = build_tree(parse(self.MODEL), order)
            names = walk_names(tree)
            for name in names:
                for ancestor in tree.ancestors(name):
                    assert names.index(ancestor) < names.index(name)

    def test_root_is_not_yielded(self):
        tree = build_tree(parse(self.MODEL))
        assert all(not node.is_root for node in tree.walk())
