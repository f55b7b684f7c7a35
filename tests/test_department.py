"""
Tests for the Department model.
"""

import pytest

from serialized_lob.models import Department


def test_department_create():
    """A new department is a leaf."""
    department = Department("Sales")

    assert department.name == "Sales"
    assert department.children == []


def test_department_accepts_empty_name():
    department = Department("")
    assert department.name == ""


def test_children_are_not_shared_between_instances():
    first = Department("first")
    second = Department("second")
    first.children.append(Department("child"))

    assert second.children == []


def test_add_child_appends_in_order():
    parent = Department("parent")
    parent.add_child(Department("d1"))
    parent.add_child(Department("d2"))

    assert [child.name for child in parent.children] == ["d1", "d2"]


def test_add_child_returns_child():
    parent = Department("parent")
    child = Department("child")

    assert parent.add_child(child) is child


def test_sibling_names_need_not_be_unique():
    parent = Department("parent")
    parent.add_child(Department("same"))
    parent.add_child(Department("same"))

    assert len(parent.children) == 2


def test_add_child_rejects_self():
    department = Department("loop")

    with pytest.raises(ValueError):
        department.add_child(department)
    assert department.children == []


def test_add_child_rejects_ancestor():
    """Attaching an ancestor under its own descendant would create a cycle."""
    root = Department("root")
    middle = root.add_child(Department("middle"))
    leaf = middle.add_child(Department("leaf"))

    with pytest.raises(ValueError):
        leaf.add_child(root)
    assert leaf.children == []


def test_walk_is_depth_first_pre_order():
    root = Department("a")
    b = root.add_child(Department("b"))
    b.add_child(Department("c"))
    root.add_child(Department("d"))

    assert [department.name for department in root.walk()] == ["a", "b", "c", "d"]
    assert root.size() == 4


def test_structural_equality():
    first = Department("a", [Department("b", [Department("c")])])
    second = Department("a", [Department("b", [Department("c")])])
    reordered = Department("a", [Department("c"), Department("b")])

    assert first == second
    assert first != reordered


def build_chain(levels):
    root = Department("level0")
    node = root
    for level in range(1, levels):
        node = node.add_child(Department(f"level{level}"))
    return root, node


def test_deep_chain_walk_and_size():
    root, leaf = build_chain(5000)

    nodes = list(root.walk())

    assert root.size() == 5000
    assert nodes[0] is root
    assert nodes[-1] is leaf


def test_deep_chain_equality_and_repr():
    first, _ = build_chain(5000)
    second, second_leaf = build_chain(5000)

    assert first == second
    second_leaf.name = "changed"
    assert first != second
    assert repr(first) == "Department(name='level0', children=1)"


def test_add_child_rejects_ancestor_of_deep_chain():
    root, leaf = build_chain(5000)

    with pytest.raises(ValueError):
        leaf.add_child(root)
