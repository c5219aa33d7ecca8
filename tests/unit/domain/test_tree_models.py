from __future__ import annotations

"""
Unit tests for Tree Domain Models.

Verifies:
1. Construction helpers return the abstract Tree type.
2. Immutability of frozen dataclasses.
3. Structural equality and child validation.
"""

import dataclasses
import sys

import pytest

from functorkit.domain.tree_models import Branch, Leaf, Tree, branch, leaf


def test_smart_constructors_build_concrete_variants():
    """leaf/branch are thin helpers over Leaf/Branch."""
    t = branch(leaf(1), leaf(2))
    assert isinstance(t, Tree)
    assert isinstance(t, Branch)
    assert t == Branch(Leaf(1), Leaf(2))


def test_nodes_are_immutable():
    node = Leaf(5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = 6  # type: ignore[misc]

    b = Branch(Leaf(1), Leaf(2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        b.left = Leaf(9)  # type: ignore[misc]


def test_structural_equality_is_order_sensitive():
    assert branch(leaf(1), leaf(2)) == branch(leaf(1), leaf(2))
    assert branch(leaf(1), leaf(2)) != branch(leaf(2), leaf(1))
    assert leaf(1) != branch(leaf(1), leaf(1))


def test_branch_rejects_non_tree_children():
    with pytest.raises(TypeError, match="Branch.left"):
        Branch(1, Leaf(2))  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="Branch.right"):
        Branch(Leaf(1), [2])  # type: ignore[arg-type]


def test_is_leaf_property():
    assert leaf(0).is_leaf is True
    assert branch(leaf(0), leaf(1)).is_leaf is False


def test_repr_is_readable():
    assert repr(branch(leaf(10), leaf("a"))) == "Branch(Leaf(10), Leaf('a'))"


def test_nodes_are_hashable_with_hashable_values():
    seen = {branch(leaf(1), leaf(2)), branch(leaf(1), leaf(2))}
    assert len(seen) == 1


def test_equal_trees_hash_equal():
    a = branch(leaf(1), branch(leaf(2), leaf(3)))
    b = branch(leaf(1), branch(leaf(2), leaf(3)))
    assert hash(a) == hash(b)
    assert branch(leaf(1), leaf(2)) != leaf(1)
    assert branch(leaf(1), leaf(2)) != (1, 2)


def _chain(n):
    node = Leaf(0)
    for i in range(1, n):
        node = Branch(node, Leaf(i))
    return node


def test_deep_branch_eq_hash_repr_do_not_recurse():
    n = sys.getrecursionlimit() * 3
    a, b = _chain(n), _chain(n)

    assert a == b
    assert a != Branch(_chain(n - 1), Leaf(-1))
    assert hash(a) == hash(b)
    text = repr(a)
    assert text.startswith("Branch(" * 3)
    assert text.endswith(f"Leaf({n - 1}))")
