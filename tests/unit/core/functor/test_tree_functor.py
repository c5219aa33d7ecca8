from __future__ import annotations

"""
Unit tests for the Tree Functor.

Verifies the leaf/branch mapping rules, structure preservation, the two
functor laws (property based, via hypothesis), call order, error
propagation and support for trees deeper than the recursion limit.
"""

import sys

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from functorkit.core.functor.base import compose2, identity
from functorkit.core.functor.instances import TreeFunctor
from functorkit.core.tree import traversal
from functorkit.core.tree.generator import left_spine
from functorkit.domain.tree_models import Branch, Leaf, branch, leaf

trees = st.recursive(
    st.integers(min_value=-1000, max_value=1000).map(Leaf),
    lambda children: st.tuples(children, children).map(lambda pair: Branch(*pair)),
    max_leaves=40,
)
int_functions = st.sampled_from([
    lambda x: x * 2,
    lambda x: x + 1,
    lambda x: -x,
    lambda x: x * x,
    lambda x: x % 7,
])

F = TreeFunctor()


def double(x):
    return x * 2


# -----------------------------------------------------------------------------
# Concrete scenarios
# -----------------------------------------------------------------------------

def test_map_branch_of_two_leaves():
    assert F.map(branch(leaf(10), leaf(20)), double) == branch(leaf(20), leaf(40))


def test_map_single_leaf():
    assert F.map(leaf(100), double) == leaf(200)


def test_map_nested_tree(sample_tree):
    assert F.map(sample_tree, str) == branch(leaf("10"), branch(leaf("20"), leaf("30")))


def test_map_does_not_mutate_source(sample_tree):
    before = repr(sample_tree)
    result = F.map(sample_tree, double)
    assert repr(sample_tree) == before
    assert result is not sample_tree


def test_function_called_once_per_leaf_left_to_right(sample_tree):
    calls = []

    def record(x):
        calls.append(x)
        return x

    F.map(sample_tree, record)
    assert calls == [10, 20, 30]


def test_exception_from_function_propagates(sample_tree):
    def boom(x):
        if x == 20:
            raise RuntimeError("bad value")
        return x

    with pytest.raises(RuntimeError, match="bad value"):
        F.map(sample_tree, boom)


def test_rejects_non_tree():
    with pytest.raises(TypeError):
        F.map([1, 2], double)


def test_deep_tree_beyond_recursion_limit():
    """A depth-n tree maps to a depth-n tree without structural corruption."""
    n = sys.getrecursionlimit() * 3
    source = left_spine(n)

    result = F.map(source, double)

    assert traversal.depth(result) == n
    assert traversal.same_shape(source, result)
    assert traversal.leaves(result) == [2 * i for i in range(n)]


def test_deep_tree_identity_compares_with_eq():
    n = sys.getrecursionlimit() * 3
    source = left_spine(n)

    assert F.map(source, identity) == left_spine(n)
    assert F.map(source, double) != source

# -----------------------------------------------------------------------------
# Properties
# -----------------------------------------------------------------------------

@given(trees)
@settings(max_examples=60, deadline=None)
def test_identity_law(t):
    assert F.map(t, identity) == t


@given(trees, int_functions, int_functions)
@settings(max_examples=60, deadline=None)
def test_composition_law(t, f, g):
    assert F.map(F.map(t, f), g) == F.map(t, compose2(f, g))


@given(trees, int_functions)
@settings(max_examples=60, deadline=None)
def test_structure_preserved(t, f):
    mapped = F.map(t, f)
    assert traversal.shape(mapped) == traversal.shape(t)
    assert traversal.depth(mapped) == traversal.depth(t)


@given(trees, trees, int_functions)
@settings(max_examples=40, deadline=None)
def test_branch_recursion(left, right, f):
    assert F.map(Branch(left, right), f) == Branch(F.map(left, f), F.map(right, f))


@given(st.integers(), int_functions)
def test_leaf_transform(v, f):
    assert F.map(Leaf(v), f) == Leaf(f(v))
