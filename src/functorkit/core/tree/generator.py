from __future__ import annotations

"""
Tree Generators.

Builders for sample trees: balanced trees from a sequence of values,
left-leaning spines of a given depth, and random topologies for law
checking.
"""

import random
from typing import Any, Callable, Optional, Sequence

from functorkit.domain.tree_models import Branch, Leaf, Tree

DEFAULT_BRANCH_PROBABILITY = 0.6


def balanced_tree(values: Sequence[Any]) -> Tree[Any]:
    """
    Build a balanced tree whose leaves, left to right, are `values`.

    Args:
        values: Non-empty sequence of leaf values.

    Returns:
        Tree: Leaf for a single value, Branch otherwise.

    Raises:
        ValueError: If `values` is empty.
    """
    if len(values) == 0:
        raise ValueError("balanced_tree requires at least one value.")
    if len(values) == 1:
        return Leaf(values[0])
    mid = len(values) // 2
    return Branch(balanced_tree(values[:mid]), balanced_tree(values[mid:]))


def left_spine(depth: int) -> Tree[int]:
    """
    Build a left-leaning chain of the given depth.

    Leaves hold 0, 1, ..., depth - 1 from left to right. Built
    iteratively, so very large depths are fine.

    Args:
        depth: Target depth (a lone Leaf has depth 1).

    Returns:
        Tree[int]: The chain.

    Raises:
        ValueError: If depth < 1.
    """
    if depth < 1:
        raise ValueError(f"depth must be >= 1, received {depth}.")
    node: Tree[int] = Leaf(0)
    for i in range(1, depth):
        node = Branch(node, Leaf(i))
    return node


def random_tree(
        max_depth: int,
        rng: Optional[random.Random] = None,
        value_factory: Optional[Callable[[random.Random], Any]] = None,
        branch_probability: float = DEFAULT_BRANCH_PROBABILITY,
) -> Tree[Any]:
    """
    Build a tree with random topology bounded by `max_depth`.

    Args:
        max_depth: Upper bound on the resulting depth (>= 1).
        rng: Source of randomness; pass a seeded instance for reproducibility.
        value_factory: Produces leaf values from the rng. Defaults to ints in [-100, 100].
        branch_probability: Chance of expanding a node into a Branch while depth allows.

    Returns:
        Tree: A random tree.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be >= 1, received {max_depth}.")
    rng = rng or random.Random()
    make_value = value_factory or (lambda r: r.randint(-100, 100))

    def grow(remaining: int) -> Tree[Any]:
        if remaining > 1 and rng.random() < branch_probability:
            return Branch(grow(remaining - 1), grow(remaining - 1))
        return Leaf(make_value(rng))

    return grow(max_depth)
