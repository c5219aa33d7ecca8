from __future__ import annotations

"""
Functor Instance for Binary Trees.

Maps a function over every Leaf of a {Leaf, Branch} tree and rebuilds an
isomorphic tree. The walk keeps its own work stack instead of recursing,
so depth is limited by memory rather than by the interpreter's recursion
limit.
"""

from typing import Any, Callable, List, Tuple

from functorkit.core.functor.base import Functor
from functorkit.domain.tree_models import Branch, Leaf, Tree


class TreeFunctor(Functor):
    """
    Structure-preserving map over Leaf/Branch trees.

    Leaf(v)        -> Leaf(f(v))
    Branch(l, r)   -> Branch(map(l), map(r))

    `f` runs exactly once per Leaf, left subtree before right subtree.
    """

    name = "Tree"

    def map(self, fa: Tree[Any], f: Callable[[Any], Any]) -> Tree[Any]:
        """
        Rebuild `fa` with `f` applied to each leaf value.

        Args:
            fa: Source tree. Never modified.
            f: Total function applied to each leaf value.

        Returns:
            Tree: New tree with the same topology.

        Raises:
            TypeError: If `fa` (or any node inside it) is not a Leaf/Branch.
        """
        if not isinstance(fa, Tree):
            raise TypeError(f"TreeFunctor expects a Tree, received {type(fa).__name__}.")

        # (node, children_done) pairs; rebuilt subtrees accumulate on `built`
        pending: List[Tuple[Tree[Any], bool]] = [(fa, False)]
        built: List[Tree[Any]] = []

        while pending:
            node, children_done = pending.pop()

            if isinstance(node, Leaf):
                built.append(Leaf(f(node.value)))
            elif isinstance(node, Branch):
                if children_done:
                    right = built.pop()
                    left = built.pop()
                    built.append(Branch(left, right))
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            else:
                raise TypeError(f"Unsupported tree variant: {type(node).__name__}.")

        return built[0]
