from __future__ import annotations

"""
Tree Traversal Utilities.

Measurements and folds over Leaf/Branch trees. Every walk here uses an
explicit stack, so the functions accept trees of any depth.
"""

from typing import Any, Callable, Iterator, List, Tuple

from functorkit.domain.tree_models import Branch, Leaf, Tree

# -----------------------------------------------------------------------------
# MEASUREMENTS
# -----------------------------------------------------------------------------

def depth(tree: Tree[Any]) -> int:
    """
    Length of the longest root-to-leaf path, counted in nodes.

    A lone Leaf has depth 1.
    """
    deepest = 0
    stack: List[Tuple[Tree[Any], int]] = [(tree, 1)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, Branch):
            stack.append((node.right, level + 1))
            stack.append((node.left, level + 1))
        else:
            deepest = max(deepest, level)
    return deepest


def size(tree: Tree[Any]) -> int:
    """Total number of nodes (leaves and branches)."""
    return sum(1 for _ in _preorder(tree))


def leaf_count(tree: Tree[Any]) -> int:
    """Number of Leaf nodes."""
    return sum(1 for node in _preorder(tree) if isinstance(node, Leaf))


def leaves(tree: Tree[Any]) -> List[Any]:
    """Leaf values from left to right."""
    return [node.value for node in _preorder(tree) if isinstance(node, Leaf)]


def shape(tree: Tree[Any]) -> str:
    """
    Value-independent topology signature.

    Preorder listing of node kinds ("B" for Branch, "L" for Leaf). Two
    trees share a shape exactly when their signatures match.
    """
    return "".join("B" if isinstance(node, Branch) else "L" for node in _preorder(tree))


def same_shape(a: Tree[Any], b: Tree[Any]) -> bool:
    """True when both trees have identical topology."""
    return shape(a) == shape(b)


def equal(a: Tree[Any], b: Tree[Any]) -> bool:
    """
    Structural and value equality without recursion.

    Same result as `a == b`; kept as a named equality for law checks.

    Args:
        a: First tree.
        b: Second tree.

    Returns:
        bool: True if topologies match and paired leaves compare equal.
    """
    return bool(a == b)

# -----------------------------------------------------------------------------
# FOLDS
# -----------------------------------------------------------------------------

def fold(
        tree: Tree[Any],
        on_leaf: Callable[[Any], Any],
        on_branch: Callable[[Any, Any], Any],
) -> Any:
    """
    Collapse a tree bottom-up.

    Args:
        tree: Tree to fold.
        on_leaf: Called with each leaf value.
        on_branch: Called with the folded left and right results.

    Returns:
        Any: The folded result for the root.

    Example:
        fold(t, lambda v: v, operator.add) sums the leaves.
    """
    pending: List[Tuple[Tree[Any], bool]] = [(tree, False)]
    results: List[Any] = []
    while pending:
        node, children_done = pending.pop()
        if isinstance(node, Branch):
            if children_done:
                right = results.pop()
                left = results.pop()
                results.append(on_branch(left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        elif isinstance(node, Leaf):
            results.append(on_leaf(node.value))
        else:
            raise TypeError(f"Unsupported tree variant: {type(node).__name__}.")
    return results[0]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _preorder(tree: Tree[Any]) -> Iterator[Tree[Any]]:
    stack: List[Tree[Any]] = [tree]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Branch):
            stack.append(node.right)
            stack.append(node.left)
