from __future__ import annotations

"""
Binary Tree Data Models.

Provides the closed variant set used by the tree functor: a terminal
Leaf carrying a single value and a Branch owning exactly two subtrees.
Nodes are immutable; every transformation produces a new structure.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Tuple, TypeVar, Union

A = TypeVar("A")

# Marks branch positions in the preorder hash key; never equal to a Leaf
_BRANCH_TAG = object()

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class Tree(Generic[A]):
    """
    Abstract root of the {Leaf, Branch} variant set.

    Not instantiated directly. Client code builds trees from the concrete
    variants or through the `leaf` / `branch` helpers below.
    """

    __slots__ = ()

    @property
    def is_leaf(self) -> bool:
        return isinstance(self, Leaf)


@dataclass(frozen=True)
class Leaf(Tree[A]):
    """
    Terminal node holding exactly one value.

    Attributes:
        value: The element stored at this position.
    """
    value: A

    def __repr__(self) -> str:
        return f"Leaf({self.value!r})"


@dataclass(frozen=True, eq=False)
class Branch(Tree[A]):
    """
    Inner node owning a left and a right subtree.

    Equality, hashing and repr walk the subtree with an explicit stack, so
    they work on trees deeper than the interpreter recursion limit.

    Attributes:
        left: Left child.
        right: Right child.
    """
    left: Tree[A]
    right: Tree[A]

    def __post_init__(self) -> None:
        for side in ("left", "right"):
            child = getattr(self, side)
            if not isinstance(child, Tree):
                raise TypeError(
                    f"Branch.{side} must be a Tree, received {type(child).__name__}."
                )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Branch):
            return NotImplemented
        stack: List[Tuple[Tree[Any], Tree[Any]]] = [(self, other)]
        while stack:
            x, y = stack.pop()
            if x is y:
                continue
            if isinstance(x, Branch) and isinstance(y, Branch):
                stack.append((x.right, y.right))
                stack.append((x.left, y.left))
            elif x != y:
                return False
        return True

    def __hash__(self) -> int:
        # Preorder of node tags and leaf values identifies the tree
        parts: List[Any] = []
        stack: List[Tree[Any]] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Branch):
                parts.append(_BRANCH_TAG)
                stack.append(node.right)
                stack.append(node.left)
            else:
                parts.append(node)
        return hash(tuple(parts))

    def __repr__(self) -> str:
        parts: List[str] = []
        stack: List[Union[Tree[Any], str]] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Branch):
                parts.append("Branch(")
                stack.extend((")", item.right, ", ", item.left))
            else:
                parts.append(repr(item))
        return "".join(parts)


# -----------------------------------------------------------------------------
# CONSTRUCTION HELPERS
# -----------------------------------------------------------------------------

def leaf(value: Any) -> Tree[Any]:
    """Build a Leaf typed as the abstract Tree."""
    return Leaf(value)


def branch(left: Tree[Any], right: Tree[Any]) -> Tree[Any]:
    """Build a Branch typed as the abstract Tree."""
    return Branch(left, right)
