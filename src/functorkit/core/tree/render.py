from __future__ import annotations

"""
Tree Renderer.

Converts Leaf/Branch trees into ASCII line listings, e.g.:

    Branch
    ├── Leaf(10)
    └── Branch
        ├── Leaf(20)
        └── Leaf(30)
"""

from typing import Any, List, Tuple

from functorkit.domain.tree_models import Branch, Leaf, Tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: Tree[Any]) -> List[str]:
    """
    Render a tree as a list of text lines.

    Args:
        tree: Tree to render.

    Returns:
        List[str]: One line per node, root first.
    """
    lines = [_label(tree)]
    if isinstance(tree, Branch):
        render_children(tree, lines)
    return lines


def render_children(node: Branch[Any], lines: List[str], prefix: str = "") -> None:
    """
    Append the descendants of `node` to `lines`.

    Uses standard ASCII connectors (├──, └──) and extends the prefix for
    every nested level. Pending children sit on an explicit stack, so the
    depth of `node` is not limited by the recursion limit.

    Args:
        node: Branch whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the children of `node`.
    """
    # (child, prefix of its line, is last sibling)
    stack: List[Tuple[Tree[Any], str, bool]] = [
        (node.right, prefix, True),
        (node.left, prefix, False),
    ]
    while stack:
        child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{child_prefix}{connector}{_label(child)}")

        if isinstance(child, Branch):
            nested = child_prefix + ("    " if is_last else "│   ")
            stack.append((child.right, nested, True))
            stack.append((child.left, nested, False))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _label(node: Tree[Any]) -> str:
    if isinstance(node, Leaf):
        return f"Leaf({node.value!r})"
    return "Branch"
