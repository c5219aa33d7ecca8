from __future__ import annotations

"""
Compact Tree Encoding.

JSON-compatible representation used by the CLI:

- a Leaf is encoded as its value (any non-list JSON value),
- a Branch is encoded as a two-element list `[left, right]`.

Example: `[10, [20, 30]]` is Branch(Leaf(10), Branch(Leaf(20), Leaf(30))).
Leaf values that are themselves lists cannot be expressed in this form.

The list skeleton is read and written with explicit stacks; only leaf
values go through the `json` module. Tree depth is therefore not bounded
by the interpreter recursion limit.
"""

import json
import re
from typing import Any, List, Optional, Tuple, Union

from functorkit.core.tree.traversal import fold
from functorkit.domain.errors import TreeDecodeError
from functorkit.domain.tree_models import Branch, Leaf, Tree

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_LEAF_DECODER = json.JSONDecoder()

# Linked path used for error messages: (parent, child index), or None at the root
_Path = Optional[Tuple[Any, int]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tree_to_data(tree: Tree[Any]) -> Any:
    """
    Encode a tree into nested lists and leaf values.

    Raises:
        ValueError: If a leaf value is a list (ambiguous with a Branch).
    """
    return fold(tree, _check_leaf, lambda left, right: [left, right])


def tree_from_data(data: Any) -> Tree[Any]:
    """
    Decode nested lists into a tree.

    Args:
        data: Decoded JSON value.

    Returns:
        Tree: The decoded tree.

    Raises:
        TreeDecodeError: If a list does not hold exactly two elements.
    """
    pending: List[Tuple[Any, _Path, bool]] = [(data, None, False)]
    built: List[Tree[Any]] = []
    while pending:
        item, path, children_done = pending.pop()
        if not isinstance(item, list):
            built.append(Leaf(item))
        elif children_done:
            right = built.pop()
            left = built.pop()
            built.append(Branch(left, right))
        elif len(item) != 2:
            raise TreeDecodeError(
                f"Branch at {_format_path(path)} must have exactly 2 children, found {len(item)}."
            )
        else:
            pending.append((item, path, True))
            pending.append((item[1], (path, 1), False))
            pending.append((item[0], (path, 0), False))
    return built[0]


def loads(text: str) -> Tree[Any]:
    """
    Parse a compact tree from JSON text.

    Raises:
        TreeDecodeError: On empty input, invalid JSON or malformed structure.
    """
    if not text or not text.strip():
        raise TreeDecodeError("Empty tree literal.")
    try:
        return tree_from_data(_parse(text))
    except RecursionError as e:
        # Only reachable through nested objects inside a leaf value
        raise TreeDecodeError("Tree literal is nested too deeply.") from e


def dumps(tree: Tree[Any]) -> str:
    """
    Serialize a tree to compact JSON text.

    Raises:
        ValueError: If a leaf value is a list or cannot be encoded.
    """
    parts: List[str] = []
    stack: List[Union[Tree[Any], str]] = [tree]
    try:
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Branch):
                parts.append("[")
                stack.extend(("]", item.right, ", ", item.left))
            elif isinstance(item, Leaf):
                parts.append(json.dumps(_check_leaf(item.value), ensure_ascii=False))
            else:
                raise TypeError(f"Unsupported tree variant: {type(item).__name__}.")
    except RecursionError as e:
        raise ValueError("Leaf value is nested too deeply to encode.") from e
    return "".join(parts)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_leaf(value: Any) -> Any:
    if isinstance(value, list):
        raise ValueError("List-valued leaves cannot be encoded in the compact format.")
    return value


def _parse(text: str) -> Any:
    """
    Read JSON text into nested lists without recursing on list nesting.

    Arrays are tracked on an explicit stack; every other value is handed to
    `json.JSONDecoder.raw_decode`.
    """
    open_lists: List[List[Any]] = []
    pos = _skip(text, 0)
    while True:
        # A value starts at `pos`
        if text.startswith("[", pos):
            pos = _skip(text, pos + 1)
            if not text.startswith("]", pos):
                open_lists.append([])
                continue
            value: Any = []
            pos += 1
        else:
            try:
                value, pos = _LEAF_DECODER.raw_decode(text, pos)
            except json.JSONDecodeError as e:
                raise TreeDecodeError(f"Invalid JSON tree literal: {e.msg} (pos {e.pos}).") from e

        # Attach the value, closing every list that ends right after it
        while True:
            pos = _skip(text, pos)
            if not open_lists:
                if pos != len(text):
                    raise TreeDecodeError(f"Invalid JSON tree literal: Extra data (pos {pos}).")
                return value
            open_lists[-1].append(value)
            if text.startswith(",", pos):
                pos = _skip(text, pos + 1)
                break
            if text.startswith("]", pos):
                value = open_lists.pop()
                pos += 1
                continue
            raise TreeDecodeError(
                f"Invalid JSON tree literal: Expecting ',' delimiter or ']' (pos {pos})."
            )


def _skip(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()


def _format_path(path: _Path) -> str:
    indices: List[int] = []
    while path is not None:
        path, index = path
        indices.append(index)
    return "$" + "".join(f"[{i}]" for i in reversed(indices))
