"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node

_MIN_LINE = 2


def _put(row: list[str], pos: int, char: str) -> None:
    if pos < 0:
        return
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _layout(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``node`` and its subtree into ``rows``; return the width used."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)

    row = rows[depth]
    for i, char in enumerate(label):
        _put(row, offset + left + i, char)

    if depth:
        above = rows[depth - 1]
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        for pos in range(start, start + length):
            _put(above, pos, "-")
        _put(above, offset + left + width // 2, ".")

    return left + width + right


def _finish(row: list[str]) -> str:
    text = "".join(row)
    stripped = text.rstrip(" ")
    if len(stripped) < _MIN_LINE:
        stripped = text[:_MIN_LINE].ljust(_MIN_LINE)
    return stripped


def render(tree: Node | None) -> str:
    """Return the drawing of ``tree``, each line ending in a newline.

    An empty tree gives an empty string.
    """
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))