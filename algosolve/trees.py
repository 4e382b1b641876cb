"""Binary tree algorithms: level width, vertical order and BST construction."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Optional, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the maximum width of any level, counting gaps between end nodes."""
    best = 0
    leftmost: list[int] = []
    # Depth-first, left child before right, so the first index seen on a level
    # belongs to its leftmost node.
    stack: list[tuple[TreeNode, int, int]] = [(root, 0, 0)] if root else []
    while stack:
        node, level, index = stack.pop()
        if len(leftmost) == level:
            leftmost.append(index)
        best = max(best, index - leftmost[level] + 1)
        if node.right:
            stack.append((node.right, level + 1, 2 * index + 1))
        if node.left:
            stack.append((node.left, level + 1, 2 * index))
    return best


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Group node values by column, left to right; within a column by row, then value."""
    if root is None:
        return []
    columns: dict[int, dict[int, list[int]]] = defaultdict(lambda: defaultdict(list))
    queue: deque[tuple[TreeNode, int, int]] = deque([(root, 0, 0)])
    while queue:
        node, row, col = queue.popleft()
        columns[col][row].append(node.val)
        if node.left:
            queue.append((node.left, row + 1, col - 1))
        if node.right:
            queue.append((node.right, row + 1, col + 1))
    return [
        [val for row in sorted(rows) for val in sorted(rows[row])]
        for _, rows in sorted(columns.items())
    ]


def bst_from_preorder(preorder: Sequence[int]) -> Optional[TreeNode]:
    """Build the binary search tree whose preorder traversal is ``preorder``."""
    position = 0

    def build(lower: int, upper: int) -> Optional[TreeNode]:
        nonlocal position
        root = None
        while position < len(preorder) and lower < preorder[position] < upper:
            value = preorder[position]
            position += 1
            root = TreeNode(value)
            root.left = build(lower, value)
            root.right = build(value, upper)
        return root

    return build(_INT_MIN, _INT_MAX)