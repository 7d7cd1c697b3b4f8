"""Binary tree algorithms."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from algoset.nodes import NextNode, TreeNode


def bst_from_preorder(preorder: Sequence[int]) -> Optional[TreeNode]:
    """Build a binary search tree from its preorder traversal."""
    preorder = list(preorder)
    inorder = sorted(preorder)
    position = {value: index for index, value in enumerate(inorder)}

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> Optional[TreeNode]:
        if pre_start > pre_end or in_start > in_end:
            return None
        root = TreeNode(preorder[pre_start])
        in_root = position[root.val]
        num_left = in_root - in_start
        root.left = build(pre_start + 1, pre_start + num_left, in_start, in_root - 1)
        root.right = build(pre_start + num_left + 1, pre_end, in_root + 1, in_end)
        return root

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def flatten(root: Optional[TreeNode]) -> None:
    """Flatten the tree in place into a right-leaning chain in preorder."""
    prev: Optional[TreeNode] = None

    def visit(node: Optional[TreeNode]) -> None:
        nonlocal prev
        if node is None:
            return
        visit(node.right)
        visit(node.left)
        node.right = prev
        node.left = None
        prev = node

    visit(root)


def connect(root: Optional[NextNode]) -> Optional[NextNode]:
    """Point each node of a perfect binary tree at its right neighbour."""
    if root is None:
        return None
    if root.left is not None:
        root.left.next = root.right
    if root.right is not None and root.next is not None:
        root.right.next = root.next.left
    connect(root.left)
    connect(root.right)
    return root


def lca_deepest_leaves(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the lowest common ancestor of the deepest leaves."""

    def find(node: Optional[TreeNode], depth: int) -> Tuple[Optional[TreeNode], int]:
        if node is None:
            return None, depth
        left = find(node.left, depth + 1)
        right = find(node.right, depth + 1)
        if left[1] == right[1]:
            return node, left[1]
        return left if left[1] > right[1] else right

    return find(root, 0)[0]


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of any non-empty path in the tree."""
    if root is None:
        raise ValueError("tree is empty")
    best = -math.inf

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.val)
        return node.val + max(left, right)

    gain(root)
    return int(best)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node that has both p and q as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting the gaps between end nodes."""
    if root is None:
        return 0
    best = 1
    level: List[Tuple[TreeNode, int]] = [(root, 0)]
    while level:
        start = level[0][1]
        end = level[-1][1]
        best = max(best, end - start + 1)
        following: List[Tuple[TreeNode, int]] = []
        for node, index in level:
            offset = index - start
            if node.left is not None:
                following.append((node.left, 2 * offset + 1))
            if node.right is not None:
                following.append((node.right, 2 * offset + 2))
        level = following
    return best


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding val in a binary search tree, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a strict binary search tree."""

    def check(node: Optional[TreeNode], low: float, high: float) -> bool:
        if node is None:
            return True
        if node.val <= low or node.val >= high:
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, -math.inf, math.inf)