"""Node types shared by the tree and linked-list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class NextNode:
    """A binary tree node that also points to its right neighbour on the same level."""

    val: int = 0
    left: Optional[NextNode] = None
    right: Optional[NextNode] = None
    next: Optional[NextNode] = None


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from values and return its head, or None when empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def _walk(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def to_values(self) -> List[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in self._walk()]

    def __repr__(self) -> str:
        return f"ListNode({self.to_values()!r})"