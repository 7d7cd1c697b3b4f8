"""Singly linked list algorithms."""

from __future__ import annotations

from typing import Optional

from algoset.nodes import ListNode


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways; the list is left unchanged."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second_half = reverse(slow.next)
    result = True
    first, second = head, second_half
    while second is not None:
        if first.val != second.val:
            result = False
            break
        first, second = first.next, second.next
    slow.next = reverse(second_half)
    return result


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list k places to the right and return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        length += 1
        tail = tail.next
    tail.next = head
    for _ in range(length - k % length):
        tail = tail.next
    new_head = tail.next
    tail.next = None
    return new_head