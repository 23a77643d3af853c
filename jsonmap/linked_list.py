"""A singly linked list and digit-wise addition of numbers stored as lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class ListNode:
    """One node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None


class SinglyList:
    """A singly linked list of integers appended at the tail."""

    def __init__(self) -> None:
        self.head: Optional[ListNode] = None

    def push(self, value: int) -> None:
        """Append a value at the end."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = node

    def delete(self, value: int) -> None:
        """Remove every node holding value."""
        while self.head is not None and self.head.val == value:
            self.head = self.head.next
        current = self.head
        while current is not None and current.next is not None:
            if current.next.val == value:
                current.next = current.next.next
            else:
                current = current.next

    def _nodes(self) -> Iterator[ListNode]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def print_nodes(self, logger) -> None:
        """Log each node's index and value at info level."""
        for idx, value in enumerate(self):
            logger.info("%s, node[%d] = %d", "print_nodes", idx, value)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> ListNode:
    """Add two numbers stored least-significant digit first."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    carry = 0
    while True:
        total = (l1.val if l1 else 0) + (l2.val if l2 else 0) + carry
        carry, digit = divmod(total, 10)
        node = ListNode(digit)
        if tail is None:
            head = tail = node
        else:
            tail.next = node
            tail = node
        l1 = l1.next if l1 else None
        l2 = l2.next if l2 else None
        if l1 is None and l2 is None and carry <= 0:
            break
    return head