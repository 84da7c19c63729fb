"""Queue of strings backed by a singly linked list."""

import logging
from typing import Iterable, Iterator, Optional
import warnings

from ..errors import AllocationFailure, EmptyQueue
from ..logging import QueueStep
from ..logging import VERBOSE
from .node import Node

logger = logging.getLogger(__name__)


class Queue(Iterable[Node]):
    """Singly linked queue of strings.

    The queue owns every node reachable from its head. Head, tail and the
    element count are cached, so insertion at either end, removal at the head
    and ``size`` are O(1).
    """

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def sanity_check(self) -> None:
        """Check if the queue is sane"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        if self._head is None:
            assert self._tail is None
            assert self._size == 0, self._size
            return
        assert self._tail is not None
        assert self._tail.next is None
        count = 1
        current = self._head
        while current.next is not None:
            current = current.next
            count += 1
            assert count <= self._size, f"more than {self._size} nodes"
        assert current is self._tail
        assert count == self._size, f"{count} != {self._size}"

    @property
    def head(self) -> Optional[Node]:
        return self._head

    @property
    def tail(self) -> Optional[Node]:
        return self._tail

    @property
    def first(self) -> Optional[str]:
        """Time complexity: O(1)"""
        return None if self._head is None else self._head.value

    @property
    def last(self) -> Optional[str]:
        """Time complexity: O(1)"""
        return None if self._tail is None else self._tail.value

    def __iter__(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def values(self) -> Iterator[str]:
        for node in self:
            yield node.value

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        """Time complexity: O(1)"""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join(self.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.values())!r})"

    @staticmethod
    def _new_node(value: str) -> Node:
        if not isinstance(value, str):
            raise TypeError(
                f"Queue elements must be str, not {type(value).__name__}"
            )
        try:
            return Node(str(value))
        except MemoryError as e:
            raise AllocationFailure(
                f"Could not allocate a node for a string of length {len(value)}"
            ) from e

    def insert_head(self, value: str) -> Node:
        """Insert a copy of ``value`` before the current head.

        Raises:
            TypeError: If ``value`` is not a string.
            AllocationFailure: If the node could not be allocated. The queue is
                left unchanged.
        """
        node = self._new_node(value)
        logger.log(VERBOSE, QueueStep.INSERT_HEAD.value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def insert_tail(self, value: str) -> Node:
        """Insert a copy of ``value`` after the current tail.

        Raises:
            TypeError: If ``value`` is not a string.
            AllocationFailure: If the node could not be allocated. The queue is
                left unchanged.
        """
        node = self._new_node(value)
        logger.log(VERBOSE, QueueStep.INSERT_TAIL.value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def remove_head(self, bufsize: Optional[int] = None) -> Optional[str]:
        """Remove the head and return its value.

        With ``bufsize`` set, the value is delivered as if copied into a buffer
        of that capacity including a terminator: at most ``bufsize - 1``
        characters are returned, and a capacity of 0 delivers nothing (None).
        Truncation is silent.

        Raises:
            ValueError: If ``bufsize`` is negative.
            EmptyQueue: If there is nothing to remove.
        """
        if bufsize is not None and bufsize < 0:
            raise ValueError(f"bufsize must be >= 0, got {bufsize}")
        node = self._head
        if node is None:
            raise EmptyQueue()
        logger.log(VERBOSE, QueueStep.REMOVE_HEAD.value)
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1

        if bufsize is None:
            return node.value
        if bufsize == 0:
            return None
        return node.value[: bufsize - 1]

    def clear(self) -> None:
        """Unlink and drop every node. Time complexity: O(n)"""
        logger.debug("Clearing queue of %d elements", self._size)
        current = self._head
        while current is not None:
            next_node = current.next
            current.next = None
            current = next_node
        self._head = None
        self._tail = None
        self._size = 0

    def reverse(self) -> None:
        """Reverse the queue in place by relinking its nodes."""
        if self._size <= 1:
            return
        logger.log(VERBOSE, QueueStep.REVERSE.value)
        prev: Optional[Node] = None
        current = self._head
        while current is not None:
            next_node = current.next
            current.next = prev
            prev = current
            current = next_node
        # The old head was linked to None on the first step, so it is a
        # proper tail now.
        self._head, self._tail = self._tail, self._head

    def sort(self) -> None:
        """Sort the queue in ascending order in place.

        Merge sort over the nodes. Strings compare by code point, which for
        UTF-8 text is the same order as comparing the encoded bytes. Equal
        values keep their relative order.

        Time complexity: O(n log n), stack depth O(log n)
        """
        if self._size <= 1:
            return
        assert self._head is not None
        logger.debug("Sorting queue of %d elements", self._size)
        logger.log(VERBOSE, QueueStep.SORT.value)
        self._head, self._tail = self._merge_sort(self._head)

    @classmethod
    def _merge_sort(cls, head: Node) -> tuple[Node, Node]:
        """Sort the chain starting at ``head``, returning its head and tail."""
        if head.next is None:
            return head, head

        # Slow stops at the end of the first half once fast runs out.
        slow = head
        fast = head.next
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            assert slow.next is not None
            slow = slow.next
        right = slow.next
        assert right is not None
        slow.next = None
        logger.log(VERBOSE, QueueStep.SPLIT.value)

        left_head, left_tail = cls._merge_sort(head)
        right_head, right_tail = cls._merge_sort(right)
        return cls._merge(left_head, left_tail, right_head, right_tail)

    @staticmethod
    def _merge(
        left_head: Node, left_tail: Node, right_head: Node, right_tail: Node
    ) -> tuple[Node, Node]:
        """Merge two sorted chains, returning the head and tail of the result.

        On equal values the node from the left chain goes first.
        """
        logger.log(VERBOSE, QueueStep.MERGE.value)
        left: Optional[Node] = left_head
        right: Optional[Node] = right_head
        if right_head.value < left_head.value:
            head = right_head
            right = right_head.next
        else:
            head = left_head
            left = left_head.next

        current = head
        while left is not None and right is not None:
            if right.value < left.value:
                current.next = right
                right = right.next
            else:
                current.next = left
                left = left.next
            current = current.next

        if left is not None:
            current.next = left
            return head, left_tail
        assert right is not None
        current.next = right
        return head, right_tail
