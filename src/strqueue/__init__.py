"""Queue of strings backed by a singly linked list."""

from .api import (
    q_free,
    q_insert_head,
    q_insert_tail,
    q_new,
    q_remove_head,
    q_reverse,
    q_size,
    q_sort,
)
from .collections import Node, Queue
from .errors import AllocationFailure, EmptyQueue, InvalidHandle, QueueError

__all__ = [
    "AllocationFailure",
    "EmptyQueue",
    "InvalidHandle",
    "Node",
    "Queue",
    "QueueError",
    "q_free",
    "q_insert_head",
    "q_insert_tail",
    "q_new",
    "q_remove_head",
    "q_reverse",
    "q_size",
    "q_sort",
]
