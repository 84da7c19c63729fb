"""Handle-style queue functions.

Every function accepts ``None`` as the "no queue" handle and reports failure
through its return value instead of raising. Use :class:`Queue` directly for
the exception-raising interface.
"""

import logging
from typing import Optional

from .collections import Queue
from .errors import AllocationFailure, EmptyQueue, InvalidHandle

logger = logging.getLogger(__name__)


def q_new() -> Optional[Queue]:
    """Create an empty queue. Return None if it could not be allocated."""
    try:
        return Queue()
    except MemoryError:
        logger.warning("q_new: could not allocate queue")
        return None


def q_free(q: Optional[Queue]) -> None:
    """Free every element of the queue. No effect on None."""
    if q is None:
        return
    q.clear()


def _insert(q: Optional[Queue], s: str, at_head: bool) -> bool:
    operation = "q_insert_head" if at_head else "q_insert_tail"
    try:
        if q is None:
            raise InvalidHandle(operation)
        if at_head:
            q.insert_head(s)
        else:
            q.insert_tail(s)
    except (InvalidHandle, AllocationFailure) as e:
        logger.info("%s failed: %s", operation, e)
        return False
    return True


def q_insert_head(q: Optional[Queue], s: str) -> bool:
    """Insert a copy of ``s`` at the head.

    Return False if q is None or the element could not be allocated.
    """
    return _insert(q, s, at_head=True)


def q_insert_tail(q: Optional[Queue], s: str) -> bool:
    """Insert a copy of ``s`` at the tail.

    Return False if q is None or the element could not be allocated.
    """
    return _insert(q, s, at_head=False)


def q_remove_head(
    q: Optional[Queue], bufsize: Optional[int] = None
) -> tuple[bool, Optional[str]]:
    """Remove the head element.

    Return ``(False, None)`` if q is None or empty. Otherwise return True and
    the removed string, cut to at most ``bufsize - 1`` characters when
    ``bufsize`` is given (None when ``bufsize`` is 0).
    """
    try:
        if q is None:
            raise InvalidHandle("q_remove_head")
        return True, q.remove_head(bufsize)
    except (InvalidHandle, EmptyQueue) as e:
        logger.info("q_remove_head failed: %s", e)
        return False, None


def q_size(q: Optional[Queue]) -> int:
    """Return the number of elements, 0 if q is None or empty."""
    if q is None:
        return 0
    return q.size()


def q_reverse(q: Optional[Queue]) -> None:
    """Reverse the elements in place. No effect if q is None or empty."""
    if q is None:
        return
    q.reverse()


def q_sort(q: Optional[Queue]) -> None:
    """Sort the elements in ascending order. No effect if q is None or empty."""
    if q is None:
        return
    q.sort()


__all__ = [
    "q_free",
    "q_insert_head",
    "q_insert_tail",
    "q_new",
    "q_remove_head",
    "q_reverse",
    "q_size",
    "q_sort",
]
