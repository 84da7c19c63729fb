"""Node class for singly linked list."""

from typing import Optional


class Node:
    next: Optional["Node"]
    value: str

    def __init__(self, value: str, next: Optional["Node"] = None) -> None:
        self.next = next
        self.value = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
