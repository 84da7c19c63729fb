"""Errors raised by queue operations."""


class QueueError(Exception):
    """QueueError"""


class InvalidHandle(QueueError):
    """Operation invoked without a queue"""

    def __init__(self, operation: str):
        super().__init__(f"{operation}: no queue")
        self.operation = operation


class AllocationFailure(QueueError):
    """A node or its value could not be allocated"""

    def __init__(self, message: str):
        super().__init__(message)


class EmptyQueue(QueueError):
    """Removal attempted on a queue with zero elements"""

    def __init__(self) -> None:
        super().__init__("Queue is empty")
