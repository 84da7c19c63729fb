"""Collections"""

from .node import Node
from .queue import Queue

__all__ = ["Node", "Queue"]
