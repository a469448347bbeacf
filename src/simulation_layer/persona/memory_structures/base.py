"""
Abstract base for memory structures.
Memories are append-only; nothing is ever removed during a run.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class MemoryStructure(ABC):
    """Base class for agent memory systems."""

    @abstractmethod
    def add(self, content: Any) -> None:
        """Store a new memory entry."""
        ...

    @abstractmethod
    def retrieve(self, top_k: int = 5) -> List[Any]:
        """Return the most recent entries, newest first."""
        ...
