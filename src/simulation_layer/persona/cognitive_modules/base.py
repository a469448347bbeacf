"""
Abstract base class for cognitive modules.
Each module is one stage of the Perceive -> Decide cycle that the agent
runs at every decision point of the trip.
"""

from abc import ABC, abstractmethod
from typing import Any


class CognitiveModule(ABC):
    """Base class for all cognitive modules."""

    @abstractmethod
    def process(self, *args, **kwargs) -> Any:
        """Execute this cognitive step and return its output."""
        ...
