from .agent_history import AgentHistory
from .base import MemoryStructure

__all__ = ["AgentHistory", "MemoryStructure"]
