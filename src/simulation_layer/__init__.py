"""
Simulation Layer - the agent, its decisions and the trip loop.

Provides:
- SimulationEngine: runs home -> store -> home for one agent
- ShoppingChecklistStateMachine: the in-store navigation loop
- Narrator: sink for outcomes the engine reports
"""

from src.simulation_layer.engine import SimulationEngine
from src.simulation_layer.narration import Narrator, SilentNarrator
from src.simulation_layer.shopping import ShoppingChecklistStateMachine

__all__ = [
    "SimulationEngine",
    "ShoppingChecklistStateMachine",
    "Narrator",
    "SilentNarrator",
]
