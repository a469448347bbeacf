"""
Agent module: the single shopper whose trip is simulated.
"""

from dataclasses import dataclass, field
from typing import List

from src.simulation_layer.models import ActionOutcome, Environment
from src.simulation_layer.persona.memory_structures import AgentHistory


@dataclass
class Agent:
    """
    The shopper. Perceives environments and records the actions it takes.
    Starts at home.
    """

    name: str = "shopper"
    history: AgentHistory = field(default_factory=AgentHistory)

    def __post_init__(self):
        if not self.history.environments:
            self.history.add_environment(Environment.HOME)

    def add_environment(self, env: Environment) -> List[Environment]:
        return self.history.add_environment(env)

    def add_action(self, outcome: ActionOutcome) -> List[ActionOutcome]:
        return self.history.add_action(outcome)

    @property
    def environment_sequence(self) -> List[Environment]:
        return self.history.environments

    @property
    def action_sequence(self) -> List[ActionOutcome]:
        return self.history.actions
