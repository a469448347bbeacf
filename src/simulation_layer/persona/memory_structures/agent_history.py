"""
Agent history: ordered records of environments entered and actions taken.

Outcomes are tagged with the decision that produced them, so a membership
query such as "did the agent take a taxi out?" cannot be answered by an
unrelated decision that happened to resolve the same way.
"""

from typing import List, Optional

from src.simulation_layer.models import ActionOutcome, DecisionKind, Environment

from .base import MemoryStructure


class AgentHistory(MemoryStructure):
    """Append-only environment and action sequences."""

    def __init__(self):
        self.environments: List[Environment] = []
        self.actions: List[ActionOutcome] = []

    def add(self, content) -> None:
        if isinstance(content, Environment):
            self.add_environment(content)
        elif isinstance(content, ActionOutcome):
            self.add_action(content)
        else:
            raise TypeError(f"Cannot record {type(content).__name__} in agent history")

    def add_environment(self, env: Environment) -> List[Environment]:
        self.environments.append(env)
        return self.environments

    def add_action(self, outcome: ActionOutcome) -> List[ActionOutcome]:
        self.actions.append(outcome)
        return self.actions

    def retrieve(self, top_k: int = 5) -> List[ActionOutcome]:
        return list(reversed(self.actions[-top_k:]))

    def has_action(
        self,
        kind: DecisionKind,
        choice: Optional[str] = None,
        item: Optional[str] = None,
    ) -> bool:
        """True if an outcome of this kind (and choice/item, when given) was recorded."""
        for outcome in self.actions:
            if outcome.kind != kind:
                continue
            if choice is not None and outcome.choice != choice:
                continue
            if item is not None and outcome.item != item:
                continue
            return True
        return False

    def last_action(self, kind: DecisionKind) -> Optional[ActionOutcome]:
        for outcome in reversed(self.actions):
            if outcome.kind == kind:
                return outcome
        return None

    @property
    def current_environment(self) -> Optional[Environment]:
        return self.environments[-1] if self.environments else None
