"""
Decide module: the agent's three kinds of binary decisions.

- TransitDecideModule: bus or taxi, once for each leg of the trip
- PurchaseDecideModule: brand name or local goods, once per checklist item

Each decision samples fresh conditions, evaluates a fixed perceptron and then
applies the outcome to the agent and the simulation state.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .base import CognitiveModule
from .perceive import PerceiveModule
from .perceptron import DecisionSpec
from src.simulation_layer.models import (
    ActionOutcome,
    ChecklistError,
    DecisionKind,
    DecisionTrace,
    Environment,
    Item,
    ItemVariant,
    TransitMode,
)
from src.simulation_layer.persona.agent import Agent
from src.simulation_layer.persona.agent_state import SimulationState
from src.simulation_layer.scenario import store_trip_scenario as scenario

LOGGER = logging.getLogger(__name__)

# Factors that are always present and certain
CERTAIN_FACTORS = ("cost", "brand_available")
MONEY_LOW = "money_low"


@dataclass(frozen=True)
class TransitLeg:
    """Configuration of one bus-or-taxi decision."""

    name: str
    kind: DecisionKind
    labels: Tuple[str, ...]
    weights: Tuple[float, ...]
    bias: float
    threshold: float
    when_true: TransitMode
    when_false: TransitMode
    fares: Dict[TransitMode, float]

    @property
    def sampled_factors(self) -> Tuple[str, ...]:
        return tuple(
            label for label in self.labels
            if label not in CERTAIN_FACTORS and label != MONEY_LOW
        )


OUTBOUND_LEG = TransitLeg(
    name="outbound",
    kind=DecisionKind.TRANSIT_OUT,
    labels=scenario.OUTBOUND_LABELS,
    weights=scenario.OUTBOUND_WEIGHTS,
    bias=scenario.OUTBOUND_BIAS,
    threshold=scenario.OUTBOUND_THRESHOLD,
    when_true=TransitMode.TAXI,
    when_false=TransitMode.BUS,
    fares=scenario.OUTBOUND_FARES,
)

RETURN_LEG = TransitLeg(
    name="return",
    kind=DecisionKind.TRANSIT_HOME,
    labels=scenario.RETURN_LABELS,
    weights=scenario.RETURN_WEIGHTS,
    bias=scenario.RETURN_BIAS,
    threshold=scenario.RETURN_THRESHOLD,
    when_true=TransitMode.BUS,
    when_false=TransitMode.TAXI,
    fares=scenario.RETURN_FARES,
)


@dataclass(frozen=True)
class TransitDecision:
    leg: TransitLeg
    trace: DecisionTrace
    mode: TransitMode
    fare: float
    money_after: float


@dataclass(frozen=True)
class PurchaseDecision:
    trace: DecisionTrace
    item: Item
    money: float


class TransitDecideModule(CognitiveModule):
    """
    Decides how the agent travels one leg of the trip.
    """

    def __init__(
        self,
        perceive: PerceiveModule,
        leg: TransitLeg,
        money_low_threshold: float = 40.0,
    ):
        self.perceive = perceive
        self.leg = leg
        self.money_low_threshold = money_low_threshold

    def build_spec(self, state: SimulationState) -> DecisionSpec:
        """Sample this leg's conditions and configure the perceptron."""
        values = {"cost": 1}
        values.update(self.perceive.process(self.leg.sampled_factors))
        if MONEY_LOW in self.leg.labels:
            values[MONEY_LOW] = 1 if state.money < self.money_low_threshold else 0

        return DecisionSpec(
            labels=self.leg.labels,
            inputs=tuple(values[label] for label in self.leg.labels),
            weights=self.leg.weights,
            bias=self.leg.bias,
            threshold=self.leg.threshold,
        )

    def process(self, agent: Agent, state: SimulationState) -> TransitDecision:
        agent.add_environment(Environment.STREET)

        trace = self.build_spec(state).evaluate()
        mode = self.leg.when_true if trace.result else self.leg.when_false
        fare = self.leg.fares[mode]

        state.spend(fare)
        if self.leg.kind is DecisionKind.TRANSIT_OUT:
            state.transit_mode = mode
        else:
            state.return_mode = mode
        agent.add_action(ActionOutcome(kind=self.leg.kind, choice=mode.value))

        LOGGER.debug(
            "transit_decided",
            extra={
                "leg": self.leg.name,
                "inputs": trace.inputs,
                "weighted_sum": trace.weighted_sum,
                "mode": mode.value,
                "money": state.money,
            },
        )
        return TransitDecision(
            leg=self.leg, trace=trace, mode=mode, fare=fare, money_after=state.money
        )


class PurchaseDecideModule(CognitiveModule):
    """
    Decides between the brand name and local variant of a checklist item.

    Brand name items are always in stock; local goods may or may not be.
    Arriving by taxi makes the agent more careful with money.
    """

    def __init__(self, perceive: PerceiveModule):
        self.perceive = perceive

    def decide(
        self, item_name: str, transit_mode: Optional[TransitMode]
    ) -> Tuple[Item, DecisionTrace]:
        """Sample local availability and pick a variant. No state is touched."""
        if transit_mode is None:
            raise ValueError("Spending bias needs the mode the agent arrived by")

        values = {"cost": 1, "brand_available": 1}
        values.update(self.perceive.process(["local_available"]))

        spec = DecisionSpec(
            labels=scenario.PURCHASE_LABELS,
            inputs=tuple(values[label] for label in scenario.PURCHASE_LABELS),
            weights=scenario.PURCHASE_WEIGHTS,
            bias=scenario.SPENDING_BIAS[transit_mode],
            threshold=scenario.PURCHASE_THRESHOLD,
        )
        trace = spec.evaluate()
        variant = ItemVariant.BRAND_NAME if trace.result else ItemVariant.LOCAL
        return scenario.get_item(item_name, variant), trace

    def process(self, item_name: str, agent: Agent, state: SimulationState) -> PurchaseDecision:
        if state.checklist.is_satisfied(item_name):
            raise ChecklistError(f"Already bought {item_name}")

        item, trace = self.decide(item_name, state.transit_mode)
        state.cart.add(item)
        state.checklist.mark(item_name)
        agent.add_action(
            ActionOutcome(kind=DecisionKind.PURCHASE, choice=item.variant.value, item=item_name)
        )

        LOGGER.debug(
            "item_picked",
            extra={
                "item": item_name,
                "variant": item.variant.value,
                "weighted_sum": trace.weighted_sum,
            },
        )
        return PurchaseDecision(trace=trace, item=item, money=state.money)
