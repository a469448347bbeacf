"""
Simulation engine for the store trip.
Runs the fixed sequence home -> street -> store -> street -> home and keeps
an event log of every decision and move.
"""

import logging
from dataclasses import asdict
from typing import Callable, List, Optional

import pandas as pd

from config import get_settings
from config.settings import SimulationSettings
from src.simulation_layer.models import (
    DecisionTrace,
    Environment,
    Receipt,
    SimulationEvent,
    TripSummary,
)
from src.simulation_layer.narration import Narrator
from src.simulation_layer.persona.agent import Agent
from src.simulation_layer.persona.agent_state import SimulationState
from src.simulation_layer.persona.cognitive_modules.decide import (
    OUTBOUND_LEG,
    RETURN_LEG,
    PurchaseDecideModule,
    TransitDecideModule,
)
from src.simulation_layer.persona.cognitive_modules.perceive import (
    BinarySource,
    PerceiveModule,
    RandomBinarySource,
)
from src.simulation_layer.shopping import ShoppingChecklistStateMachine

LOGGER = logging.getLogger(__name__)


class SimulationEngine:
    """
    Main simulation engine.
    One engine runs one trip for one agent.
    """

    def __init__(
        self,
        source: Optional[BinarySource] = None,
        read_direction: Callable[[str], str] = input,
        narrator: Optional[Narrator] = None,
        settings: Optional[SimulationSettings] = None,
        agent: Optional[Agent] = None,
    ):
        self.settings = settings or get_settings().simulation
        self.source = source or RandomBinarySource(self.settings.seed)
        self.read_direction = read_direction
        self.narrator = narrator or Narrator()
        self.agent = agent or Agent()
        self.state = SimulationState(money=self.settings.starting_money)
        self.events: List[SimulationEvent] = []

        perceive = PerceiveModule(self.source)
        self.outbound = TransitDecideModule(
            perceive, OUTBOUND_LEG, self.settings.money_low_threshold
        )
        self.homebound = TransitDecideModule(
            perceive, RETURN_LEG, self.settings.money_low_threshold
        )
        self.purchase = PurchaseDecideModule(perceive)

    def _log_event(
        self,
        kind: str,
        choice: Optional[str] = None,
        item: Optional[str] = None,
        trace: Optional[DecisionTrace] = None,
        money: Optional[float] = None,
    ) -> None:
        self.events.append(
            SimulationEvent(
                step=len(self.events) + 1,
                environment=self.agent.history.current_environment.value,
                kind=kind,
                choice=choice,
                item=item,
                weighted_sum=trace.weighted_sum if trace else None,
                threshold=trace.threshold if trace else None,
                money=self.state.money if money is None else money,
            )
        )

    def _move(self, env: Environment) -> None:
        self.agent.add_environment(env)
        self._log_event("move", choice=env.value)

    def travel_to_store(self):
        decision = self.outbound.process(self.agent, self.state)
        self._log_event(decision.leg.kind.value, decision.mode.value, trace=decision.trace)
        self.narrator.transit_decided(
            decision.leg.name, decision.trace, decision.mode.value, decision.fare, self.state.money
        )
        return decision

    def shop(self) -> Receipt:
        self._move(Environment.STORE)
        self.narrator.arrived_at_store()

        machine = ShoppingChecklistStateMachine(
            self.purchase,
            self.agent,
            self.state,
            read_direction=self.read_direction,
            narrator=self.narrator,
            settings=self.settings,
        )
        receipt = machine.run()

        for decision in machine.decisions:
            self._log_event(
                "purchase",
                decision.item.variant.value,
                decision.item.name,
                decision.trace,
                money=decision.money,
            )
        self._log_event("checkout", choice=f"{receipt.total:.2f}", money=machine.money_after_checkout)
        if self.state.got_energy_drink:
            self._log_event("extra_purchase", choice="energy drink")
        return receipt

    def travel_home(self):
        decision = self.homebound.process(self.agent, self.state)
        self._log_event(decision.leg.kind.value, decision.mode.value, trace=decision.trace)
        self.narrator.transit_decided(
            decision.leg.name, decision.trace, decision.mode.value, decision.fare, self.state.money
        )
        self._move(Environment.HOME)
        return decision

    def run(self) -> TripSummary:
        """Run the whole trip and return its summary."""
        LOGGER.info("trip_started", extra={"money": self.state.money})
        self.narrator.trip_started(self.state.money)

        outbound = self.travel_to_store()
        receipt = self.shop()
        homebound = self.travel_home()

        summary = TripSummary(
            starting_money=self.settings.starting_money,
            final_money=self.state.money,
            outbound_mode=outbound.mode,
            return_mode=homebound.mode,
            receipt=receipt,
            got_energy_drink=self.state.got_energy_drink,
            plenty_left=self.state.money >= self.settings.comfortable_money_threshold,
            environments=list(self.agent.environment_sequence),
        )
        LOGGER.info("trip_finished", extra={"money": summary.final_money})
        self.narrator.trip_finished(summary)
        return summary

    def events_frame(self) -> pd.DataFrame:
        """Event log as a DataFrame, one row per move or decision."""
        return pd.DataFrame([asdict(event) for event in self.events])
