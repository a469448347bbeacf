"""
In-store shopping loop.

The agent stands in the store and picks a direction. Each section holds one
checklist item; the agent keeps choosing until every item is in the cart,
then checks out and, if there is enough money left, grabs an energy drink.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from config.settings import SimulationSettings
from src.simulation_layer.models import ActionOutcome, DecisionKind, Receipt
from src.simulation_layer.narration import Narrator
from src.simulation_layer.persona.agent import Agent
from src.simulation_layer.persona.agent_state import SimulationState
from src.simulation_layer.persona.cognitive_modules.decide import (
    PurchaseDecideModule,
    PurchaseDecision,
)
from src.simulation_layer.scenario.store_trip_scenario import (
    DIRECTION_ALIASES,
    ENERGY_DRINK,
    STORE_SECTIONS,
)

LOGGER = logging.getLogger(__name__)

DIRECTION_PROMPT = "Choose l for left, r for right, s for straight ahead> "
INVALID = "invalid"


class ShoppingStatus(str, Enum):
    SHOPPING = "shopping"
    DONE = "done"


class StepOutcome(str, Enum):
    PURCHASED = "purchased"
    ALREADY_DONE = "already_done"
    INVALID = "invalid"


def normalize_direction(token: str) -> str:
    """Map raw input to 'left', 'right', 'straight' or 'invalid'."""
    return DIRECTION_ALIASES.get(token.strip().lower(), INVALID)


class ShoppingChecklistStateMachine:
    """
    Drives the direction prompts until the checklist is complete.

    read_direction is called with the prompt text and must return one line of
    input. It may block; the loop only ends when all sections are done.
    """

    def __init__(
        self,
        purchase: PurchaseDecideModule,
        agent: Agent,
        state: SimulationState,
        read_direction: Callable[[str], str] = input,
        narrator: Optional[Narrator] = None,
        settings: Optional[SimulationSettings] = None,
    ):
        self.purchase = purchase
        self.agent = agent
        self.state = state
        self.read_direction = read_direction
        self.narrator = narrator or Narrator()
        self.settings = settings or SimulationSettings()
        self.receipt: Optional[Receipt] = None
        self.decisions: List[PurchaseDecision] = []
        self.money_after_checkout: Optional[float] = None

    @property
    def status(self) -> ShoppingStatus:
        if self.state.checklist.complete:
            return ShoppingStatus.DONE
        return ShoppingStatus.SHOPPING

    def step(self, token: str) -> StepOutcome:
        """Handle one direction choice."""
        direction = normalize_direction(token)
        item_name = STORE_SECTIONS.get(direction)

        if item_name is not None and self.state.checklist.is_satisfied(item_name):
            self.narrator.section_already_done(direction, item_name)
            return StepOutcome.ALREADY_DONE

        if item_name is None:
            LOGGER.debug("invalid_direction", extra={"token": token})
            self.narrator.invalid_direction(token)
            return StepOutcome.INVALID

        decision = self.purchase.process(item_name, self.agent, self.state)
        self.decisions.append(decision)
        self.narrator.item_picked(decision.trace, decision.item)
        return StepOutcome.PURCHASED

    def run(self) -> Receipt:
        """Shop until done, then check out and consider the energy drink."""
        while self.status is ShoppingStatus.SHOPPING:
            self.narrator.awaiting_direction(self.state.checklist.remaining)
            self.step(self.read_direction(DIRECTION_PROMPT))

        receipt = self.checkout()
        self.buy_energy_drink()
        return receipt

    def checkout(self) -> Receipt:
        """Pay for the cart plus sales tax."""
        subtotal = self.state.cart.subtotal
        tax = subtotal * self.settings.sales_tax_rate
        total = subtotal + tax
        self.state.spend(total)
        self.money_after_checkout = self.state.money

        self.receipt = Receipt(
            items=tuple(self.state.cart.items),
            subtotal=subtotal,
            tax=tax,
            total=total,
        )
        LOGGER.debug("checked_out", extra={"total": total, "money": self.state.money})
        self.narrator.checked_out(self.receipt, self.state.money)
        return self.receipt

    def buy_energy_drink(self) -> bool:
        """Buy the drink whenever the wallet can spare it."""
        price = self.settings.energy_drink_price
        if self.state.money < self.settings.energy_drink_min_money:
            self.narrator.extra_purchase(False, price, self.state.money)
            return False

        self.state.spend(price)
        self.state.got_energy_drink = True
        self.agent.add_action(ActionOutcome(kind=DecisionKind.EXTRA_PURCHASE, choice=ENERGY_DRINK))
        self.narrator.extra_purchase(True, price, self.state.money)
        return True
