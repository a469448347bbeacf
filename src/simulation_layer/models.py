"""
Shared data models for the simulation layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class StoreTripError(Exception):
    """Base class for store trip simulation errors."""


class DecisionSpecError(StoreTripError, ValueError):
    """Inputs and weights of a decision do not line up."""


class ChecklistError(StoreTripError, RuntimeError):
    """A purchase was attempted for an item already on the checklist."""


class Environment(str, Enum):
    HOME = "home"
    STREET = "street"
    STORE = "store"


class TransitMode(str, Enum):
    BUS = "bus"
    TAXI = "taxi"


class ItemVariant(str, Enum):
    LOCAL = "local"
    BRAND_NAME = "brand name"


class DecisionKind(str, Enum):
    TRANSIT_OUT = "transit_out"
    PURCHASE = "purchase"
    EXTRA_PURCHASE = "extra_purchase"
    TRANSIT_HOME = "transit_home"


@dataclass(frozen=True)
class Item:
    """A grocery item in one of its two variants."""

    name: str  # 'eggs', 'milk', 'lighter'
    variant: ItemVariant
    price: float


@dataclass(frozen=True)
class ActionOutcome:
    """Tagged record of a decision the agent acted on."""

    kind: DecisionKind
    choice: str  # 'bus', 'taxi', 'local', 'brand name', 'energy drink'
    item: Optional[str] = None


@dataclass(frozen=True)
class DecisionTrace:
    """Everything the narrator needs to render one perceptron evaluation."""

    labels: Tuple[str, ...]
    inputs: Tuple[float, ...]
    weights: Tuple[float, ...]
    bias: float
    threshold: float
    weighted_sum: float
    result: bool

    def input_value(self, label: str) -> float:
        return self.inputs[self.labels.index(label)]


@dataclass(frozen=True)
class Receipt:
    """Checkout totals for the shopping cart."""

    items: Tuple[Item, ...]
    subtotal: float
    tax: float
    total: float


@dataclass
class TripSummary:
    """End-of-run summary reported after the agent is back home."""

    starting_money: float
    final_money: float
    outbound_mode: TransitMode
    return_mode: TransitMode
    receipt: Receipt
    got_energy_drink: bool
    plenty_left: bool  # final money at or above the comfortable threshold
    environments: List[Environment] = field(default_factory=list)


@dataclass
class SimulationEvent:
    """A single simulation event log entry."""

    step: int
    environment: str
    kind: str  # DecisionKind value, or 'move' for environment transitions
    choice: Optional[str]
    item: Optional[str]
    weighted_sum: Optional[float]
    threshold: Optional[float]
    money: float
