"""
Simulation state for one trip.
Owns the wallet, transit mode, checklist and cart that the decisions mutate.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from src.simulation_layer.models import ChecklistError, Item, TransitMode
from src.simulation_layer.scenario.store_trip_scenario import checklist_items


@dataclass
class Checklist:
    """Items the agent has to get. Flags only ever flip from False to True."""

    items: Tuple[str, ...] = field(default_factory=checklist_items)
    flags: Dict[str, bool] = field(default_factory=dict)

    def __post_init__(self):
        for name in self.items:
            self.flags.setdefault(name, False)

    def is_satisfied(self, item_name: str) -> bool:
        return self.flags[item_name]

    def mark(self, item_name: str) -> None:
        if item_name not in self.flags:
            raise KeyError(item_name)
        if self.flags[item_name]:
            raise ChecklistError(f"{item_name} is already on the checklist")
        self.flags[item_name] = True

    @property
    def complete(self) -> bool:
        return all(self.flags.values())

    @property
    def remaining(self) -> List[str]:
        return [name for name in self.items if not self.flags[name]]


@dataclass
class ShoppingCart:
    """Items picked up in the store, in order."""

    items: List[Item] = field(default_factory=list)

    def add(self, item: Item) -> None:
        self.items.append(item)

    @property
    def subtotal(self) -> float:
        subtotal = 0.0
        for item in self.items:
            subtotal += item.price
        return subtotal

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class SimulationState:
    """
    Mutable state of the trip.
    Money is only ever debited.
    """

    money: float
    transit_mode: Optional[TransitMode] = None  # outbound mode, drives store spending bias
    return_mode: Optional[TransitMode] = None
    checklist: Checklist = field(default_factory=Checklist)
    cart: ShoppingCart = field(default_factory=ShoppingCart)
    got_energy_drink: bool = False

    def spend(self, amount: float) -> float:
        if amount < 0:
            raise ValueError(f"Cannot spend a negative amount: {amount}")
        self.money -= amount
        return self.money
