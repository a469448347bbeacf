"""
Store trip scenario setup.
Fixed perceptron weights, fares, store layout and item prices.

The weights are not learned: every decision in a run uses these constants.
"""

from typing import Dict, Tuple

from src.simulation_layer.models import Item, ItemVariant, TransitMode


# Outbound leg: should I hail a taxi (True) or take the bus (False)?
OUTBOUND_LABELS = ("cost", "bad_weather", "heavy_traffic", "bus_crowding")
OUTBOUND_WEIGHTS = (0.7, 0.5, 0.4, 0.3)
OUTBOUND_BIAS = -0.2  # preference for the bus
OUTBOUND_THRESHOLD = 1.5

# Return leg: should I take the bus (True) or a taxi (False)?
RETURN_LABELS = ("cost", "bad_weather", "heavy_traffic", "bus_crowding", "money_low")
RETURN_WEIGHTS = (0.7, -0.5, 0.6, -0.3, 0.4)
RETURN_BIAS = -0.2  # preference for a taxi with grocery bags
RETURN_THRESHOLD = 1.3

# In store: brand name (True) or local goods (False)?
PURCHASE_LABELS = ("cost", "local_available", "brand_available")
PURCHASE_WEIGHTS = (0.6, -0.3, 0.6)
PURCHASE_THRESHOLD = 1.0
SPENDING_BIAS: Dict[TransitMode, float] = {
    TransitMode.TAXI: -0.2,  # spent more getting here, lean towards local goods
    TransitMode.BUS: 0.0,
}

OUTBOUND_FARES: Dict[TransitMode, float] = {
    TransitMode.BUS: 5.0,
    TransitMode.TAXI: 10.0,
}

# A closed road adds a mile to the taxi ride home
RETURN_FARES: Dict[TransitMode, float] = {
    TransitMode.BUS: 5.0,
    TransitMode.TAXI: 11.0,
}

# direction -> item found in that section
STORE_SECTIONS: Dict[str, str] = {
    "left": "eggs",
    "right": "milk",
    "straight": "lighter",
}

DIRECTION_ALIASES: Dict[str, str] = {
    "l": "left",
    "left": "left",
    "r": "right",
    "right": "right",
    "s": "straight",
    "straight": "straight",
}

# item -> (local price, brand name price)
ITEM_PRICES: Dict[str, Tuple[float, float]] = {
    "eggs": (6.0, 8.0),
    "milk": (7.0, 9.0),
    "lighter": (3.0, 5.0),
}

ENERGY_DRINK = "energy drink"


def get_item(name: str, variant: ItemVariant) -> Item:
    """Look up the fixed-price variant of a catalog item."""
    local_price, brand_price = ITEM_PRICES[name]
    price = brand_price if variant is ItemVariant.BRAND_NAME else local_price
    return Item(name=name, variant=variant, price=price)


def checklist_items() -> Tuple[str, ...]:
    """Items the agent must buy, in store-section order."""
    return tuple(STORE_SECTIONS.values())
