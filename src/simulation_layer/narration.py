"""
Narration sink.

The simulation never prints. It reports each outcome to a Narrator, which is
free to render it or ignore it. The base class ignores everything, so it
doubles as the silent narrator.
"""

from typing import Optional

from src.simulation_layer.models import DecisionTrace, Item, Receipt, TripSummary


class Narrator:
    """Receives simulation outcomes. Every hook is a no-op by default."""

    def trip_started(self, money: float) -> None:
        pass

    def transit_decided(self, leg: str, trace: DecisionTrace, mode: str, fare: float, money: float) -> None:
        pass

    def arrived_at_store(self) -> None:
        pass

    def awaiting_direction(self, remaining: list) -> None:
        pass

    def item_picked(self, trace: DecisionTrace, item: Item) -> None:
        pass

    def section_already_done(self, direction: str, item_name: str) -> None:
        pass

    def invalid_direction(self, token: str) -> None:
        pass

    def checked_out(self, receipt: Receipt, money: float) -> None:
        pass

    def extra_purchase(self, bought: bool, price: float, money: float) -> None:
        pass

    def trip_finished(self, summary: TripSummary) -> None:
        pass


class SilentNarrator(Narrator):
    """Explicit name for the do-nothing narrator."""


def describe(value: Optional[float]) -> str:
    """Two significant digits, trailing zeros kept (0.50, 1.7, 1.0)."""
    if value is None:
        return "-"
    return f"{value:#.2g}"
