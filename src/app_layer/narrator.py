"""
Console narrator: tells the trip in the agent's own words.
"""

from typing import Callable

from src.simulation_layer.models import DecisionTrace, Item, Receipt, TripSummary
from src.simulation_layer.narration import Narrator, describe
from src.simulation_layer.scenario.store_trip_scenario import OUTBOUND_FARES, RETURN_FARES

# factor -> (text when 0, text when 1)
CONDITION_TEXT = {
    "bad_weather": ("It's nice outside today!", "The weather looks awful today..."),
    "heavy_traffic": ("Traffic flow is normal for now.", "There is a lot of traffic on the roads..."),
    "bus_crowding": ("Plenty of space on the bus.", "There is a lot of people on the bus."),
    "money_low": (None, "Don't have much cash left..."),
}

LEG_TEXT = {
    "outbound": {
        "intro": "I need to get to the store.",
        "fares": OUTBOUND_FARES,
        "threshold": "Threshold to take a taxi is {threshold}. Current conditions: {value}",
        "bus": "I'll take the bus.",
        "taxi": "I have to hail a taxi.",
    },
    "return": {
        "intro": "Time to head home.",
        "fares": RETURN_FARES,
        "threshold": "Threshold to take a bus is {threshold}. Current conditions: {value}",
        "bus": "Got to take the bus.",
        "taxi": "I'll take the taxi.",
    },
}


def _money(value: float) -> str:
    return f"${value:.2f}"


class ConsoleNarrator(Narrator):
    """Prints each outcome as it happens."""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def trip_started(self, money: float) -> None:
        self.write(f"\nStarting money: {_money(money)}\n")

    def transit_decided(self, leg: str, trace: DecisionTrace, mode: str, fare: float, money: float) -> None:
        text = LEG_TEXT[leg]
        fares = text["fares"]
        self.write(text["intro"] + "\n")
        self.write(
            f"It's cheaper to take the bus ({_money(min(fares.values()))}) "
            f"than to hail a taxi ({_money(max(fares.values()))})."
        )
        for label, value in zip(trace.labels, trace.inputs):
            if label not in CONDITION_TEXT:
                continue
            line = CONDITION_TEXT[label][int(value)]
            if line:
                self.write(line)
        self.write(
            text["threshold"].format(
                threshold=trace.threshold, value=describe(trace.weighted_sum)
            )
        )
        self.write(text[mode])
        self.write(f"Current money: {_money(money)}\n")

    def arrived_at_store(self) -> None:
        self.write("I'm at the store.\n")

    def awaiting_direction(self, remaining: list) -> None:
        self.write("The eggs are on the left side of the store.")
        self.write("The milk is on the right side of the store.")
        self.write("And the home supplies is straight ahead. I can buy lighters there.")
        self.write("Do I want to go left, right, or straight ahead?\n")

    def item_picked(self, trace: DecisionTrace, item: Item) -> None:
        local = int(trace.input_value("local_available"))
        self.write(f"Are there local goods available? 1 for yes, 0 for no: {local}")
        self.write(
            f"Threshold to buy brand name is {trace.threshold}. "
            f"Current value: {describe(trace.weighted_sum)}"
        )
        if trace.result:
            self.write(f"Going to get brand name {item.name}.\n")
        else:
            self.write(f"I'm buying local {item.name}.\n")

    def section_already_done(self, direction: str, item_name: str) -> None:
        self.write("I already have what I need from here. Better backtrack.\n")

    def invalid_direction(self, token: str) -> None:
        self.write("ERROR: Invalid input. Try again.\n")

    def checked_out(self, receipt: Receipt, money: float) -> None:
        self.write(f"Total price of groceries: {_money(receipt.total)}")
        self.write(f"Money left: {_money(money)}")

    def extra_purchase(self, bought: bool, price: float, money: float) -> None:
        if not bought:
            self.write("Ugh, if I get a drink, I won't have enough money for other things...\n")
            return
        self.write("I'll get a drink.")
        self.write(f"Money left: {_money(money)}\n")

    def trip_finished(self, summary: TripSummary) -> None:
        if summary.return_mode.value == "bus":
            self.write("I would have rather took a cab but I got to save what money I have.\n")
        else:
            self.write("Smooth ride back home...\n")

        if summary.plenty_left:
            self.write("I got everything I needed and still have plenty of money left.")
        else:
            self.write("I got everything I needed but I have little money left.")

        if summary.got_energy_drink and summary.plenty_left:
            self.write("And I got an energy drink! Nice!\n")
        elif summary.got_energy_drink:
            self.write("But at least I got an energy drink.\n")
        elif summary.plenty_left:
            self.write("But no energy drink.\n")
        else:
            self.write("And I couldn't get a energy drink without spending too much...\n")
