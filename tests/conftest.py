from __future__ import annotations

from typing import Iterable, List

import pytest

from config import reset_settings
from config.settings import SimulationSettings
from src.simulation_layer.narration import Narrator

SIM_ENV_VARS = [
    "SIM_STARTING_MONEY",
    "SIM_SALES_TAX_RATE",
    "SIM_ENERGY_DRINK_PRICE",
    "SIM_ENERGY_DRINK_MIN_MONEY",
    "SIM_MONEY_LOW_THRESHOLD",
    "SIM_COMFORTABLE_MONEY_THRESHOLD",
    "SIM_SEED",
    "LOG_LEVEL",
    "PATH_PROJECT_ROOT",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    for name in SIM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sim_settings() -> SimulationSettings:
    return SimulationSettings()


class ScriptedInput:
    """Feeds direction answers one line at a time and remembers the prompts."""

    def __init__(self, answers: Iterable[str]):
        self._answers = iter(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("no more scripted input") from None


class RecordingNarrator(Narrator):
    """Keeps the name of every hook called, in order."""

    def __init__(self):
        self.calls: List[tuple] = []

    def transit_decided(self, leg, trace, mode, fare, money):
        self.calls.append(("transit_decided", leg, mode))

    def item_picked(self, trace, item):
        self.calls.append(("item_picked", item.name, item.variant.value))

    def section_already_done(self, direction, item_name):
        self.calls.append(("section_already_done", direction, item_name))

    def invalid_direction(self, token):
        self.calls.append(("invalid_direction", token))

    def extra_purchase(self, bought, price, money):
        self.calls.append(("extra_purchase", bought))

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]
