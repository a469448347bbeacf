import itertools

import pytest

from config.settings import SimulationSettings
from src.simulation_layer.models import DecisionKind, ItemVariant, TransitMode
from src.simulation_layer.persona.agent import Agent
from src.simulation_layer.persona.agent_state import SimulationState
from src.simulation_layer.persona.cognitive_modules.decide import PurchaseDecideModule
from src.simulation_layer.persona.cognitive_modules.perceive import (
    PerceiveModule,
    ScriptedBinarySource,
)
from src.simulation_layer.scenario.store_trip_scenario import get_item
from src.simulation_layer.shopping import (
    DIRECTION_PROMPT,
    ShoppingChecklistStateMachine,
    ShoppingStatus,
    StepOutcome,
    normalize_direction,
)

from conftest import RecordingNarrator, ScriptedInput


def _machine(draws, answers=(), money=70.0, mode=TransitMode.BUS, narrator=None):
    agent = Agent()
    state = SimulationState(money=money, transit_mode=mode)
    purchase = PurchaseDecideModule(PerceiveModule(ScriptedBinarySource(draws)))
    machine = ShoppingChecklistStateMachine(
        purchase,
        agent,
        state,
        read_direction=ScriptedInput(answers),
        narrator=narrator,
        settings=SimulationSettings(),
    )
    return machine, agent, state


@pytest.mark.parametrize(
    "token, expected",
    [
        ("l", "left"),
        ("L", "left"),
        (" left ", "left"),
        ("r", "right"),
        ("RIGHT", "right"),
        ("s", "straight"),
        ("Straight", "straight"),
        ("", "invalid"),
        ("x", "invalid"),
        ("ls", "invalid"),
    ],
)
def test_normalize_direction(token, expected) -> None:
    assert normalize_direction(token) == expected


@pytest.mark.parametrize("order", list(itertools.permutations(["l", "r", "s"])))
def test_one_visit_per_section_in_any_order_completes(order) -> None:
    machine, _, state = _machine([0, 0, 0])

    for token in order:
        assert machine.status is ShoppingStatus.SHOPPING
        assert machine.step(token) is StepOutcome.PURCHASED

    assert machine.status is ShoppingStatus.DONE
    assert sorted(item.name for item in state.cart.items) == ["eggs", "lighter", "milk"]


def test_revisiting_a_section_never_buys_twice() -> None:
    narrator = RecordingNarrator()
    machine, agent, state = _machine([0], narrator=narrator)

    assert machine.step("l") is StepOutcome.PURCHASED
    assert machine.step("l") is StepOutcome.ALREADY_DONE
    assert machine.step("L") is StepOutcome.ALREADY_DONE

    assert [item.name for item in state.cart.items] == ["eggs"]
    assert machine.status is ShoppingStatus.SHOPPING
    purchases = [a for a in agent.action_sequence if a.kind is DecisionKind.PURCHASE]
    assert len(purchases) == 1
    assert narrator.names().count("section_already_done") == 2


def test_invalid_direction_changes_nothing() -> None:
    narrator = RecordingNarrator()
    machine, agent, state = _machine([], narrator=narrator)

    assert machine.step("up") is StepOutcome.INVALID

    assert len(state.cart) == 0
    assert agent.action_sequence == []
    assert state.checklist.remaining == ["eggs", "milk", "lighter"]
    assert narrator.calls == [("invalid_direction", "up")]


def test_run_prompts_until_checklist_is_complete() -> None:
    answers = ["x", "L", "l", "right", "", " S ", "never read"]
    narrator = RecordingNarrator()
    machine, _, state = _machine([0, 0, 0], answers=answers, narrator=narrator)

    receipt = machine.run()

    assert machine.read_direction.prompts == [DIRECTION_PROMPT] * 6
    assert machine.status is ShoppingStatus.DONE
    assert receipt.total == pytest.approx(23.1)
    assert narrator.names() == [
        "invalid_direction",
        "item_picked",
        "section_already_done",
        "item_picked",
        "invalid_direction",
        "item_picked",
        "extra_purchase",
    ]


def test_checkout_arithmetic() -> None:
    machine, _, state = _machine([], money=70.0)
    for name in ("eggs", "milk", "lighter"):
        state.cart.add(get_item(name, ItemVariant.BRAND_NAME))

    receipt = machine.checkout()

    assert receipt.subtotal == pytest.approx(22.0)
    assert receipt.tax == pytest.approx(1.10)
    assert receipt.total == pytest.approx(23.10)
    assert state.money == pytest.approx(46.9)
    assert machine.money_after_checkout == pytest.approx(46.9)


def test_energy_drink_bought_at_exactly_forty() -> None:
    machine, agent, state = _machine([], money=40.0)

    assert machine.buy_energy_drink() is True

    assert state.got_energy_drink is True
    assert state.money == pytest.approx(34.0)
    assert agent.history.has_action(DecisionKind.EXTRA_PURCHASE)


def test_energy_drink_skipped_below_forty() -> None:
    machine, agent, state = _machine([], money=39.5)

    assert machine.buy_energy_drink() is False

    assert state.got_energy_drink is False
    assert state.money == pytest.approx(39.5)
    assert not agent.history.has_action(DecisionKind.EXTRA_PURCHASE)


def test_run_skips_drink_when_checkout_leaves_too_little() -> None:
    machine, _, state = _machine([0, 0, 0], answers=["l", "r", "s"], money=60.0)

    machine.run()

    assert state.money == pytest.approx(36.9)
    assert state.got_energy_drink is False
