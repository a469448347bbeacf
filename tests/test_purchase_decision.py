import pytest

from src.simulation_layer.models import ChecklistError, DecisionKind, ItemVariant, TransitMode
from src.simulation_layer.persona.agent import Agent
from src.simulation_layer.persona.agent_state import SimulationState
from src.simulation_layer.persona.cognitive_modules.decide import PurchaseDecideModule
from src.simulation_layer.persona.cognitive_modules.perceive import (
    PerceiveModule,
    ScriptedBinarySource,
)


def _module(draws):
    return PurchaseDecideModule(PerceiveModule(ScriptedBinarySource(draws)))


@pytest.mark.parametrize(
    "item_name, price",
    [("eggs", 8.0), ("milk", 9.0), ("lighter", 5.0)],
)
def test_bus_without_local_goods_buys_brand_name(item_name, price) -> None:
    item, trace = _module([0]).decide(item_name, TransitMode.BUS)

    assert trace.weighted_sum == pytest.approx(1.2)
    assert item.variant is ItemVariant.BRAND_NAME
    assert item.price == price


def test_taxi_with_local_goods_buys_local() -> None:
    item, trace = _module([1]).decide("milk", TransitMode.TAXI)

    assert trace.bias == -0.2
    assert trace.weighted_sum == pytest.approx(0.7)
    assert item.variant is ItemVariant.LOCAL
    assert item.price == 7.0


def test_bus_with_local_goods_buys_local() -> None:
    item, trace = _module([1]).decide("lighter", TransitMode.BUS)

    assert trace.weighted_sum == pytest.approx(0.9)
    assert item.variant is ItemVariant.LOCAL
    assert item.price == 3.0


def test_process_updates_cart_checklist_and_history() -> None:
    agent, state = Agent(), SimulationState(money=70.0, transit_mode=TransitMode.BUS)

    decision = _module([0]).process("eggs", agent, state)

    assert state.cart.items == [decision.item]
    assert state.checklist.is_satisfied("eggs")
    assert not state.checklist.is_satisfied("milk")
    assert agent.history.has_action(DecisionKind.PURCHASE, item="eggs", choice="brand name")
    assert state.money == 70.0


def test_buying_the_same_item_twice_is_a_contract_violation() -> None:
    agent, state = Agent(), SimulationState(money=70.0, transit_mode=TransitMode.BUS)
    module = _module([0, 0])
    module.process("eggs", agent, state)

    with pytest.raises(ChecklistError):
        module.process("eggs", agent, state)
    assert len(state.cart) == 1


def test_spending_bias_needs_a_transit_mode() -> None:
    with pytest.raises(ValueError):
        _module([0]).decide("eggs", None)
