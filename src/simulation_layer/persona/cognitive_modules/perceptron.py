"""
Weighted threshold decision ("perceptron").

The agent's binary choices are all made the same way: multiply each input by
its weight, add the products up, add the bias and compare the result against a
threshold. Inputs are 0/1 flags, except for certain factors like cost which
are always 1.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from src.simulation_layer.models import DecisionSpecError, DecisionTrace


def _check_lengths(inputs: Sequence[float], weights: Sequence[float]) -> None:
    if not inputs or not weights:
        raise DecisionSpecError("Decision needs at least one input and weight")
    if len(inputs) != len(weights):
        raise DecisionSpecError(
            f"Got {len(inputs)} inputs but {len(weights)} weights"
        )


def weighted_sum(inputs: Sequence[float], weights: Sequence[float], bias: float) -> float:
    """Sum of inputs times weights, with the bias added last."""
    _check_lengths(inputs, weights)
    total = 0.0
    for value, weight in zip(inputs, weights):
        total += value * weight
    return total + bias


def evaluate(
    inputs: Sequence[float],
    weights: Sequence[float],
    bias: float,
    threshold: float,
) -> bool:
    """True when the weighted sum reaches the threshold."""
    return weighted_sum(inputs, weights, bias) >= threshold


@dataclass(frozen=True)
class DecisionSpec:
    """
    One configured decision: labelled inputs, their weights, bias and threshold.
    Built fresh for every decision; validated on construction.
    """

    labels: Tuple[str, ...]
    inputs: Tuple[float, ...]
    weights: Tuple[float, ...]
    bias: float
    threshold: float

    def __post_init__(self):
        _check_lengths(self.inputs, self.weights)
        if len(self.labels) != len(self.inputs):
            raise DecisionSpecError(
                f"Got {len(self.labels)} labels for {len(self.inputs)} inputs"
            )

    def evaluate(self) -> DecisionTrace:
        total = weighted_sum(self.inputs, self.weights, self.bias)
        return DecisionTrace(
            labels=self.labels,
            inputs=self.inputs,
            weights=self.weights,
            bias=self.bias,
            threshold=self.threshold,
            weighted_sum=total,
            result=total >= self.threshold,
        )
