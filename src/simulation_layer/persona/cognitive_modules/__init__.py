from .decide import PurchaseDecideModule, TransitDecideModule
from .perceive import PerceiveModule, RandomBinarySource, ScriptedBinarySource
from .perceptron import DecisionSpec, evaluate, weighted_sum

__all__ = [
    "DecisionSpec",
    "evaluate",
    "weighted_sum",
    "PerceiveModule",
    "RandomBinarySource",
    "ScriptedBinarySource",
    "TransitDecideModule",
    "PurchaseDecideModule",
]
