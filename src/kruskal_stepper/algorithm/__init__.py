"""Kruskal step engine and its disjoint-set.

This package provides:
- DisjointSet (union by rank) for cycle detection
- KruskalStepper, the step-at-a-time engine
- AutoPlayer, the timer-driven driver
"""

from kruskal_stepper.algorithm.autoplay import AutoPlayer
from kruskal_stepper.algorithm.stepper import (
    KruskalStepper,
    StepAction,
    StepRecord,
    StepState,
)
from kruskal_stepper.algorithm.union_find import DisjointSet

__all__ = [
    "AutoPlayer",
    "DisjointSet",
    "KruskalStepper",
    "StepAction",
    "StepRecord",
    "StepState",
]
