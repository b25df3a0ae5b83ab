"""Fitness functions for scalar optimization."""

from __future__ import annotations


def quintic_fitness(x: float) -> float:
    """Quintic with roots at 0..4; local maxima near 1.456 and 3.644."""

    return -x * (x - 1.0) * (x - 2.0) * (x - 3.0) * (x - 4.0)
