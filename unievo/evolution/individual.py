"""Scalar individual for evolutionary runs."""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.random import Generator


class Individual:
    """Candidate solution holding a single real-valued gene."""

    def __init__(self, value: float) -> None:
        self.value = float(value)

    @classmethod
    def random(
        cls,
        lower_bound: float,
        upper_bound: float,
        rng: Generator | None = None,
    ) -> "Individual":
        """Sample a value uniformly from [lower_bound, upper_bound)."""

        generator = rng or np.random.default_rng()
        return cls(generator.uniform(lower_bound, upper_bound))

    def pair(self, other: "Individual", alpha: float) -> "Individual":
        """Blend two parents into a child weighted by alpha.

        The child value is not clamped; only mutation enforces bounds.
        """
        return Individual(self.value * alpha + other.value * (1.0 - alpha))

    def mutate(
        self,
        lower_bound: float,
        upper_bound: float,
        rate: float,
        rng: Generator | None = None,
    ) -> None:
        """Resample the value from N(0, rate) and clamp it into bounds.

        The previous value is discarded, not perturbed.
        """

        generator = rng or np.random.default_rng()
        sample = generator.normal(0.0, rate)
        self.value = float(np.clip(sample, lower_bound, upper_bound))

    def fitness(self, fn: Callable[[float], float]) -> float:
        """Evaluate a fitness function on this individual's value."""
        return float(fn(self.value))

    def __repr__(self) -> str:
        return f"Individual(value={self.value!r})"
