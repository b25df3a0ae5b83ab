"""Population management for evolutionary runs."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

import numpy as np
from numpy.random import Generator

from unievo.evolution.individual import Individual
from unievo.evolution.selection import Selection

logger = logging.getLogger(__name__)


class Population:
    """Fixed-size pool of individuals ranked by fitness."""

    def __init__(
        self,
        size: int,
        fitness: Callable[[float], float],
        init_lower_bound: float,
        init_upper_bound: float,
        rng: Generator | None = None,
    ) -> None:
        self.size = int(size)
        self.fitness = fitness
        self.rng = rng or np.random.default_rng()

        self.individuals: list[Individual] = [
            Individual.random(init_lower_bound, init_upper_bound, rng=self.rng)
            for _ in range(self.size)
        ]

    def replace(self, offspring: Sequence[Individual]) -> None:
        """Merge offspring into the pool and keep the fittest `size`."""
        merged = self.individuals + list(offspring)
        ranked = Selection.rank(merged, self.fitness)
        self.individuals = ranked[: self.size]
        logger.debug(
            "replace: merged %d individuals, kept %d, discarded %d",
            len(merged),
            len(self.individuals),
            len(merged) - len(self.individuals),
        )

    @property
    def best(self) -> Individual:
        """Return the top-ranked individual."""
        if not self.individuals:
            raise ValueError("population is empty")
        return self.individuals[0]

    def values(self) -> list[float]:
        """Return gene values in current order."""
        return [ind.value for ind in self.individuals]

    def fitness_scores(self) -> list[float]:
        """Return fitness scores in current order."""
        return [ind.fitness(self.fitness) for ind in self.individuals]

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self.individuals)
