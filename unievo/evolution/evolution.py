"""Generational step tying recombination, mutation and survivor selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import numpy as np
from numpy.random import Generator

from unievo.config import Config
from unievo.evolution.individual import Individual
from unievo.evolution.population import Population
from unievo.evolution.selection import Selection

if TYPE_CHECKING:
    from unievo.monitoring.evolution_monitor import EvolutionMonitor

logger = logging.getLogger(__name__)


class Evolution:
    """Owns a population and advances it one generation per step."""

    def __init__(
        self,
        fitness: Callable[[float], float],
        pool_size: int,
        n_offsprings: int,
        pair_alpha: float,
        mutate_lower_bound: float,
        mutate_upper_bound: float,
        mutate_rate: float,
        init_lower_bound: float,
        init_upper_bound: float,
        rng: Generator | None = None,
    ) -> None:
        self.rng = rng or np.random.default_rng()
        self.pool = Population(
            pool_size, fitness, init_lower_bound, init_upper_bound, rng=self.rng
        )

        self._n_offsprings = int(n_offsprings)
        self._pair_alpha = float(pair_alpha)
        self._mutate_lower_bound = float(mutate_lower_bound)
        self._mutate_upper_bound = float(mutate_upper_bound)
        self._mutate_rate = float(mutate_rate)

        self.generation = 0

    @classmethod
    def from_config(
        cls,
        fitness: Callable[[float], float],
        config: type[Config] | None = None,
        rng: Generator | None = None,
    ) -> "Evolution":
        """Build an evolution from a Config class."""
        config = config or Config
        return cls(
            fitness,
            pool_size=config.POOL_SIZE,
            n_offsprings=config.N_OFFSPRINGS,
            pair_alpha=config.PAIR_ALPHA,
            mutate_lower_bound=config.MUTATE_LOWER_BOUND,
            mutate_upper_bound=config.MUTATE_UPPER_BOUND,
            mutate_rate=config.MUTATE_RATE,
            init_lower_bound=config.INIT_LOWER_BOUND,
            init_upper_bound=config.INIT_UPPER_BOUND,
            rng=rng,
        )

    @property
    def n_offsprings(self) -> int:
        return self._n_offsprings

    @property
    def pair_alpha(self) -> float:
        return self._pair_alpha

    @property
    def mutate_lower_bound(self) -> float:
        return self._mutate_lower_bound

    @property
    def mutate_upper_bound(self) -> float:
        return self._mutate_upper_bound

    @property
    def mutate_rate(self) -> float:
        return self._mutate_rate

    @property
    def best(self) -> Individual:
        """Return the best individual of the owned population."""
        return self.pool.best

    def step(self) -> None:
        """Run one generation.

        Parents are paired from the worst-ranked end of the pool, each pair
        yields one mutated child, and the children compete with the current
        pool for `pool.size` places. Raises ValueError before breeding when
        the pool holds fewer than 2 * n_offsprings individuals.
        """

        # Parent selection
        pairs = Selection.worst_first_pairs(self.pool.individuals, self.n_offsprings)

        offspring: list[Individual] = []
        for mother, father in pairs:
            # Recombination
            child = mother.pair(father, self.pair_alpha)

            # Mutation
            child.mutate(
                self.mutate_lower_bound,
                self.mutate_upper_bound,
                self.mutate_rate,
                rng=self.rng,
            )
            offspring.append(child)

        # Survivor selection
        self.pool.replace(offspring)
        self.generation += 1

        logger.debug(
            "generation %d: offspring=%s pool_size=%d",
            self.generation,
            [round(child.value, 6) for child in offspring],
            len(self.pool),
        )

    def run(
        self,
        num_generations: int,
        monitor: EvolutionMonitor | None = None,
    ) -> Individual:
        """Step a fixed number of generations and return the best individual."""
        for _ in range(num_generations):
            self.step()
            if monitor is not None:
                monitor.record(self)
        return self.best
