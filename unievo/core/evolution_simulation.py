"""Evolution simulation for a fixed number of generations."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import numpy as np
from numpy.random import Generator

from unievo.config import Config
from unievo.evolution.evolution import Evolution
from unievo.evolution.fitness import quintic_fitness
from unievo.evolution.individual import Individual
from unievo.monitoring.evolution_monitor import EvolutionMonitor


class EvolutionSimulation:
    """Evolution simulation controller."""

    def __init__(
        self,
        fitness: Callable[[float], float] | None = None,
        config: type[Config] | None = None,
        rng: Generator | None = None,
    ) -> None:
        self.config = config or Config
        self.fitness = fitness or quintic_fitness
        self.rng = rng or np.random.default_rng()

        self.evolution = Evolution.from_config(self.fitness, self.config, self.rng)
        self.monitor = EvolutionMonitor()

    def run(
        self,
        num_generations: int | None = None,
        stats_interval: int | None = None,
    ) -> Individual:
        """Run generational evolution and return the best individual."""
        total_generations = (
            self.config.N_EPOCHS if num_generations is None else num_generations
        )
        interval = (
            self.config.STATS_INTERVAL if stats_interval is None else stats_interval
        )

        for gen in range(total_generations):
            self.evolution.step()
            self.monitor.record(self.evolution)
            if interval > 0 and (gen + 1) % interval == 0:
                self._print_generation_summary()

        return self.evolution.best

    def save_history(self, output_dir: str | Path | None = None) -> list[Path]:
        """Write history JSON and fitness plot."""
        out_dir = Path(output_dir or self.config.OUTPUT_DIR)
        paths = [self.monitor.save(out_dir)]
        plot = self.monitor.plot_fitness_curves(out_dir)
        if plot is not None:
            paths.append(plot)
        return paths

    def _print_generation_summary(self) -> None:
        """Print generation summary."""
        stats = self.monitor.latest()
        if not stats:
            return
        print("\n" + "=" * 60)
        print(f"Generation {stats['generation']}")
        print("=" * 60)
        print(f"  Best Fitness:  {stats['best_fitness']:.4f}")
        print(f"  Avg Fitness:   {stats['avg_fitness']:.4f}")
        print(f"  Worst Fitness: {stats['worst_fitness']:.4f}")
        print(f"  Best Value:    {stats['best_value']:.6f}")
        print(f"  Spread:        {stats['value_spread']:.4f}")
