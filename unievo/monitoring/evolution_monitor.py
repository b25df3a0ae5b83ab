"""Monitoring utilities for generational evolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np

if TYPE_CHECKING:
    from unievo.evolution.evolution import Evolution


class EvolutionMonitor:
    """Track fitness and gene statistics per generation."""

    def __init__(self) -> None:
        self.history: dict[str, list] = {
            "generation": [],
            "best_fitness": [],
            "avg_fitness": [],
            "worst_fitness": [],
            "best_value": [],
            "value_spread": [],
        }

    def record(self, evolution: Evolution) -> None:
        """Record statistics for the evolution's current population."""
        pool = evolution.pool
        scores = pool.fitness_scores()
        values = pool.values()
        if not scores:
            raise ValueError("cannot record an empty population")

        self.history["generation"].append(evolution.generation)
        self.history["best_fitness"].append(float(scores[0]))
        self.history["avg_fitness"].append(float(np.mean(scores)))
        self.history["worst_fitness"].append(float(scores[-1]))
        self.history["best_value"].append(float(values[0]))
        self.history["value_spread"].append(float(np.std(values)))

    def latest(self) -> dict[str, float]:
        """Return the most recent record, or an empty dict."""
        if not self.history["generation"]:
            return {}
        return {key: series[-1] for key, series in self.history.items()}

    def save(self, output_dir: str | Path) -> Path:
        """Save history to JSON."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / "evolution_history.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.history, f, indent=2)
        return path

    def plot_fitness_curves(self, output_dir: str | Path) -> Path | None:
        """Plot best, average and worst fitness per generation."""
        if not self.history["generation"]:
            return None
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        fig, ax = plt.subplots(figsize=(10, 5))
        generations = self.history["generation"]
        ax.plot(generations, self.history["best_fitness"], label="Best")
        ax.plot(generations, self.history["avg_fitness"], label="Average")
        ax.plot(generations, self.history["worst_fitness"], label="Worst", alpha=0.6)
        ax.set_xlabel("Generation")
        ax.set_ylabel("Fitness")
        ax.set_title("Fitness Over Generations")
        ax.legend()
        path = output_dir / "fitness_curves.png"
        plt.tight_layout()
        plt.savefig(path, dpi=150)
        plt.close(fig)
        return path
