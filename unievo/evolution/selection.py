"""Survivor ranking and parent pairing."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Sequence

from unievo.evolution.individual import Individual


def compare_fitness(score_a: float, score_b: float) -> int:
    """Order two fitness scores best first.

    Scores that cannot be ordered (NaN on either side) compare as -1, so the
    left operand keeps its place ahead of the right one.
    """
    if score_a > score_b:
        return -1
    if score_a < score_b:
        return 1
    if score_a == score_b:
        return 0
    return -1


class Selection:
    """Ranking and parent selection over scalar individuals."""

    @staticmethod
    def rank(
        individuals: Sequence[Individual],
        fitness: Callable[[float], float],
    ) -> list[Individual]:
        """Return individuals sorted by descending fitness.

        Each individual is scored once per call; the sort is stable.
        """

        scored = [(float(fitness(ind.value)), ind) for ind in individuals]
        scored.sort(key=cmp_to_key(lambda a, b: compare_fitness(a[0], b[0])))
        return [ind for _, ind in scored]

    @staticmethod
    def worst_first_pairs(
        ranked: Sequence[Individual],
        num_pairs: int,
    ) -> list[tuple[Individual, Individual]]:
        """Take mother/father pairs starting from the worst-ranked end."""

        parents = iter(reversed(ranked))
        pairs: list[tuple[Individual, Individual]] = []
        for _ in range(num_pairs):
            mother = next(parents, None)
            if mother is None:
                raise ValueError(
                    "Not enough individuals left in population to select a mother."
                )
            father = next(parents, None)
            if father is None:
                raise ValueError(
                    "Not enough individuals left in population to select a father."
                )
            pairs.append((mother, father))
        return pairs
