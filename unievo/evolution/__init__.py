"""Evolution module for scalar optimization."""

from __future__ import annotations

from unievo.evolution.evolution import Evolution
from unievo.evolution.individual import Individual
from unievo.evolution.population import Population

__all__ = [
    "Evolution",
    "Individual",
    "Population",
    "evolution",
    "fitness",
    "individual",
    "population",
    "selection",
]
