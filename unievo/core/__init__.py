"""Simulation drivers."""

from __future__ import annotations

from unievo.core.evolution_simulation import EvolutionSimulation

__all__ = ["EvolutionSimulation"]
