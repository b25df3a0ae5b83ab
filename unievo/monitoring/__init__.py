"""Monitoring modules."""

from __future__ import annotations

from unievo.monitoring.evolution_monitor import EvolutionMonitor

__all__ = ["EvolutionMonitor"]
