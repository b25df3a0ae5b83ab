"""Tests for evolution monitoring and the simulation driver."""

from __future__ import annotations

import json

import numpy as np

from unievo.config import Config
from unievo.core.evolution_simulation import EvolutionSimulation
from unievo.evolution.evolution import Evolution
from unievo.evolution.fitness import quintic_fitness
from unievo.monitoring.evolution_monitor import EvolutionMonitor


class ShortConfig(Config):
    N_EPOCHS = 5
    STATS_INTERVAL = 0


def test_monitor_records_each_generation():
    evo = Evolution.from_config(quintic_fitness, rng=np.random.default_rng(0))
    monitor = EvolutionMonitor()
    evo.run(8, monitor=monitor)

    assert monitor.history["generation"] == list(range(1, 9))
    best = monitor.history["best_fitness"]
    assert all(b >= a for a, b in zip(best, best[1:]))
    for key in ("avg_fitness", "worst_fitness", "best_value", "value_spread"):
        assert len(monitor.history[key]) == 8
    assert monitor.latest()["best_value"] == evo.best.value


def test_monitor_latest_empty():
    assert EvolutionMonitor().latest() == {}


def test_monitor_save_and_plot(tmp_path):
    evo = Evolution.from_config(quintic_fitness, rng=np.random.default_rng(1))
    monitor = EvolutionMonitor()
    evo.run(3, monitor=monitor)

    path = monitor.save(tmp_path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["generation"] == [1, 2, 3]

    plot = monitor.plot_fitness_curves(tmp_path)
    assert plot is not None and plot.exists()


def test_monitor_plot_without_history(tmp_path):
    assert EvolutionMonitor().plot_fitness_curves(tmp_path) is None


def test_simulation_run_uses_config():
    sim = EvolutionSimulation(config=ShortConfig, rng=np.random.default_rng(2))
    best = sim.run()
    assert best is sim.evolution.best
    assert sim.evolution.generation == ShortConfig.N_EPOCHS
    assert len(sim.monitor.history["generation"]) == ShortConfig.N_EPOCHS


def test_simulation_prints_summary(capsys):
    sim = EvolutionSimulation(config=ShortConfig, rng=np.random.default_rng(3))
    sim.run(num_generations=4, stats_interval=2)
    out = capsys.readouterr().out
    assert "Generation 2" in out
    assert "Generation 4" in out
    assert "Best Fitness" in out


def test_simulation_save_history(tmp_path):
    sim = EvolutionSimulation(config=ShortConfig, rng=np.random.default_rng(4))
    sim.run()
    paths = sim.save_history(tmp_path)
    assert {p.name for p in paths} == {"evolution_history.json", "fitness_curves.png"}
