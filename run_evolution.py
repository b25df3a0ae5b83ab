"""Run scalar evolution on the quintic objective."""

from __future__ import annotations

import argparse
import logging

import numpy as np

from unievo.config import Config
from unievo.core.evolution_simulation import EvolutionSimulation
from unievo.evolution.fitness import quintic_fitness


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run scalar evolution")
    parser.add_argument("--pool-size", type=int, default=Config.POOL_SIZE)
    parser.add_argument("--n-offsprings", type=int, default=Config.N_OFFSPRINGS)
    parser.add_argument("--n-epochs", type=int, default=Config.N_EPOCHS)
    parser.add_argument("--pair-alpha", type=float, default=Config.PAIR_ALPHA)
    parser.add_argument(
        "--mutate-lower-bound", type=float, default=Config.MUTATE_LOWER_BOUND
    )
    parser.add_argument(
        "--mutate-upper-bound", type=float, default=Config.MUTATE_UPPER_BOUND
    )
    parser.add_argument("--mutate-rate", type=float, default=Config.MUTATE_RATE)
    parser.add_argument(
        "--init-lower-bound", type=float, default=Config.INIT_LOWER_BOUND
    )
    parser.add_argument(
        "--init-upper-bound", type=float, default=Config.INIT_UPPER_BOUND
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--stats-interval", type=int, default=Config.STATS_INTERVAL)
    parser.add_argument("--output-dir", type=str, default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logs")
    return parser


def main(argv: list[str] | None = None) -> float:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = np.random.default_rng(args.seed)

    class RunConfig(Config):
        POOL_SIZE = args.pool_size
        N_OFFSPRINGS = args.n_offsprings
        N_EPOCHS = args.n_epochs
        PAIR_ALPHA = args.pair_alpha
        MUTATE_LOWER_BOUND = args.mutate_lower_bound
        MUTATE_UPPER_BOUND = args.mutate_upper_bound
        MUTATE_RATE = args.mutate_rate
        INIT_LOWER_BOUND = args.init_lower_bound
        INIT_UPPER_BOUND = args.init_upper_bound
        STATS_INTERVAL = args.stats_interval
        OUTPUT_DIR = args.output_dir or Config.OUTPUT_DIR

    sim = EvolutionSimulation(fitness=quintic_fitness, config=RunConfig, rng=rng)
    best = sim.run()

    if args.output_dir:
        RunConfig.create_dirs()
        for path in sim.save_history(RunConfig.OUTPUT_DIR):
            logging.getLogger(__name__).info("wrote %s", path)

    print(best.value)
    return best.value


if __name__ == "__main__":
    main()
