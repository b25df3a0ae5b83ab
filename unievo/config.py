"""Project-wide configuration constants."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar


@dataclass(frozen=True)
class Config:
    """Central configuration constants for unievo."""

    # Population parameters
    POOL_SIZE: ClassVar[int] = 10  # Survivors kept each generation
    N_OFFSPRINGS: ClassVar[int] = 2  # Children bred per generation
    N_EPOCHS: ClassVar[int] = 50  # Generations to run

    # Breeding parameters
    PAIR_ALPHA: ClassVar[float] = 0.5  # Mother weight in recombination
    MUTATE_LOWER_BOUND: ClassVar[float] = 0.0
    MUTATE_UPPER_BOUND: ClassVar[float] = 4.0
    MUTATE_RATE: ClassVar[float] = 0.25  # Std dev of mutation noise

    # Initialization parameters
    INIT_LOWER_BOUND: ClassVar[float] = 0.0
    INIT_UPPER_BOUND: ClassVar[float] = 4.0

    # Monitoring parameters
    STATS_INTERVAL: ClassVar[int] = 0  # Generations between summaries (0 = off)

    # Path parameters
    OUTPUT_DIR: ClassVar[str] = "data/evolution"

    @classmethod
    def create_dirs(cls) -> None:
        """Create required output directories."""
        Path(cls.OUTPUT_DIR).mkdir(parents=True, exist_ok=True)
