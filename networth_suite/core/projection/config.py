"""Engine run settings (how to simulate, not what to simulate)."""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_SIMULATIONS = 5000
DEFAULT_WORKERS = 1

ENV_SIMULATIONS = "NETWORTH_SIMULATIONS"
ENV_SEED = "NETWORTH_SEED"
ENV_WORKERS = "NETWORTH_WORKERS"


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for a Monte Carlo run."""

    n_simulations: int = DEFAULT_SIMULATIONS
    seed: Optional[int] = None
    workers: int = DEFAULT_WORKERS
    chunk_size: Optional[int] = None  # paths per worker task; None = even split
    show_progress: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if self.n_simulations < 1:
            raise ValueError("n_simulations must be positive")
        if self.workers < 1:
            raise ValueError("workers must be positive")
        if self.chunk_size is not None and self.chunk_size < 1:
            raise ValueError("chunk_size must be positive")

    def resolved_chunk_size(self) -> int:
        """Paths per chunk, defaulting to an even split across workers."""
        if self.chunk_size is not None:
            return self.chunk_size
        return max(1, -(-self.n_simulations // self.workers))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "n_simulations": self.n_simulations,
            "seed": self.seed,
            "workers": self.workers,
            "chunk_size": self.chunk_size,
            "show_progress": self.show_progress,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EngineConfig":
        """Create from dictionary."""
        return cls(
            n_simulations=data.get("n_simulations", DEFAULT_SIMULATIONS),
            seed=data.get("seed"),
            workers=data.get("workers", DEFAULT_WORKERS),
            chunk_size=data.get("chunk_size"),
            show_progress=data.get("show_progress", False),
        )

    @classmethod
    def from_env(cls, environ=None) -> "EngineConfig":
        """Build from NETWORTH_* environment variables, defaulting the rest."""
        env = os.environ if environ is None else environ
        seed = env.get(ENV_SEED)
        return cls(
            n_simulations=int(env.get(ENV_SIMULATIONS, DEFAULT_SIMULATIONS)),
            seed=int(seed) if seed else None,
            workers=int(env.get(ENV_WORKERS, DEFAULT_WORKERS)),
        )
