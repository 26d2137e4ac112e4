"""Annual market return samplers.

Each simulated path owns its own sampler, seeded from a child of the run's
``SeedSequence``, so paths never share a generator and a given seed gives
the same draws whichever worker a path lands on.
"""

import math
from typing import Callable, List, Optional, Protocol

import numpy as np


class ReturnSampler(Protocol):
    """Draws one annual return per call."""

    def draw(self, mean: float, stdev: float) -> float:
        ...


class GaussianReturnSampler:
    """Normal returns from two uniforms via the Box-Muller transform."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    @classmethod
    def from_seed(cls, seed: np.random.SeedSequence) -> "GaussianReturnSampler":
        return cls(np.random.default_rng(seed))

    def draw(self, mean: float, stdev: float) -> float:
        # random() is in [0, 1); flip it so log() never sees zero
        u1 = 1.0 - self.rng.random()
        u2 = self.rng.random()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mean + stdev * z


class ConstantReturnSampler:
    """Always returns the same value, ignoring mean and stdev."""

    def __init__(self, value: float = 0.0):
        self.value = value

    def draw(self, mean: float, stdev: float) -> float:
        return self.value


SamplerFactory = Callable[[np.random.SeedSequence], ReturnSampler]


def spawn_path_seeds(seed: Optional[int], n_paths: int) -> List[np.random.SeedSequence]:
    """One independent child seed per path, in path order."""
    return np.random.SeedSequence(seed).spawn(n_paths)
