"""Seedable random stream shared by every stochastic step of a run."""
from __future__ import annotations

from typing import Optional
import numpy as np


class RandomSource:
    """Thin wrapper over a numpy ``Generator``.

    All draws of a run go through one instance, in a fixed order, so a seed
    fully determines the simulation output.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def uniform(self, size: Optional[int] = None):
        """Uniform draw(s) in [0, 1); ``size`` draws are taken in sequence."""
        if size is None:
            return float(self.rng.random())
        return self.rng.random(size)

    def uniform_int(self, n: int) -> int:
        return int(self.rng.integers(n))

    def gaussian(self, mean: float = 0.0, sd: float = 1.0) -> float:
        return float(self.rng.normal(loc=mean, scale=sd))
