"""Individuals and the founder population."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING
import numpy as np

from .genome import genetic_fitness_of
from .random_source import RandomSource

if TYPE_CHECKING:
    from .config import SimulationParameters


@dataclass(frozen=True, eq=False)
class Individual:
    """One genome with its genetic, epigenetic and total fitness.

    ``fitness`` is always ``genetic_fitness + epigenetic_fitness``; use
    :meth:`scored` to build one so the sum cannot drift. Two individuals are
    equal when their genes and all fitness fields match.
    """

    genes: np.ndarray = field(repr=False)
    genetic_fitness: float
    epigenetic_fitness: float
    fitness: float

    @classmethod
    def scored(cls, genes: np.ndarray, genetic: float, epigenetic: float) -> "Individual":
        # Read-only arrays are shared between individuals; writable ones are copied.
        if genes.flags.writeable:
            genes = genes.copy()
            genes.flags.writeable = False
        return cls(genes, genetic, epigenetic, genetic + epigenetic)

    @property
    def length(self) -> int:
        return len(self.genes)

    def _key(self):
        return (tuple(int(g) for g in self.genes),
                self.genetic_fitness, self.epigenetic_fitness, self.fitness)

    def __eq__(self, other):
        if not isinstance(other, Individual):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())


def epigenetic_sample(mean: float, scale: float, sigma: float, rng: RandomSource) -> float:
    # Unclamped: negative plastic effects are allowed.
    return mean + scale * sigma * rng.gaussian()


def make_individual(length: int,
                    pmut: float,
                    weights: np.ndarray,
                    rng: RandomSource,
                    epimean: float = 0.0,
                    scale: float = 1.0,
                    sigma: float = 1.0) -> Individual:
    """Sample a founder: each locus carries the mutant allele with probability ``pmut``."""
    genes = (rng.uniform(length) < pmut).astype(np.int8)
    genetic = genetic_fitness_of(genes, weights)
    epigenetic = epigenetic_sample(epimean, scale, sigma, rng)
    return Individual.scored(genes, genetic, epigenetic)


def make_ensemble(params: "SimulationParameters",
                  weights: np.ndarray,
                  rng: RandomSource) -> List[Individual]:
    return [
        make_individual(params.length, params.pmut, weights, rng,
                        epimean=params.epimean, scale=params.scale, sigma=params.sigma)
        for _ in range(params.num)
    ]
