"""Threshold-based stochastic survival."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, TYPE_CHECKING
import numpy as np

from .genome import genetic_fitness_of
from .individual import Individual, epigenetic_sample
from .random_source import RandomSource

if TYPE_CHECKING:
    from .config import SimulationParameters


class SelectionPolicy(str, Enum):
    """How an individual in the band ``[0, theta)`` is judged.

    ``FLAT`` survives with probability ``qsel`` and reproduces the published
    runs. ``PROPORTIONAL`` uses ``fitness / theta`` instead.
    ``PROPORTIONAL_FLOOR`` has no deterministic band at all and survives
    with probability ``(fitness + L/2) / (theta + L/2)``.
    """

    FLAT = "flat"
    PROPORTIONAL = "proportional"
    PROPORTIONAL_FLOOR = "proportional-floor"


def survives(individual: Individual,
             theta: float,
             qsel: float,
             rng: RandomSource,
             policy: SelectionPolicy = SelectionPolicy.FLAT,
             length: Optional[int] = None) -> bool:
    fit = individual.fitness
    if policy is SelectionPolicy.PROPORTIONAL_FLOOR:
        floor = 0.5 * float(individual.length if length is None else length)
        if theta + floor == 0.0:
            raise ValueError(f"theta must differ from -L/2 ({-floor}) under {policy.value} selection")
        return rng.uniform() < (fit + floor) / (theta + floor)

    if fit >= theta:
        return True
    if fit < 0.0:
        return False
    if policy is SelectionPolicy.PROPORTIONAL:
        return rng.uniform() < fit / theta
    return rng.uniform() < qsel


def rescore(individual: Individual,
            weights: np.ndarray,
            epimean: float,
            scale: float,
            sigma: float,
            rng: RandomSource) -> Individual:
    """Recompute the genetic part and draw a fresh epigenetic part."""
    genetic = genetic_fitness_of(individual.genes, weights)
    epigenetic = epigenetic_sample(epimean, scale, sigma, rng)
    return Individual.scored(individual.genes, genetic, epigenetic)


def select_all(population: Sequence[Individual],
               weights: np.ndarray,
               params: "SimulationParameters",
               rng: RandomSource) -> List[Individual]:
    """Rescore every individual in order and keep at most ``max_num`` survivors.

    Survivors are returned last-processed first, so truncation keeps the
    ones judged latest.
    """
    survivors: List[Individual] = []
    for ind in population:
        ind = rescore(ind, weights, params.epimean, params.scale, params.sigma, rng)
        if survives(ind, params.theta, params.qsel, rng, params.policy, params.length):
            survivors.append(ind)
    survivors.reverse()
    return survivors[:params.max_num]
