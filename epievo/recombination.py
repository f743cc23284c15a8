"""Single-crossover mating of random parent pairs."""
from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, Tuple

from .individual import Individual
from .random_source import RandomSource


def mate_one(population: Sequence[Individual],
             rng: RandomSource) -> Tuple[Individual, Individual]:
    """Cross two parents drawn with replacement at one random site.

    The first child is parent ``i`` with loci ``[0, site)`` taken from parent
    ``j``; the second is parent ``j`` with loci ``[site, L)`` taken from
    parent ``i``. Children keep their base parent's fitness fields until
    they are rescored during selection.
    """
    n = len(population)
    parent_i = population[rng.uniform_int(n)]
    parent_j = population[rng.uniform_int(n)]
    site = rng.uniform_int(parent_i.length)

    genes_a = parent_i.genes.copy()
    genes_a[:site] = parent_j.genes[:site]
    genes_b = parent_j.genes.copy()
    genes_b[site:] = parent_i.genes[site:]
    genes_a.flags.writeable = False
    genes_b.flags.writeable = False
    return replace(parent_i, genes=genes_a), replace(parent_j, genes=genes_b)


def mate_all(population: Sequence[Individual], rng: RandomSource) -> List[Individual]:
    """Return ``4 * len(population)`` offspring from ``2 * len(population)`` matings."""
    if len(population) == 0:
        raise ValueError("Cannot mate an empty population.")
    offspring: List[Individual] = []
    for _ in range(2 * len(population)):
        offspring.extend(mate_one(population, rng))
    return offspring
