"""Fixed additive weighting of binary genomes."""
from __future__ import annotations

import numpy as np


def build_weight_vector(length: int) -> np.ndarray:
    """Return ``length`` weights: the first half -1, the second half +1."""
    if length <= 0 or length % 2 != 0:
        raise ValueError(f"Chromosome length must be a positive even number, got {length}")
    weights = np.ones(length, dtype=np.int64)
    weights[:length // 2] = -1
    weights.flags.writeable = False
    return weights


def genetic_fitness_of(genes: np.ndarray, weights: np.ndarray) -> float:
    if len(genes) != len(weights):
        raise ValueError(f"Expected {len(weights)} loci, got {len(genes)}")
    return float(np.dot(genes, weights))
