"""Per-generation summary statistics and the text report streams."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO
import sys
import numpy as np

from .individual import Individual

LEGEND = ("(1) generation, (2) population size, (3) mean genetic effect, "
          "(4) S.D. of genetic effect, (5) mean epigenetic effect, "
          "(6) S.D. of epigenetic effect, (7) mean fitness, (8) S.D. of fitness")


@dataclass(frozen=True)
class PopulationStats:
    size: int
    genetic_mean: float
    genetic_sd: float
    epigenetic_mean: float
    epigenetic_sd: float
    fitness_mean: float
    fitness_sd: float


def summarize(population: Sequence[Individual]) -> PopulationStats:
    """Means and population standard deviations (divisor N) of each fitness part."""
    if len(population) == 0:
        raise ValueError("Cannot summarize an empty population.")
    values = np.array(
        [(ind.genetic_fitness, ind.epigenetic_fitness, ind.fitness) for ind in population],
        dtype=float,
    )
    means = values.mean(axis=0)
    sds = values.std(axis=0)
    return PopulationStats(
        size=len(population),
        genetic_mean=float(means[0]),
        genetic_sd=float(sds[0]),
        epigenetic_mean=float(means[1]),
        epigenetic_sd=float(sds[1]),
        fitness_mean=float(means[2]),
        fitness_sd=float(sds[2]),
    )


def genetic_histogram(population: Sequence[Individual], length: int) -> List[int]:
    """Counts of genetic fitness (truncated toward zero) for buckets -L/2..L/2."""
    half = length // 2
    counts = [0] * (2 * half + 1)
    for ind in population:
        bucket = int(ind.genetic_fitness)
        if -half <= bucket <= half:
            counts[bucket + half] += 1
    return counts


def format_stats_line(step: int, stats: PopulationStats) -> str:
    return (f"step: {step:5d} {stats.size:5d} "
            f"{stats.genetic_mean:8.3f} {stats.genetic_sd:8.3f} "
            f"{stats.epigenetic_mean:8.3f} {stats.epigenetic_sd:8.3f} "
            f"{stats.fitness_mean:8.3f} {stats.fitness_sd:8.3f}")


def format_histogram_line(step: int, size: int, counts: Sequence[int]) -> str:
    return "\t".join([str(step), str(size)] + [str(c) for c in counts])


def format_genomes(population: Sequence[Individual]) -> List[str]:
    return ["#ens" + "".join(f"{g:2d}" for g in ind.genes) for ind in population]


class StatsReporter:
    """Writes the result stream to ``out`` and genotype histograms to ``err``.

    With ``dump_genomes`` the initial and final populations are also listed,
    one ``#ens`` line per individual.
    """

    def __init__(self,
                 length: int,
                 out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None,
                 dump_genomes: bool = False):
        self.length = length
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.dump_genomes = dump_genomes

    def start(self,
              weights: Sequence[int],
              theta: float,
              population: Sequence[Individual]) -> None:
        for i, w in enumerate(weights):
            print(f"# w({i}) = {int(w):2d}", file=self.out)
        if self.dump_genomes:
            self.genomes("Initial", population)
        print(f"#threshold = {theta:f}", file=self.out)
        print(LEGEND, file=self.out, flush=True)

    def generation(self, step: int, population: Sequence[Individual]) -> PopulationStats:
        stats = summarize(population)
        print(format_stats_line(step, stats), file=self.out, flush=True)
        counts = genetic_histogram(population, self.length)
        print(format_histogram_line(step, stats.size, counts), file=self.err, flush=True)
        return stats

    def genomes(self, title: str, population: Sequence[Individual]) -> None:
        print(f"#{title}", file=self.out)
        for line in format_genomes(population):
            print(line, file=self.out)
        self.out.flush()

    def finish(self, population: Sequence[Individual]) -> None:
        if self.dump_genomes:
            self.genomes("Final", population)

    def extinct(self) -> None:
        print("extinct!", file=self.out, flush=True)
