"""Generation loop: mate, select, report, until done or extinct."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union
import numpy as np

from .config import SimulationParameters
from .genome import build_weight_vector
from .individual import Individual, make_ensemble
from .random_source import RandomSource
from .recombination import mate_all
from .reporting import PopulationStats, StatsReporter, summarize
from .selection import select_all


@dataclass(frozen=True)
class Running:
    population: List[Individual]
    step: int


@dataclass(frozen=True)
class Extinct:
    step: int


@dataclass(frozen=True)
class Completed:
    population: List[Individual]


State = Union[Running, Extinct, Completed]


@dataclass
class SimulationHistory:
    generations: List[int] = field(default_factory=list)
    sizes: List[int] = field(default_factory=list)
    genetic_mean: List[float] = field(default_factory=list)
    epigenetic_mean: List[float] = field(default_factory=list)
    fitness_mean: List[float] = field(default_factory=list)

    def record(self, step: int, stats: PopulationStats) -> None:
        self.generations.append(step)
        self.sizes.append(stats.size)
        self.genetic_mean.append(stats.genetic_mean)
        self.epigenetic_mean.append(stats.epigenetic_mean)
        self.fitness_mean.append(stats.fitness_mean)


@dataclass
class SimulationResult:
    state: Union[Extinct, Completed]
    history: SimulationHistory

    @property
    def extinct(self) -> bool:
        return isinstance(self.state, Extinct)


def cycle(population: List[Individual],
          weights: np.ndarray,
          params: SimulationParameters,
          rng: RandomSource) -> List[Individual]:
    return select_all(mate_all(population, rng), weights, params, rng)


def advance(state: State,
            weights: np.ndarray,
            params: SimulationParameters,
            rng: RandomSource) -> State:
    """One transition of the generation state machine.

    Terminal states are returned unchanged.
    """
    if not isinstance(state, Running):
        return state
    if state.step > params.ngen:
        return Completed(state.population)
    population = cycle(state.population, weights, params, rng)
    if len(population) <= 1:
        return Extinct(state.step)
    return Running(population, state.step + 1)


class Simulation:
    """Evolves a founder population under mutation, plasticity and selection."""

    def __init__(self, params: SimulationParameters):
        self.params = params.validate()
        self.rng = RandomSource(params.seed)
        self.weights = build_weight_vector(params.length)
        self.population = make_ensemble(params, self.weights, self.rng)
        self.generation = 0
        self.history = SimulationHistory()

    def _emit(self, reporter: Optional[StatsReporter]) -> None:
        if reporter is not None:
            stats = reporter.generation(self.generation, self.population)
        else:
            stats = summarize(self.population)
        self.history.record(self.generation, stats)

    def run(self, reporter: Optional[StatsReporter] = None) -> SimulationResult:
        if reporter is not None:
            reporter.start(self.weights, self.params.theta, self.population)
        self._emit(reporter)

        state: State = Running(self.population, 1)
        while isinstance(state, Running):
            state = advance(state, self.weights, self.params, self.rng)
            if isinstance(state, Running):
                self.population = state.population
                self.generation = state.step - 1
                self._emit(reporter)

        if isinstance(state, Extinct):
            self.generation = state.step
            if reporter is not None:
                reporter.extinct()
        elif reporter is not None:
            reporter.finish(state.population)
        return SimulationResult(state=state, history=self.history)
