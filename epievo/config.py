"""Simulation parameters and their defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final
import argparse

from .selection import SelectionPolicy

DEFAULT_SEED: Final[int] = 0
DEFAULT_LENGTH: Final[int] = 20
DEFAULT_NUM: Final[int] = 100000
DEFAULT_MAX_NUM: Final[int] = 100000
DEFAULT_NGEN: Final[int] = 100
DEFAULT_THETA: Final[float] = 5.0
DEFAULT_QSEL: Final[float] = 0.15
DEFAULT_PMUT: Final[float] = 0.01
DEFAULT_SIGMA: Final[float] = 3.0
DEFAULT_EPIMEAN: Final[float] = 0.0
DEFAULT_SCALE: Final[float] = 1.0


@dataclass(frozen=True)
class SimulationParameters:
    """Read-only settings for one run.

    ``length`` is the chromosome length L; ``num`` the founder population
    size; ``max_num`` caps the population after every selection round.
    """

    seed: int = DEFAULT_SEED
    length: int = DEFAULT_LENGTH
    num: int = DEFAULT_NUM
    max_num: int = DEFAULT_MAX_NUM
    ngen: int = DEFAULT_NGEN
    theta: float = DEFAULT_THETA
    qsel: float = DEFAULT_QSEL
    pmut: float = DEFAULT_PMUT
    sigma: float = DEFAULT_SIGMA
    epimean: float = DEFAULT_EPIMEAN
    scale: float = DEFAULT_SCALE
    policy: SelectionPolicy = SelectionPolicy.FLAT

    def validate(self) -> "SimulationParameters":
        if self.length <= 0 or self.length % 2 != 0:
            raise ValueError(f"Chromosome length must be a positive even number, got {self.length}")
        if self.num < 1:
            raise ValueError(f"Population size must be at least 1, got {self.num}")
        if self.max_num < 1:
            raise ValueError(f"Maximum population size must be at least 1, got {self.max_num}")
        if self.ngen < 0:
            raise ValueError(f"Number of generations must be non-negative, got {self.ngen}")
        for name in ("qsel", "pmut"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value}")
        if self.sigma < 0.0 or self.scale < 0.0:
            raise ValueError("sigma and scale must be non-negative")
        if self.policy is SelectionPolicy.PROPORTIONAL_FLOOR and self.theta + self.half_length == 0:
            raise ValueError(f"theta must differ from -L/2 ({-self.half_length}) "
                             f"under {self.policy.value} selection")
        return self

    @property
    def half_length(self) -> int:
        return self.length // 2

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "SimulationParameters":
        return cls(
            seed=args.seed,
            length=args.len,
            num=args.num,
            max_num=args.maxnum,
            ngen=args.ngen,
            theta=args.theta,
            qsel=args.qsel,
            pmut=args.pmut,
            sigma=args.sigma,
            epimean=args.epimean,
            scale=args.scale,
            policy=SelectionPolicy(args.policy),
        ).validate()
