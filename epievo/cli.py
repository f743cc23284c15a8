"""Command-line front end: one single-dash flag per simulation parameter."""
from __future__ import annotations

from typing import List, Optional, TextIO
import argparse
import sys

from . import config
from .config import SimulationParameters
from .reporting import StatsReporter
from .selection import SelectionPolicy
from .simulation import Simulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epievo",
        allow_abbrev=False,
        description="Evolution of a population under genetic mutation and epigenetic noise",
    )
    parser.add_argument("-seed", type=int, default=config.DEFAULT_SEED, help="Random seed")
    parser.add_argument("-len", type=int, default=config.DEFAULT_LENGTH, help="length of chromosome")
    parser.add_argument("-num", type=int, default=config.DEFAULT_NUM, help="population size")
    parser.add_argument("-maxnum", type=int, default=config.DEFAULT_MAX_NUM,
                        help="maximum population size after selection")
    parser.add_argument("-theta", type=float, default=config.DEFAULT_THETA, help="threshold value")
    parser.add_argument("-sigma", type=float, default=config.DEFAULT_SIGMA,
                        help="sigma (SD) for epigenetics")
    parser.add_argument("-epimean", type=float, default=config.DEFAULT_EPIMEAN,
                        help="mean for epigenetics")
    parser.add_argument("-scale", type=float, default=config.DEFAULT_SCALE,
                        help="scaling value for epigenetics")
    parser.add_argument("-ngen", type=int, default=config.DEFAULT_NGEN, help="Number of generations")
    parser.add_argument("-qsel", type=float, default=config.DEFAULT_QSEL,
                        help="Probability of random selection")
    parser.add_argument("-pmut", type=float, default=config.DEFAULT_PMUT,
                        help="Probability of random mutations")
    parser.add_argument("-policy", default=SelectionPolicy.FLAT.value,
                        choices=[p.value for p in SelectionPolicy],
                        help="survival rule below the threshold")
    parser.add_argument("-dump", action="store_true",
                        help="print genomes of the initial and final populations")
    return parser


def parse_args(argv: Optional[List[str]] = None,
               parser: Optional[argparse.ArgumentParser] = None) -> argparse.Namespace:
    parser = parser or build_parser()
    args, extras = parser.parse_known_args(argv)
    # Stray positional arguments are ignored; unknown flags are not.
    unknown = [token for token in extras if token.startswith("-")]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    return args


def run(argv: Optional[List[str]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parse_args(argv, parser)
    try:
        params = SimulationParameters.from_namespace(args)
    except ValueError as exc:
        parser.error(str(exc))

    reporter = StatsReporter(params.length, out=out, err=err, dump_genomes=args.dump)
    Simulation(params).run(reporter)
    # Extinction is a normal outcome.
    return 0


def main() -> None:
    sys.exit(run())
