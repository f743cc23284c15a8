#!/usr/bin/env python3
"""Entry point for running the mutation/plasticity simulation.

    ./main.py -seed 313 -theta 5 -qsel 0.15 -ngen 100 -num 100000 -pmut 0.01 -sigma 3 > outfile

reproduces the run with epigenetic effect; ``-sigma 0.5`` the run without.
"""
from __future__ import annotations

from epievo.cli import main


if __name__ == "__main__":
    main()
