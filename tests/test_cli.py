"""Tests for the command-line front end."""
from __future__ import annotations

import contextlib
import io
import unittest

from epievo import config
from epievo.cli import parse_args, run
from epievo.config import SimulationParameters
from epievo.selection import SelectionPolicy


class TestParseArgs(unittest.TestCase):
    def test_defaults(self):
        params = SimulationParameters.from_namespace(parse_args([]))
        self.assertEqual(params, SimulationParameters())
        self.assertEqual(params.length, 20)
        self.assertEqual(params.ngen, 100)
        self.assertEqual(params.num, 100000)
        self.assertEqual(params.max_num, 100000)
        self.assertEqual(params.theta, 5.0)
        self.assertEqual(params.qsel, 0.15)
        self.assertEqual(params.pmut, 0.01)
        self.assertEqual(params.sigma, 3.0)
        self.assertEqual(params.epimean, 0.0)
        self.assertEqual(params.scale, 1.0)
        self.assertEqual(params.seed, config.DEFAULT_SEED)
        self.assertIs(params.policy, SelectionPolicy.FLAT)

    def test_flags(self):
        args = parse_args(["-seed", "313", "-theta", "5", "-qsel", "0.2", "-ngen", "7",
                           "-num", "50", "-pmut", "0.05", "-sigma", "0.5", "-len", "12",
                           "-epimean", "-1.5", "-scale", "2", "-maxnum", "80",
                           "-policy", "proportional"])
        params = SimulationParameters.from_namespace(args)
        self.assertEqual(params, SimulationParameters(
            seed=313, theta=5.0, qsel=0.2, ngen=7, num=50, pmut=0.05, sigma=0.5,
            length=12, epimean=-1.5, scale=2.0, max_num=80,
            policy=SelectionPolicy.PROPORTIONAL,
        ))

    def test_positional_arguments_ignored(self):
        args = parse_args(["stray", "-len", "10", "another"])
        self.assertEqual(args.len, 10)

    def test_unknown_or_abbreviated_flags_rejected(self):
        for argv in (["-sead", "3"], ["-the", "9"], ["-len", "10", "-bogus"]):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    parse_args(argv)
            self.assertEqual(ctx.exception.code, 2)


class TestRun(unittest.TestCase):
    def test_small_run(self):
        out, err = io.StringIO(), io.StringIO()
        status = run(["-num", "100", "-ngen", "2", "-len", "6", "-theta", "-10", "-seed", "3"],
                     out=out, err=err)
        self.assertEqual(status, 0)
        lines = out.getvalue().splitlines()
        self.assertEqual(sum(line.startswith("# w(") for line in lines), 6)
        self.assertEqual(sum(line.startswith("step:") for line in lines), 3)
        self.assertEqual(len(err.getvalue().splitlines()), 3)

    def test_extinction_exits_cleanly(self):
        out = io.StringIO()
        status = run(["-num", "2", "-len", "4", "-theta", "1e9", "-qsel", "0"],
                     out=out, err=io.StringIO())
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue().splitlines()[-1], "extinct!")

    def test_bad_input_fails_fast(self):
        for argv in (["-len", "7"], ["-num", "many"], ["-qsel", "2"], ["-policy", "random"],
                     ["-sead", "313"],
                     ["-policy", "proportional-floor", "-theta", "-10", "-len", "20",
                      "-num", "10", "-ngen", "1"]):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    run(argv, out=io.StringIO(), err=io.StringIO())
            self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
