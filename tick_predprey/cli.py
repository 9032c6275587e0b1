"""Command-line entry point: read a scenario, run it, print the grid."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tick_predprey.engine import Engine
from tick_predprey.parsers import parse_scenario
from tick_predprey.render import render


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tick-predprey",
        description="Predator-prey simulation on a toroidal grid",
    )
    p.add_argument("input", nargs="?", default="-",
                   help="Scenario file, or - for stdin (default: -)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log per-tick population counts to stderr")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.input).read_text()
        scenario = parse_scenario(text)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    world = Engine().run(scenario.world, scenario.steps)
    sys.stdout.write(render(world))
    return 0
