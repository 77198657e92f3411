"""Command-line entry point: load a problem and evaluate it."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from flowshop.algorithms import fneh, johnson, neh, overview
from flowshop.problem import Problem
from flowshop.solution import Solution
from flowshop.utils import Timer

DEFAULT_FILE = "../test1"


def run_algorithm(
    algorithm: Callable[[Problem], Solution], problem: Problem, name: str
) -> Solution:
    """Time ``algorithm`` on ``problem`` and print its makespan."""
    with Timer() as timer:
        solution = algorithm(problem)
    print(f"{name}: {solution.c_max} ({timer.measurement_with_unit()})")
    return solution


def run_all_algorithms(problem: Problem) -> dict[str, Solution]:
    """Run every algorithm in turn, printing each result."""
    algorithms = {
        "Revision": overview,
        "Johnson": johnson,
        "NEH": neh,
        "fNEH": fneh,
    }
    return {
        name: run_algorithm(algorithm, problem, name)
        for name, algorithm in algorithms.items()
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flowshop", description="Evaluate a permutation flow-shop problem."
    )
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE, help="problem file")
    parser.add_argument(
        "--compare", action="store_true", help="run and time every algorithm"
    )
    args = parser.parse_args(argv)

    try:
        problem = Problem.from_file(args.file)
    except OSError as error:
        print(f"File opening error: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Invalid problem file: {error}", file=sys.stderr)
        return 1

    if args.compare:
        run_all_algorithms(problem)
    else:
        problem.simulate()
    return 0


if __name__ == "__main__":
    sys.exit(main())