"""Makespan heuristics and exact search for the permutation flow shop."""

from __future__ import annotations

import copy
from itertools import permutations

from flowshop.problem import Problem
from flowshop.solution import Solution
from flowshop.utils import format_range, get_range


def neh(problem: Problem) -> Solution:
    """Try inserting the shortest task at the front positions of the sorted order."""
    if not problem.tasks:
        raise ValueError("NEH needs at least one task")
    work = copy.deepcopy(problem)
    work.sort_by_operations_length()
    shortest = work.tasks[-1]

    current_time = work.simulate()
    min_time = 0
    work.tasks.pop()

    offset = 0
    while offset < work.task_count():
        if current_time < min_time or min_time == 0:
            min_time = current_time
        work.tasks.insert(offset, shortest)
        current_time = work.simulate()
        work.remove_task(shortest)
        offset += 1

    return Solution(min_time)


def overview(problem: Problem) -> Solution:
    """Check every task order and return the smallest makespan.

    The best order found is printed.
    """
    minimal_time = 0
    optimal_order: list[int] = []
    for order in permutations(get_range(0, problem.task_count() - 1)):
        candidate = copy.copy(problem)
        candidate.tasks = list(problem.tasks)
        candidate.rearrange(order)
        time = candidate.simulate()
        if time < minimal_time or minimal_time == 0:
            minimal_time = time
            optimal_order = list(order)
    print(format_range(optimal_order))
    return Solution(minimal_time)


def johnson(problem: Problem) -> Solution:
    """Johnson's rule for two machines."""
    if problem.machine_count != 2:
        raise ValueError("This algorithm is implemented only for m=2!")
    first = [t for t in problem.tasks if t.operation(0) < t.operation(1)]
    second = [t for t in problem.tasks if not t.operation(0) < t.operation(1)]
    first.sort(key=lambda t: t.operation(0))
    second.sort(key=lambda t: t.operation(0), reverse=True)
    return Solution(Problem(first + second, problem.machine_count).simulate())


def fneh(problem: Problem) -> Solution:
    """Accelerated NEH; currently yields an empty result."""
    return Solution(0)