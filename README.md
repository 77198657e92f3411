# flowshop

Tools for the permutation flow-shop scheduling problem. Every task passes
through the same machines in the same order. The goal is the task order with
the smallest makespan (`C_max`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Instance files

An instance is a whitespace-separated text file. It begins with the number
of tasks and the number of machines. The processing times follow, one row per
task and one value per machine:

```
4 2
4 5
4 1
10 4
6 10
```

`Problem.from_file` raises `ValueError` in three cases: the counts are
missing, a count is negative, or there are too few processing times.

## Command line

```
flowshop path/to/instance --compare
```

With `--compare`, the command reads the instance and runs `overview`,
`johnson`, `neh` and `fneh` in turn. They are labelled `Revision`, `Johnson`,
`NEH` and `fNEH`. Each prints one line holding the `C_max` it found and the
time it took, for example `NEH: 26 (12.345us)`.

If you leave out `--compare`, the command only loads the instance and
simulates it, and prints nothing. If you leave out the file, it reads
`../test1`. The command exits with status 1 and a message on stderr when the
file cannot be opened or is malformed.

## Library use

```python
from flowshop.problem import Problem
from flowshop.task import Task
from flowshop import algorithms

problem = Problem.from_file("instance.txt")
print(problem)                  # task and machine count, then the tasks
print(problem.simulate())       # makespan of the current order

print(algorithms.johnson(problem))   # "C_max = ..." (two machines only)
print(algorithms.neh(problem))
print(algorithms.overview(problem))  # tries every permutation
```

You can also build a problem from tasks directly:

```python
tasks = [Task([4, 5], 0), Task([4, 1], 1), Task([10, 4], 2)]
problem = Problem(tasks, 2)
problem.rearrange([2, 0, 1])
print(problem.simulate())
```

Every algorithm returns a `Solution`. Its `c_max` holds the makespan, and
`str(solution)` gives `C_max = <value>`.

### Algorithms

- **`overview`** evaluates every ordering of the tasks, prints the best order
  (such as `[1, 0, 2]`) and returns the smallest makespan. Its cost grows
  factorially, so use it only on small instances.
- **`johnson`** applies Johnson's rule. It is exact for two machines. For any
  other machine count it raises `ValueError`.
- **`neh`** is a heuristic.
  1. It sorts the tasks by total processing time, longest first.
  2. It removes the task with the shortest total.
  3. It tries inserting that task at positions among the others.
  4. It returns the smallest makespan it saw.

  It raises `ValueError` for a problem with no tasks.
- **`fneh`** always returns `C_max = 0`.

### Other helpers

- `Problem.table()`, `Problem.paths_in()` and `Problem.paths_out()` return
  machine-by-task grids (`flowshop.utils.Array2D`):
  - `table()` holds the processing times.
  - `paths_in()` holds the completion times counted from the start.
  - `paths_out()` holds the tail lengths counted from the end.
- `Problem.sort_by_operations_length()` orders the tasks by total time,
  longest first.
- `Problem.remove_task()` removes every task equal to the one given.
- `flowshop.utils.Timer` measures wall-clock time. Use either
  `start()`/`stop()` or a `with` block. `measurement_with_unit()` formats the
  result in `ns`, `us`, `ms` or `s`.
- `flowshop.cli.run_algorithm` and `flowshop.cli.run_all_algorithms` time
  and print algorithm results from your own code.

## What it does not do

`fneh` is not implemented and always returns zero. The package only reports
makespans. It does not write schedules or orderings to files. The only
ordering it reports is the one `overview` prints.