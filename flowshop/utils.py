"""Helpers: index ranges, a wall-clock timer and a small 2-D table."""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter_ns
from typing import Sequence


def get_range(beginning: int, end: int) -> list[int]:
    """Return the integers from ``beginning`` to ``end`` inclusive."""
    return list(range(beginning, end + 1))


def format_range(order: Sequence[int]) -> str:
    """Format an ordering as ``[a, b, ..., z]``."""
    parts: list[str] = []
    size = len(order)
    for counter, value in enumerate(order, start=1):
        if counter == 1:
            parts.append(f"[{value}, ")
        elif counter != size:
            parts.append(f"{value}, ")
        else:
            parts.append(f"{value}]")
    return "".join(parts)


@dataclass
class Weight:
    """A weight attached to a task identifier."""

    w: int
    id: int


class Timer:
    """Measures elapsed wall-clock time between ``start`` and ``stop``."""

    def __init__(self) -> None:
        self._begin = 0
        self._end = 0
        self._measured = False

    def start(self) -> None:
        self._begin = perf_counter_ns()

    def stop(self) -> None:
        self._end = perf_counter_ns()
        self._measured = True

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def measurement(self) -> float:
        """Return the elapsed time in nanoseconds, or 0.0 if not measured."""
        if not self._measured:
            return 0.0
        return float(self._end - self._begin)

    def measurement_with_unit(self) -> str:
        """Return the elapsed time scaled to ns, us, ms or s."""
        if not self._measured:
            return "0s"
        duration = self.measurement()
        if duration <= 1_000.0:
            unit, number = "ns", duration
        elif duration <= 1_000_000.0:
            unit, number = "us", duration / 1_000.0
        elif duration <= 1_000_000_000.0:
            unit, number = "ms", duration / 1_000_000.0
        else:
            unit, number = "s", duration / 1_000_000_000.0
        return f"{number:.3f}{unit}"

    def print_measurement(self) -> None:
        if not self._measured:
            return
        print(f"time: {self.measurement_with_unit()}", end="")


class Array2D:
    """A fixed-size table of non-negative integers, initialised to zero."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._cells = [[0] * cols for _ in range(rows)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) out of range")

    def get_at(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._cells[row][col]

    def set_at(self, row: int, col: int, value: int) -> None:
        self._check(row, col)
        self._cells[row][col] = value

    def col_sum(self, which: int, up_to_row: int) -> int:
        """Sum column ``which`` over rows 0..``up_to_row`` inclusive."""
        return sum(self.get_at(r, which) for r in range(up_to_row + 1))

    def row_sum(self, which: int, up_to_col: int) -> int:
        """Sum row ``which`` over columns 0..``up_to_col`` inclusive."""
        return sum(self.get_at(which, c) for c in range(up_to_col + 1))

    def get_path(self, row: int, col: int) -> int:
        """Return the path length along row 0 to ``col`` then down to ``row``."""
        across = self.row_sum(0, col)
        down = self.col_sum(col, row)
        corner = self.get_at(0, col)
        result = across + down - corner
        print(f"[{row}, {col}]")
        print(f"{across} + {down} - {corner} = {result}")
        return result

    def print(self) -> None:
        for line in self._cells:
            print("".join(f"{value}, " for value in line))