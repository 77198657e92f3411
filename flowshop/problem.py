"""A permutation flow-shop instance: tasks run in order over a line of machines."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable

from flowshop.task import Task
from flowshop.utils import Array2D


@dataclass
class Problem:
    """An ordered list of tasks together with the number of machines."""

    tasks: list[Task] = field(default_factory=list)
    machine_count: int = 2

    @classmethod
    def from_file(cls, file_path: str | PathLike[str]) -> Problem:
        """Read a problem from a whitespace-separated text file.

        The file holds the task count and the machine count, followed by
        one operation time per machine for every task.
        """
        with open(file_path, encoding="utf-8") as handle:
            words = handle.read().split()
        if len(words) < 2:
            raise ValueError("missing task count or machine count")
        task_count, machine_count = int(words[0]), int(words[1])
        if task_count < 0 or machine_count < 0:
            raise ValueError("task and machine counts must be non-negative")
        values = [int(word) for word in words[2:]]
        if len(values) < task_count * machine_count:
            raise ValueError(
                f"expected {task_count * machine_count} operation times, "
                f"found {len(values)}"
            )
        problem = cls(machine_count=machine_count)
        for task_id in range(task_count):
            start = task_id * machine_count
            problem.append_task(Task(values[start:start + machine_count], task_id))
        return problem

    def task_count(self) -> int:
        return len(self.tasks)

    def append_task(self, task: Task) -> None:
        self.tasks.append(task)

    def _completion_times(self) -> Iterable[list[int]]:
        """Yield, after each task, the completion time on every machine."""
        if self.machine_count < 1:
            raise ValueError("a problem needs at least one machine")
        conveyors = [0] * self.machine_count
        for task in self.tasks:
            for machine in range(self.machine_count):
                ready = conveyors[machine - 1] if machine else 0
                conveyors[machine] = max(conveyors[machine], ready) + task.operation(machine)
            yield list(conveyors)

    def simulate(self) -> int:
        """Return the makespan of the tasks processed in their current order."""
        finish = [0] * max(self.machine_count, 1)
        for finish in self._completion_times():
            pass
        return finish[-1]

    def rearrange(self, new_order: Iterable[int]) -> None:
        """Reorder the tasks so that the i-th one is the old ``new_order[i]``-th."""
        old = list(self.tasks)
        self.tasks = [old[index] for index in new_order]

    def remove_task(self, to_remove: Task) -> None:
        """Remove every task equal to ``to_remove``."""
        self.tasks = [task for task in self.tasks if task != to_remove]

    def sort_by_operations_length(self) -> None:
        """Order tasks by total processing time, longest first."""
        self.tasks.sort(key=Task.operation_time_sum, reverse=True)

    def table(self) -> Array2D:
        """Return the operation times as a machines-by-tasks table."""
        result = Array2D(self.machine_count, self.task_count())
        for col, task in enumerate(self.tasks):
            for row in range(self.machine_count):
                result.set_at(row, col, task.operation(row))
        return result

    def paths_in(self) -> Array2D:
        """Return the completion time of every task on every machine."""
        result = Array2D(self.machine_count, self.task_count())
        for col, finish in enumerate(self._completion_times()):
            for row, value in enumerate(finish):
                result.set_at(row, col, value)
        return result

    def paths_out(self) -> Array2D:
        """Return, for every cell, the path length from it to the schedule's end.

        A cell's value is the remaining work of its machine from that task on,
        plus the last task's work on the later machines.
        """
        result = Array2D(self.machine_count, self.task_count())
        if not self.tasks:
            return result
        last = self.tasks[-1]
        tail = 0
        for machine in reversed(range(self.machine_count)):
            current = tail
            for col in reversed(range(self.task_count())):
                current += self.tasks[col].operation(machine)
                result.set_at(machine, col, current)
            tail += last.operation(machine)
        return result

    def __str__(self) -> str:
        lines = [
            f"Task count: {self.task_count()}\n",
            f"Machine count: {self.machine_count}\n",
        ]
        lines.extend(f"{task}\n" for task in self.tasks)
        return "".join(lines)