"""A single job of a permutation flow-shop problem."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Task:
    """A job made of one operation time per machine, in machine order."""

    operations: list[int] = field(default_factory=list)
    id: int = 0

    def operation(self, index: int) -> int:
        """Return the processing time of the task on machine ``index``."""
        if not 0 <= index < len(self.operations):
            raise IndexError(f"operation index {index} out of range")
        return self.operations[index]

    def operation_time_sum(self) -> int:
        """Return the total processing time over all machines."""
        return sum(self.operations)

    def operate(self) -> int:
        """Pop the last operation, returning the time indexed by its value.

        An empty task yields 0.
        """
        if not self.operations:
            return 0
        popped = self.operations[self.operations[-1]]
        self.operations.pop()
        return popped

    def __str__(self) -> str:
        return f"{self.id + 1}) " + "".join(f"{op}, " for op in self.operations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id and self.operations == other.operations

    __hash__ = None  # type: ignore[assignment]


def johnson_first_key(task: Task) -> int:
    """Sort key used by Johnson's rule: the time on the first machine."""
    return task.operation(0)