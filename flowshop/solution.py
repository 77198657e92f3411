"""The result of a scheduling algorithm."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Solution:
    """A schedule's makespan."""

    c_max: int = 0

    def __str__(self) -> str:
        return f"C_max = {self.c_max}"