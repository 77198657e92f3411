"""Permutation flow-shop scheduling: simulation, exact search and makespan heuristics."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli", "problem", "solution", "task", "utils"]