"""Backtracking solvers for Wordle-style patterns and worker shift schedules."""

__version__ = "0.1.0"
__all__ = ["dictionary", "wordle", "schedwork"]