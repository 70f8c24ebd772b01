"""Solvers for Advent of Code 2024 puzzles, days 1 to 15."""

__version__ = "0.1.0"