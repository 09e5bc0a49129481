"""Solvers for the Advent of Code 2020 daily puzzles, one module per day."""

__version__ = "0.1.0"