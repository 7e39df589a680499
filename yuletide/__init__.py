"""Advent of Code puzzle solvers for 2022 and 2025, with a small LP toolkit."""

__version__ = "0.1.0"