"""Breadth-first search solver for the missionaries and cannibals puzzle."""

from river_crossing.crossing import BoatSide, State, is_safe, get_valid_moves, solve_missionaries_cannibals

__version__ = "0.1.0"
