"""Core Game of Life logic."""

from .grid import Cell, Grid
from .game import Cycle, Outcome, RunResult, Simulation
from .patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "Cycle", "Outcome", "RunResult", "Simulation", "Pattern", "PatternLibrary"]
