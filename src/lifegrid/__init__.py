"""Conway's Game of Life on a finite, fixed-boundary grid."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid
from .core.game import Cycle, Outcome, RunResult, Simulation
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "Cycle", "Outcome", "RunResult", "Simulation", "Pattern", "PatternLibrary"]
