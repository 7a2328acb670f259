"""Generation-by-generation driver around a Grid."""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Dict, Optional, Tuple
import logging

from .grid import Grid

logger = logging.getLogger(__name__)

MAX_REMEMBERED_STATES = 1000


class Outcome(str, Enum):
    """Why a run stopped."""

    EXTINCT = "extinct"
    CYCLE = "cycle"
    LIMIT = "limit"


@dataclass(frozen=True)
class Cycle:
    """A board state first seen at generation ``start`` that recurs every ``period`` generations."""

    start: int
    period: int


@dataclass
class RunResult:
    """Where a call to Simulation.run ended up."""

    generation: int
    outcome: Outcome
    initial_population: int
    population: int
    cycle: Optional[Cycle] = None
    bounding_box: Optional[Tuple[int, int, int, int]] = None


class Simulation:
    """Advances a grid and notices when the board returns to an earlier state.

    Up to ``memory`` distinct board states are remembered (oldest forgotten
    first), each keyed by its raw bytes.
    """

    def __init__(self, grid: Grid, memory: int = MAX_REMEMBERED_STATES) -> None:
        self.grid = grid
        self.generation = 0
        self.cycle: Optional[Cycle] = None
        self._memory = memory
        self._order: Deque[bytes] = deque()
        self._first_seen: Dict[bytes, int] = {}

    @property
    def population(self) -> int:
        return self.grid.population

    def step(self) -> Optional[Cycle]:
        """Tick the grid once.

        Returns:
            The detected cycle, or None while the board has not repeated
        """
        if self.cycle is None:
            # Taken before the tick so hand edits since the last step count
            self._remember(self.grid.cells.tobytes())

        self.grid.tick()
        self.generation += 1

        if self.cycle is None:
            start = self._first_seen.get(self.grid.cells.tobytes())
            if start is not None:
                self.cycle = Cycle(start=start, period=self.generation - start)
                logger.debug("Generation %d repeats generation %d", self.generation, start)

        return self.cycle

    def _remember(self, state: bytes) -> None:
        if state in self._first_seen:
            return
        if len(self._order) >= self._memory:
            self._first_seen.pop(self._order.popleft(), None)
        self._order.append(state)
        self._first_seen[state] = self.generation

    def forget(self) -> None:
        """Drop remembered states and any detected cycle, e.g. after editing the grid."""
        self.cycle = None
        self._order.clear()
        self._first_seen.clear()

    def restart(self, clear: bool = True) -> None:
        """Go back to generation 0, optionally emptying the grid."""
        if clear:
            self.grid.clear()
        self.generation = 0
        self.forget()
        logger.debug("Simulation restarted (grid cleared: %s)", clear)

    def run(self, limit: int, on_step: Optional[Callable[["Simulation"], None]] = None) -> RunResult:
        """Step until the board dies out, repeats, or ``limit`` steps have been taken.

        An empty board counts as extinct even though it also repeats.

        Args:
            limit: Maximum number of steps
            on_step: Called with this simulation after every step
        """
        initial_population = self.population
        outcome = Outcome.LIMIT

        for _ in range(limit):
            self.step()
            if on_step is not None:
                on_step(self)

            if self.population == 0:
                outcome = Outcome.EXTINCT
                break
            if self.cycle is not None:
                outcome = Outcome.CYCLE
                break

        return RunResult(
            generation=self.generation,
            outcome=outcome,
            initial_population=initial_population,
            population=self.population,
            cycle=self.cycle,
            bounding_box=self.grid.get_bounding_box(),
        )
