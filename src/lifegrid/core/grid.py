"""Grid engine for Conway's Game of Life."""

from enum import IntEnum
from typing import Iterator, Optional, TextIO, Tuple
import logging
import sys

import numpy as np
import torch
import torch.nn.functional as F

logger = logging.getLogger(__name__)


class Cell(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


class Grid:
    """A finite 2D board of cells with a fixed, non-wrapping boundary.

    Cells are stored densely in a numpy array shaped ``(rows, cols)``.
    Positions outside the board are never stored: inserts there are ignored
    and reads there report a dead cell.
    """

    def __init__(self, cols: int, rows: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            cols: Number of columns
            rows: Number of rows

        Raises:
            ValueError: If either dimension is negative
        """
        if cols < 0 or rows < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {cols}x{rows}")

        self.cols = cols
        self.rows = rows
        self._cells = np.zeros((rows, cols), dtype=np.int8)

        # The tick is computed on a single thread
        torch.set_num_threads(1)
        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the board, indexed ``[row, col]``."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (cols, rows)."""
        return (self.cols, self.rows)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, col: int, row: int) -> bool:
        """Whether (col, row) is a position stored by this grid."""
        return 0 <= col < self.cols and 0 <= row < self.rows

    def insert(self, col: int, row: int) -> None:
        """Mark the cell at (col, row) alive.

        Positions outside the grid are ignored.
        """
        if not self.in_bounds(col, row):
            logger.debug("Ignoring insert at (%d, %d) outside %dx%d grid", col, row, self.cols, self.rows)
            return

        self._cells[row, col] = Cell.ALIVE

    def get(self, col: int, row: int) -> bool:
        """Get the state of a cell.

        Args:
            col: Column coordinate
            row: Row coordinate

        Returns:
            True if the cell is alive, False if it is dead or out of bounds
        """
        if not self.in_bounds(col, row):
            return False

        return bool(self._cells[row, col])

    def cell(self, col: int, row: int) -> Cell:
        """Get the state of a cell as a Cell value."""
        return Cell.ALIVE if self.get(col, row) else Cell.DEAD

    def count_neighbors(self, col: int, row: int) -> int:
        """Count living cells in the Moore neighborhood of (col, row).

        Neighbors outside the grid count as dead.

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                if self.get(col + dx, row + dy):
                    count += 1

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for every cell with a torch convolution.

        Zero padding keeps the boundary fixed: positions past the edge
        contribute nothing to the count.

        Returns:
            Array shaped (rows, cols) of neighbor counts
        """
        if self._cells.size == 0:
            return np.zeros((self.rows, self.cols), dtype=np.int8)

        board = torch.from_numpy(self._cells.astype(np.float32)).reshape(1, 1, self.rows, self.cols)
        neighbors = F.conv2d(board, self._kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def tick(self) -> None:
        """Advance the board by one generation.

        Every next state is computed from the current board into a new array,
        which then replaces the board.
        """
        if self._cells.size == 0:
            return

        neighbor_counts = self.count_all_neighbors()
        alive = self._cells == Cell.ALIVE

        # Survival: live cell with 2 or 3 neighbors
        survives = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))

        # Birth: dead cell with exactly 3 neighbors
        born = ~alive & (neighbor_counts == 3)

        self._cells = (survives | born).astype(np.int8)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(Cell.DEAD)

    def randomize(self, probability: float = 0.1, seed: Optional[int] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for a reproducible fill

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        rng = np.random.default_rng(seed)
        self._cells = (rng.random((self.rows, self.cols)) < probability).astype(np.int8)

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (col, row) for every living cell in row-major order."""
        rows, cols = np.nonzero(self._cells)
        for row, col in zip(rows, cols):
            yield (int(col), int(row))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_col, min_row, max_col, max_row) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(cols) == 0:
            return None

        return (int(cols.min()), int(rows.min()), int(cols.max()), int(rows.max()))

    def copy(self) -> "Grid":
        """Return an independent grid with the same dimensions and cells."""
        duplicate = Grid(self.cols, self.rows)
        duplicate._cells = self._cells.copy()
        return duplicate

    def render(self, alive: str = "*", dead: str = ".") -> str:
        """Render the board row by row, one character per cell."""
        return "\n".join("".join(alive if value else dead for value in row) for row in self._cells)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the board to stdout (or file), one newline-terminated line per row."""
        if self.rows == 0:
            return
        out = file if file is not None else sys.stdout
        out.write(self.render() + "\n")

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return self.render()
