"""
Board representation for the knight's tour search

The board is a square numpy grid with a blocked border of width BORDER around
the playable region, so neighbor arithmetic never leaves the array.
"""
from typing import List, Tuple, Optional

import numpy as np


BLOCKED = -1
EMPTY = 0
BORDER = 2  # largest knight offset

# (dx, dy): dx moves the column, dy the row
KNIGHT_MOVES: Tuple[Tuple[int, int], ...] = (
    (1, -2),
    (2, -1),
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
)

Square = Tuple[int, int]
Neighbor = Tuple[int, int, int]  # row, col, onward degree


class TourConfigError(ValueError):
    """Raised for a board or start square that cannot be searched at all."""


class TourBoard:
    """Padded square board holding the visit numbering of a tour"""

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TourConfigError(f"Board size must be an integer, got {size!r}")
        if size <= 2 * BORDER:
            raise TourConfigError(
                f"Board size {size} leaves no playable squares "
                f"(need size > {2 * BORDER})"
            )

        self.size = int(size)
        self.side = self.size - 2 * BORDER
        self.playable_count = self.side * self.side

        self.grid = np.full((self.size, self.size), BLOCKED, dtype=np.int32)
        self.grid[BORDER:self.size - BORDER, BORDER:self.size - BORDER] = EMPTY

        self.start: Optional[Square] = None

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_playable(self, row: int, col: int) -> bool:
        """Check if a square lies inside the playable region"""
        lo, hi = BORDER, self.size - BORDER
        return lo <= row < hi and lo <= col < hi

    def is_empty(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.grid[row, col] == EMPTY

    def cell(self, row: int, col: int) -> int:
        """Raw cell value: BLOCKED, EMPTY or a visit number"""
        return int(self.grid[row, col])

    def visit_number(self, row: int, col: int) -> Optional[int]:
        """Visit number of a square, or None if it is blocked or unvisited"""
        value = int(self.grid[row, col])
        return value if value > 0 else None

    def playable_squares(self) -> List[Square]:
        """All playable squares, row-major"""
        rng = range(BORDER, self.size - BORDER)
        return [(r, c) for r in rng for c in rng]

    def validate_start(self, row: int, col: int) -> None:
        if not self.is_playable(row, col):
            lo, hi = BORDER, self.size - BORDER - 1
            raise TourConfigError(
                f"Start square ({row},{col}) is outside the playable region "
                f"[{lo}..{hi}] x [{lo}..{hi}]"
            )
        if self.grid[row, col] != EMPTY:
            raise TourConfigError(
                f"Start square ({row},{col}) is not empty "
                f"(value {int(self.grid[row, col])})"
            )

    # -------------------------------------------------------------------------
    # Move generation
    # -------------------------------------------------------------------------
    def count_reachable(self, row: int, col: int) -> int:
        """Count empty squares one knight move away"""
        if not self.is_playable(row, col):
            # border squares may sit next to the array edge
            return sum(1 for dx, dy in KNIGHT_MOVES if self.is_empty(row + dy, col + dx))

        grid = self.grid
        num = 0
        for dx, dy in KNIGHT_MOVES:
            if grid[row + dy, col + dx] == EMPTY:
                num += 1
        return num

    def neighbors(self, row: int, col: int) -> List[Neighbor]:
        """
        Empty squares one knight move away, in KNIGHT_MOVES order,
        each paired with its own count of empty neighbors.
        """
        grid = self.grid
        out: List[Neighbor] = []
        for dx, dy in KNIGHT_MOVES:
            r, c = row + dy, col + dx
            if grid[r, c] == EMPTY:
                out.append((r, c, self.count_reachable(r, c)))
        return out

    # -------------------------------------------------------------------------
    # Mutation (search only)
    # -------------------------------------------------------------------------
    def place(self, row: int, col: int, number: int) -> None:
        self.grid[row, col] = number

    def clear(self, row: int, col: int) -> None:
        self.grid[row, col] = EMPTY

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------
    def visited_count(self) -> int:
        return int(np.count_nonzero(self.grid > 0))

    def is_complete(self) -> bool:
        """Check if every playable square carries a visit number"""
        return self.visited_count() == self.playable_count

    def get_completion_percentage(self) -> float:
        return self.visited_count() / self.playable_count

    def path(self) -> List[Square]:
        """Visited squares ordered by visit number"""
        rows, cols = np.nonzero(self.grid > 0)
        order = np.argsort(self.grid[rows, cols], kind="stable")
        return [(int(rows[i]), int(cols[i])) for i in order]

    def playable_grid(self) -> np.ndarray:
        """View of the playable region without the border"""
        return self.grid[BORDER:self.size - BORDER, BORDER:self.size - BORDER]

    def to_rows(self) -> List[List[int]]:
        """Playable region as plain nested lists"""
        return self.playable_grid().tolist()

    def copy(self) -> "TourBoard":
        other = TourBoard(self.size)
        other.grid = self.grid.copy()
        other.start = self.start
        return other

    def __repr__(self):
        return (f"TourBoard(size={self.size}, playable={self.side}x{self.side}, "
                f"visited={self.visited_count()}/{self.playable_count})")
