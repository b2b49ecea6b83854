"""
Validation of finished tours

Used by the output formatter to report whether a board holds a real tour,
and by the tests.
"""

from typing import List, Tuple

import numpy as np

from .board import TourBoard, KNIGHT_MOVES, BLOCKED, BORDER


# -----------------------------------------------------------------------------
# Tour Checking
# -----------------------------------------------------------------------------
class TourChecker:
    """Checks a numbered board against the rules of a knight's tour."""

    _OFFSETS = {(dy, dx) for dx, dy in KNIGHT_MOVES}

    @staticmethod
    def is_knight_move(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        """True if b is one knight move away from a (both (row, col))"""
        return (b[0] - a[0], b[1] - a[1]) in TourChecker._OFFSETS

    @staticmethod
    def validate(board: TourBoard) -> List[str]:
        """
        Collect every rule the board breaks. An empty list means the
        board holds a complete tour.
        """
        problems: List[str] = []

        # Border must stay blocked
        border = np.ones(board.grid.shape, dtype=bool)
        border[BORDER:board.size - BORDER, BORDER:board.size - BORDER] = False
        touched = int(np.count_nonzero(board.grid[border] != BLOCKED))
        if touched:
            problems.append(f"{touched} blocked cell(s) were modified")

        # Playable region: exactly 1..total, each once
        values = board.playable_grid().ravel()
        if np.any(values == BLOCKED):
            problems.append("playable region contains blocked cells")
        unvisited = int(np.count_nonzero(values == 0))
        if unvisited:
            problems.append(f"{unvisited} playable cell(s) never visited")

        numbered = values[values > 0]
        expected = np.arange(1, board.playable_count + 1)
        if len(numbered) == board.playable_count and not np.array_equal(np.sort(numbered), expected):
            problems.append("visit numbers are not exactly 1..%d" % board.playable_count)
        if len(np.unique(numbered)) != len(numbered):
            problems.append("visit numbers repeat")

        # Consecutive squares must be a knight move apart
        path = board.path()
        for i in range(1, len(path)):
            if not TourChecker.is_knight_move(path[i - 1], path[i]):
                problems.append(
                    f"step {i} -> {i + 1} is not a knight move: {path[i - 1]} -> {path[i]}"
                )
                break

        if board.start is not None and path and path[0] != board.start:
            problems.append(f"tour starts at {path[0]}, expected {board.start}")

        return problems

    @staticmethod
    def is_valid_tour(board: TourBoard) -> bool:
        return not TourChecker.validate(board)
