"""
Knight's tour search: Warnsdorff-ordered backtracking with orphan pruning

The solver extends the path one square at a time. Candidate squares are tried
in order of fewest onward moves, and a candidate is rejected early when taking
it would leave some neighboring empty square with no way in or out.
"""

import sys
import time
from typing import Dict, Optional

from .board import TourBoard


PROGRESS_EVERY = 10000
RECURSION_HEADROOM = 500


class TourSolver:
    def __init__(self, board: TourBoard, verbose: bool = False, use_pruning: bool = True):
        self.board = board
        self.total = board.playable_count
        self.verbose = verbose
        self.use_pruning = use_pruning

        self.timed_out = False
        self.start_time = 0.0
        self.elapsed = 0.0
        self.timeout: Optional[float] = None
        self.max_attempts: Optional[int] = None
        self.stats: Dict[str, int] = {}
        self._reset_stats()

    def _reset_stats(self) -> None:
        self.stats = {
            'total_attempts': 0,
            'search_moves': 0,
            'backtracks': 0,
            'orphan_prunes': 0,
            'dead_ends': 0,
            'max_depth': 0,
        }

    # -------------------------------------------------------------------------
    # Main solving driver
    # -------------------------------------------------------------------------
    def solve(self, start_row: int, start_col: int,
              timeout_seconds: Optional[float] = None,
              max_attempts: Optional[int] = None) -> bool:
        """
        Search for a tour starting at (start_row, start_col).

        Args:
            start_row, start_col: board coordinates (border included)
            timeout_seconds: give up after this long (None = no limit)
            max_attempts: give up after this many search nodes (None = no limit)

        Returns:
            True if the board now holds a complete tour. False if the search
            space was exhausted, or it was cut short, in which case
            `timed_out` is set.
        """
        self.board.validate_start(start_row, start_col)

        self._reset_stats()
        self.timed_out = False
        self.timeout = timeout_seconds
        self.max_attempts = max_attempts
        self.start_time = time.time()

        self.board.place(start_row, start_col, 1)
        self.board.start = (start_row, start_col)

        if self.verbose:
            print(f"Starting knight's tour search: {self.board}")
            print(f"Start: ({start_row},{start_col}) | "
                  f"Pruning: {'ON' if self.use_pruning else 'OFF'}\n")

        # recursion depth grows with the number of playable squares
        old_limit = sys.getrecursionlimit()
        needed = self.total + RECURSION_HEADROOM
        if needed > old_limit:
            sys.setrecursionlimit(needed)
        try:
            result = self._backtrack(start_row, start_col, 2)
        finally:
            if needed > old_limit:
                sys.setrecursionlimit(old_limit)

        self.elapsed = time.time() - self.start_time

        if self.verbose:
            if result:
                print("\n✓ Tour found!")
            elif self.timed_out:
                print("\n✗ Search stopped early (budget exhausted)")
            else:
                print("\n✗ No tour from this start")
            self._print_stats()

        return result

    # -------------------------------------------------------------------------
    # Backtracking
    # -------------------------------------------------------------------------
    def _backtrack(self, row: int, col: int, count: int) -> bool:
        if count - 1 > self.stats['max_depth']:
            self.stats['max_depth'] = count - 1

        if count > self.total:
            return True

        if self._budget_exhausted():
            return False

        self.stats['total_attempts'] += 1

        if self.verbose and self.stats['total_attempts'] % PROGRESS_EVERY == 0:
            print(f"  Progress: {count - 1}/{self.total} | "
                  f"Attempts: {self.stats['total_attempts']} | "
                  f"Backtracks: {self.stats['backtracks']} | "
                  f"Prunes: {self.stats['orphan_prunes']}")

        candidates = self.board.neighbors(row, col)
        if not candidates:
            self.stats['dead_ends'] += 1
            return False

        # Warnsdorff: fewest onward moves first; sort is stable so ties keep move order
        candidates.sort(key=lambda nb: nb[2])

        for r, c, _ in candidates:
            self.board.place(r, c, count)
            self.stats['search_moves'] += 1

            if self._orphan_detected(count, r, c):
                self.board.clear(r, c)
                self.stats['orphan_prunes'] += 1
                continue

            if self._backtrack(r, c, count + 1):
                return True

            self.board.clear(r, c)
            self.stats['backtracks'] += 1

        return False

    def _orphan_detected(self, count: int, row: int, col: int) -> bool:
        """
        True if moving to (row, col) leaves an empty neighbor with no empty
        neighbors of its own. The last two moves are never pruned.
        """
        if not self.use_pruning or count >= self.total - 1:
            return False
        for _, _, onward in self.board.neighbors(row, col):
            if onward == 0:
                return True
        return False

    def _budget_exhausted(self) -> bool:
        if self.timed_out:
            return True
        if self.max_attempts is not None and self.stats['total_attempts'] >= self.max_attempts:
            self.timed_out = True
        elif self.timeout is not None and time.time() - self.start_time > self.timeout:
            self.timed_out = True
        return self.timed_out

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------
    def _print_stats(self) -> None:
        """Print solving statistics."""
        print("\nSolving Statistics:")
        print(f"  Search moves: {self.stats['search_moves']}")
        print(f"  Backtracks: {self.stats['backtracks']}")
        print(f"  Orphan prunes: {self.stats['orphan_prunes']}")
        print(f"  Dead ends: {self.stats['dead_ends']}")
        print(f"  Deepest path: {self.stats['max_depth']}/{self.total}")
        print(f"  Total attempts: {self.stats['total_attempts']}")
        print(f"  Elapsed: {self.elapsed:.3f}s")


def solve_tour(size: int, start_row: int, start_col: int,
               verbose: bool = False, use_pruning: bool = True,
               timeout_seconds: Optional[float] = None,
               max_attempts: Optional[int] = None) -> Optional[TourBoard]:
    """
    Build a board of the given size and search for a tour from the start square.

    Returns the fully numbered board, or None when no tour was found.
    Raises TourConfigError for a board or start square that cannot be searched.
    """
    board = TourBoard(size)
    solver = TourSolver(board, verbose=verbose, use_pruning=use_pruning)
    if solver.solve(start_row, start_col,
                    timeout_seconds=timeout_seconds,
                    max_attempts=max_attempts):
        return board
    return None
