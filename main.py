#!/usr/bin/env python3
"""
Knight's Tour Solver - Main Entry Point

Usage:
    python main.py                      # BOARD_SIZE, random start
    python main.py 12                   # given size, random start
    python main.py 12 2 2               # given size and start square
    python main.py --sweep [size]       # solve from every start square
    python main.py --compare [size]     # pruning on vs. off from one start

Start squares are board coordinates including the blocked border of width 2,
so on a size 12 board the playable rows and columns are 2..9.
"""

import sys
import random
from pathlib import Path
from typing import Optional, Tuple

from Tour import TourBoard, TourSolver, TourConfigError, TourFormatter, NO_RESULT, BORDER
from Render import save_tour_image

# ============================================================================
# CONFIGURATION
# ============================================================================
BOARD_SIZE = 12                 # Board side including the border (8x8 playable)
OUTPUT_DIR = "data/tours"       # Base output directory
SAVE_OUTPUT = False             # Write solution.json / solution.txt
RENDER_IMAGE = False            # Write tour.png (requires SAVE_OUTPUT)
VERBOSE = False                 # Print search progress and stats

USE_PRUNING = True
# Orphan detection: reject a move that leaves an empty square unreachable
# - True: prunes dead branches one level early (much faster on 8x8 and up)
# - False: plain Warnsdorff backtracking (same answers, slower)

TIMEOUT_SECONDS = 60
# Maximum time to spend on a single start square (None = unlimited)

MAX_RESTARTS = 5
# Fresh random start squares to try after a failed search
# ============================================================================


def random_start(size: int, rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """Pick a random playable square in board coordinates"""
    rng = rng or random.Random()
    side = size - 2 * BORDER
    if side <= 0:
        raise TourConfigError(f"Board size {size} leaves no playable squares")
    return BORDER + rng.randrange(side), BORDER + rng.randrange(side)


def solve_from(size: int, start_row: int, start_col: int,
               output_dir: Optional[str] = None,
               verbose: bool = VERBOSE,
               use_pruning: bool = USE_PRUNING,
               timeout_seconds: Optional[float] = TIMEOUT_SECONDS,
               save_output: bool = SAVE_OUTPUT,
               render_image: bool = RENDER_IMAGE):
    """
    Solve from one start square and optionally save results.

    Returns (solved, board, solver). TourConfigError propagates to the caller.
    """
    board = TourBoard(size)
    solver = TourSolver(board, verbose=verbose, use_pruning=use_pruning)

    try:
        solved = solver.solve(start_row, start_col, timeout_seconds=timeout_seconds)
    except KeyboardInterrupt:
        print(f"\n\n{'='*60}")
        print("⚠ Search interrupted by user (Ctrl+C)")
        print(f"{'='*60}")
        print(f"\nDeepest path when stopped: {solver.stats['max_depth']}/{board.playable_count}")
        solver._print_stats()
        return False, board, solver

    if solved and save_output:
        if output_dir is None:
            project_root = Path(__file__).parent
            output_dir = project_root / OUTPUT_DIR / f"size{size}_r{start_row}_c{start_col}"
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        TourFormatter.save_solution(board, solver.stats, str(output_dir / "solution.json"))
        TourFormatter.save_human_readable(board, solver.stats, str(output_dir / "solution.txt"))
        if render_image:
            save_tour_image(board, str(output_dir / "tour.png"))

    return solved, board, solver


def solve_random_tour(size: int = BOARD_SIZE,
                      max_restarts: int = MAX_RESTARTS,
                      rng: Optional[random.Random] = None,
                      **kwargs):
    """
    Solve from a random start, retrying with fresh random starts on failure.

    Returns (solved, board, solver) of the last attempt.
    """
    rng = rng or random.Random()
    solved, board, solver = False, None, None

    for attempt in range(max_restarts + 1):
        row, col = random_start(size, rng)
        if attempt:
            print(f"Retry {attempt}/{max_restarts} from ({row},{col})")
        solved, board, solver = solve_from(size, row, col, **kwargs)
        if solved:
            break

    return solved, board, solver


def sweep_start_squares(size: int = BOARD_SIZE,
                        use_pruning: bool = USE_PRUNING,
                        timeout_seconds: Optional[float] = TIMEOUT_SECONDS):
    """
    Solve from every playable start square and print a summary.
    """
    squares = TourBoard(size).playable_squares()
    print(f"\nSweeping {len(squares)} start square(s) on a {size}x{size} board")
    print(f"  Pruning: {'ON' if use_pruning else 'OFF'}")
    print(f"  Timeout per start: {timeout_seconds}s\n")

    results = []
    for i, (row, col) in enumerate(squares, 1):
        solved, board, solver = solve_from(
            size, row, col,
            verbose=False,
            use_pruning=use_pruning,
            timeout_seconds=timeout_seconds,
            save_output=False,
        )
        results.append({
            'start': (row, col),
            'solved': bool(solved),
            'timed_out': solver.timed_out,
            'backtracks': solver.stats['backtracks'],
            'attempts': solver.stats['total_attempts'],
            'elapsed': solver.elapsed,
        })

    # ---------------------------
    # Print summary
    # ---------------------------
    print(f"{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    solved_count = sum(1 for r in results if r['solved'])
    total_count = len(results)
    solve_rate = (solved_count / total_count * 100) if total_count > 0 else 0

    print(f"Solved: {solved_count}/{total_count} start squares ({solve_rate:.1f}%)")
    print(f"{'='*60}\n")

    for r in results:
        status = "✓" if r['solved'] else ("⏱" if r['timed_out'] else "✗")
        print(f"{status} ({r['start'][0]:2d},{r['start'][1]:2d})"
              f" - {r['attempts']} attempts, {r['backtracks']} backtracks, {r['elapsed']:.3f}s")

    return results


def run_comparison_test(size: int = BOARD_SIZE, start: Optional[Tuple[int, int]] = None,
                        timeout_seconds: Optional[float] = TIMEOUT_SECONDS):
    """
    Solve the same start square with and without orphan pruning.
    """
    row, col = start or random_start(size)

    print(f"\n{'='*60}")
    print(f"COMPARISON TEST: size {size}, start ({row},{col})")
    print(f"{'='*60}\n")

    results = []
    for name, use_pruning in (("Pruning", True), ("No pruning", False)):
        solved, board, solver = solve_from(
            size, row, col,
            verbose=False,
            use_pruning=use_pruning,
            timeout_seconds=timeout_seconds,
            save_output=False,
        )
        results.append({
            'config': name,
            'solved': solved,
            'timed_out': solver.timed_out,
            'backtracks': solver.stats['backtracks'],
            'prunes': solver.stats['orphan_prunes'],
            'total_attempts': solver.stats['total_attempts'],
            'elapsed': solver.elapsed,
        })

    print(f"{'Configuration':<15} {'Result':<10} {'Prunes':<10} {'Backtr.':<10} {'Total':<10} {'Time':<8}")
    print(f"{'-'*15} {'-'*10} {'-'*10} {'-'*10} {'-'*10} {'-'*8}")
    for r in results:
        status = "SOLVED" if r['solved'] else ("TIMEOUT" if r['timed_out'] else "FAILED")
        print(f"{r['config']:<15} {status:<10} {r['prunes']:<10} {r['backtracks']:<10} "
              f"{r['total_attempts']:<10} {r['elapsed']:<8.3f}")

    print(f"\n{'='*60}")
    return results


def _parse_size(args, default: int = BOARD_SIZE) -> int:
    if not args:
        return default
    try:
        return int(args[0])
    except ValueError:
        raise TourConfigError(f"Board size must be an integer, got {args[0]!r}")


def main():
    """Main entry point"""
    args = sys.argv[1:]

    try:
        if args and args[0] in ("--sweep", "-s"):
            sweep_start_squares(_parse_size(args[1:]))
            return

        if args and args[0] in ("--compare", "-c"):
            run_comparison_test(_parse_size(args[1:]))
            return

        size = _parse_size(args)
        if len(args) >= 3:
            try:
                row, col = int(args[1]), int(args[2])
            except ValueError:
                raise TourConfigError(f"Start square must be two integers, got {args[1:3]}")
            solved, board, solver = solve_from(size, row, col)
        elif len(args) == 2:
            print("Usage: python main.py [size] [row col]")
            sys.exit(1)
        else:
            solved, board, solver = solve_random_tour(size)

    except TourConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if solved:
        print(TourFormatter.format_grid(board))
        if VERBOSE:
            print("\n" + TourFormatter.format_solution_human_readable(board, solver.stats))
    else:
        print(NO_RESULT)


if __name__ == "__main__":
    main()
