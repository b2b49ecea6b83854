import sys

import numpy as np
import pytest

from Tour import (
    TourBoard, TourSolver, TourChecker, TourConfigError, KNIGHT_MOVES,
    BLOCKED, EMPTY, BORDER, solve_tour,
)


def _is_knight_step(a, b):
    return (b[1] - a[1], b[0] - a[0]) in set(KNIGHT_MOVES)


def test_single_square_board_succeeds_without_moves():
    board = TourBoard(5)
    solver = TourSolver(board)
    assert solver.solve(2, 2)
    assert board.visit_number(2, 2) == 1
    assert solver.stats['search_moves'] == 0
    assert solver.stats['total_attempts'] == 0


def test_full_tour_numbers_every_square_once(solved_board):
    values = solved_board.playable_grid().ravel()
    assert sorted(values.tolist()) == list(range(1, 65))
    assert solved_board.visit_number(2, 2) == 1
    assert solved_board.is_complete()


def test_full_tour_leaves_border_blocked(solved_board):
    grid = solved_board.grid
    assert np.all(grid[:BORDER, :] == BLOCKED)
    assert np.all(grid[-BORDER:, :] == BLOCKED)
    assert np.all(grid[:, :BORDER] == BLOCKED)
    assert np.all(grid[:, -BORDER:] == BLOCKED)


def test_consecutive_squares_are_knight_moves(solved_board):
    path = solved_board.path()
    assert len(path) == 64
    for a, b in zip(path, path[1:]):
        assert _is_knight_step(a, b), f"{a} -> {b}"


def test_checker_accepts_solver_output(solved_board):
    assert TourChecker.validate(solved_board) == []


@pytest.mark.parametrize("start", [(9, 9), (2, 9), (9, 2)])
def test_other_starts_on_default_board(start):
    board = solve_tour(12, *start, timeout_seconds=30)
    assert board is not None
    assert board.path()[0] == start
    assert TourChecker.is_valid_tour(board)


def test_same_start_gives_same_tour():
    first = solve_tour(12, 9, 2, timeout_seconds=30)
    second = solve_tour(12, 9, 2, timeout_seconds=30)
    assert first is not None and second is not None
    assert np.array_equal(first.grid, second.grid)


def test_four_by_four_outcome_is_reproducible():
    outcomes = []
    for _ in range(3):
        board = TourBoard(8)
        solver = TourSolver(board)
        outcomes.append(solver.solve(BORDER, BORDER))
        assert not solver.timed_out
    assert len(set(outcomes)) == 1
    # no knight's tour exists on a 4x4 board
    assert outcomes[0] is False


def test_failed_search_undoes_every_move():
    board = TourBoard(8)
    solver = TourSolver(board)
    assert not solver.solve(2, 2)
    assert board.path() == [(2, 2)]
    assert int(np.count_nonzero(board.playable_grid() == EMPTY)) == 15
    assert solver.stats['backtracks'] > 0


def test_three_by_three_has_no_tour():
    # the centre square is unreachable
    assert solve_tour(7, 2, 2) is None


def test_size_three_is_config_error():
    with pytest.raises(TourConfigError):
        solve_tour(3, 0, 0)


@pytest.mark.parametrize("start", [(0, 0), (1, 5), (10, 10), (2, 12), (-1, 3)])
def test_start_outside_playable_region_is_config_error(start):
    with pytest.raises(TourConfigError):
        solve_tour(12, *start)


def test_start_on_visited_square_is_config_error():
    board = TourBoard(12)
    board.place(3, 3, 5)
    with pytest.raises(TourConfigError):
        TourSolver(board).solve(3, 3)


@pytest.mark.parametrize("size", [5, 6, 7, 8])
def test_pruning_never_changes_the_outcome_on_small_boards(size):
    for row, col in TourBoard(size).playable_squares():
        with_pruning = solve_tour(size, row, col, use_pruning=True)
        without_pruning = solve_tour(size, row, col, use_pruning=False)
        assert (with_pruning is None) == (without_pruning is None), (row, col)


def test_pruning_agrees_on_five_by_five_corner():
    with_pruning = solve_tour(9, 2, 2, use_pruning=True, timeout_seconds=30)
    without_pruning = solve_tour(9, 2, 2, use_pruning=False, timeout_seconds=30)
    assert with_pruning is not None
    assert without_pruning is not None
    assert TourChecker.is_valid_tour(with_pruning)
    assert TourChecker.is_valid_tour(without_pruning)


def test_attempt_budget_stops_search_and_restores_board():
    board = TourBoard(12)
    solver = TourSolver(board)
    assert not solver.solve(2, 2, max_attempts=1)
    assert solver.timed_out
    assert board.path() == [(2, 2)]


def test_zero_timeout_still_accepts_trivial_board():
    board = TourBoard(5)
    solver = TourSolver(board)
    assert solver.solve(2, 2, timeout_seconds=0, max_attempts=0)
    assert not solver.timed_out


def test_exhausted_search_is_not_reported_as_timeout():
    board = TourBoard(7)
    solver = TourSolver(board)
    assert not solver.solve(2, 2, timeout_seconds=30)
    assert not solver.timed_out


def test_stats_are_reset_between_solvers():
    first = TourSolver(TourBoard(12))
    first.solve(2, 2)
    second = TourSolver(TourBoard(12))
    second.solve(2, 2)
    assert first.stats == second.stats
    assert first.stats['max_depth'] == 64


def test_recursion_limit_restored_after_large_board():
    before = sys.getrecursionlimit()
    board = TourBoard(40)  # 36x36 playable, deeper than the default limit
    solver = TourSolver(board)
    solver.solve(2, 2, max_attempts=2000)
    assert sys.getrecursionlimit() == before


def test_verbose_output(capsys):
    solver = TourSolver(TourBoard(12), verbose=True)
    solver.solve(2, 2)
    out = capsys.readouterr().out
    assert "Starting knight's tour search" in out
    assert "Tour found" in out
    assert "Solving Statistics" in out


def test_quiet_by_default(capsys):
    solve_tour(12, 2, 2)
    assert capsys.readouterr().out == ""
