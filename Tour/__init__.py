"""
Knight's Tour Solver Package

Warnsdorff-ordered backtracking search with orphan pruning for knight's tours
on square boards.
"""

from .board import TourBoard, TourConfigError, KNIGHT_MOVES, BLOCKED, EMPTY, BORDER
from .solver import TourSolver, solve_tour
from .checks import TourChecker
from .output import TourFormatter, NO_RESULT

__version__ = "1.0.0"
__all__ = [
    'TourBoard',
    'TourConfigError',
    'KNIGHT_MOVES',
    'BLOCKED',
    'EMPTY',
    'BORDER',
    'TourSolver',
    'solve_tour',
    'TourChecker',
    'TourFormatter',
    'NO_RESULT',
]
