import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Tour import solve_tour


@pytest.fixture(scope="session")
def solved_board():
    """Full 8x8 tour from the top-left playable corner. Copy before mutating."""
    board = solve_tour(12, 2, 2, timeout_seconds=30)
    assert board is not None
    return board
