import json
from typing import Dict, Optional
from datetime import datetime

from .board import TourBoard, BORDER
from .checks import TourChecker


NO_RESULT = "no result"


class TourFormatter:
    """Formats tour results for output"""

    @staticmethod
    def format_grid(board: TourBoard) -> str:
        """
        Numbered grid, one line per playable row, blocked cells skipped.
        Each value is right-aligned in two columns and followed by a space.
        """
        lines = []
        for row in board.grid:
            cells = [f"{int(v):2d} " for v in row if v >= 0]
            if cells:
                lines.append("".join(cells))
        return "\n".join(lines)

    @staticmethod
    def format_path(board: TourBoard) -> str:
        """Path as playable-region coordinates, e.g. (0,0) -> (1,2) -> ..."""
        return " -> ".join(f"({r - BORDER},{c - BORDER})" for r, c in board.path())

    @staticmethod
    def format_solution_json(board: TourBoard, stats: Optional[Dict] = None) -> Dict:
        """
        Format solution as JSON
        """
        start = board.start
        solution = {
            'tour_info': {
                'board_size': board.size,
                'playable_side': board.side,
                'playable_squares': board.playable_count,
                'start': {'row': start[0], 'col': start[1]} if start else None,
                'solved': board.is_complete(),
                'timestamp': datetime.now().isoformat()
            },
            'solving_stats': stats or {},
            'path': [],
            'grid': board.to_rows(),
            'validation': TourChecker.validate(board),
        }

        for step, (r, c) in enumerate(board.path(), 1):
            solution['path'].append({'step': step, 'row': r, 'col': c})

        return solution

    @staticmethod
    def format_solution_human_readable(board: TourBoard, stats: Optional[Dict] = None) -> str:
        """
        Format solution as human-readable text
        """
        lines = []
        lines.append("=" * 60)
        lines.append("KNIGHT'S TOUR SOLUTION")
        lines.append("=" * 60)
        lines.append(f"\nBoard {board.size}x{board.size}, "
                     f"playable region {board.side}x{board.side} ({board.playable_count} squares)")
        if board.start:
            lines.append(f"Start square: ({board.start[0]},{board.start[1]})")
        lines.append(f"Visited {board.visited_count()}/{board.playable_count} squares\n")

        if stats:
            lines.append("SEARCH STATISTICS:")
            lines.append("-" * 60)
            for key, value in stats.items():
                lines.append(f"  {key.replace('_', ' ').capitalize():20s} {value}")
            lines.append("")

        lines.append("VALIDATION:")
        lines.append("-" * 60)
        problems = TourChecker.validate(board)
        if problems:
            for p in problems:
                lines.append(f"  ✗ {p}")
        else:
            lines.append("  ✓ Every square visited once, every step a knight move")

        lines.append("\n" + "=" * 60)
        lines.append("GRID:")
        lines.append("-" * 60)
        lines.append(TourFormatter.format_grid(board))
        lines.append("=" * 60)

        return "\n".join(lines)

    @staticmethod
    def save_solution(board: TourBoard, stats: Optional[Dict], output_path: str):
        """
        Save solution to JSON file
        """
        solution = TourFormatter.format_solution_json(board, stats)

        with open(output_path, 'w') as f:
            json.dump(solution, f, indent=2)

        print(f"\n✓ Solution saved to: {output_path}")

    @staticmethod
    def save_human_readable(board: TourBoard, stats: Optional[Dict], output_path: str):
        """
        Save human-readable solution to text file
        """
        text = TourFormatter.format_solution_human_readable(board, stats)

        with open(output_path, 'w') as f:
            f.write(text)

        print(f"✓ Human-readable solution saved to: {output_path}")
