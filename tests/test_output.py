import json

from Tour import TourBoard, TourFormatter, solve_tour


def test_grid_skips_blocked_cells(solved_board):
    lines = TourFormatter.format_grid(solved_board).split("\n")
    assert len(lines) == 8
    for line in lines:
        assert len(line) == 8 * 3
        assert all(1 <= int(v) <= 64 for v in line.split())
    assert lines[0].startswith(" 1 ")


def test_grid_of_trivial_board():
    board = solve_tour(5, 2, 2)
    assert TourFormatter.format_grid(board) == " 1 "


def test_grid_shows_unvisited_as_zero():
    board = TourBoard(6)
    board.place(2, 2, 1)
    assert TourFormatter.format_grid(board) == " 1  0 \n 0  0 "


def test_path_uses_playable_coordinates(solved_board):
    text = TourFormatter.format_path(solved_board)
    steps = text.split(" -> ")
    assert len(steps) == 64
    assert steps[0] == "(0,0)"


def test_solution_json(solved_board):
    stats = {'backtracks': 3, 'search_moves': 70}
    doc = TourFormatter.format_solution_json(solved_board, stats)
    info = doc['tour_info']
    assert info['board_size'] == 12
    assert info['playable_side'] == 8
    assert info['playable_squares'] == 64
    assert info['start'] == {'row': 2, 'col': 2}
    assert info['solved'] is True
    assert doc['solving_stats'] == stats
    assert doc['validation'] == []
    assert doc['path'][0] == {'step': 1, 'row': 2, 'col': 2}
    assert len(doc['path']) == 64
    assert doc['grid'][0][0] == 1
    json.dumps(doc)


def test_human_readable_report(solved_board):
    text = TourFormatter.format_solution_human_readable(solved_board, {'backtracks': 0})
    assert "KNIGHT'S TOUR SOLUTION" in text
    assert "Start square: (2,2)" in text
    assert "Visited 64/64 squares" in text
    assert "Backtracks" in text
    assert "✓" in text
    assert TourFormatter.format_grid(solved_board) in text


def test_report_lists_problems_for_partial_board():
    board = TourBoard(12)
    board.place(2, 2, 1)
    board.start = (2, 2)
    text = TourFormatter.format_solution_human_readable(board)
    assert "✗" in text
    assert "never visited" in text


def test_save_files(solved_board, tmp_path):
    json_path = tmp_path / "solution.json"
    text_path = tmp_path / "solution.txt"
    TourFormatter.save_solution(solved_board, {}, str(json_path))
    TourFormatter.save_human_readable(solved_board, {}, str(text_path))

    with open(json_path) as f:
        doc = json.load(f)
    assert doc['tour_info']['solved'] is True
    assert "GRID:" in text_path.read_text()
