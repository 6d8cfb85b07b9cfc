from pathlib import Path
import sys

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

# Ensure the project root is on the Python path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from generator import generate_maze
import render_maze


def test_maze_to_array_codes():
    grid = [list("XIX"), list("X.X"), list("XOX")]
    data = render_maze.maze_to_array(grid)
    assert data.shape == (3, 3)
    assert data[0, 1] == render_maze.MARKER_CODES["I"]
    assert data[2, 1] == render_maze.MARKER_CODES["O"]
    assert data[1, 1] == render_maze.MARKER_CODES["."]
    assert np.count_nonzero(data == render_maze.MARKER_CODES["X"]) == 6


def test_plot_maze_draws_labels():
    grid = generate_maze(9, 13, seed=2)
    fig, ax = plt.subplots()
    try:
        returned = render_maze.plot_maze(grid, ax=ax)
        assert returned is ax
        assert len(ax.images) == 1
        labels = sorted(text.get_text() for text in ax.texts)
        assert labels == ["IN", "OUT"]
        assert ax.get_title() == "Maze 9 x 13"
    finally:
        plt.close(fig)


def test_main_ascii(capsys):
    assert render_maze.main(["--length", "5", "--width", "6", "--seed", "4", "--ascii"]) == 0
    lines = capsys.readouterr().out.strip().split("\n")
    assert len(lines) == 5


def test_main_rejects_small_size(capsys):
    assert render_maze.main(["--length", "2", "--ascii"]) == 2
