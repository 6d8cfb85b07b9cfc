#!/usr/bin/env python3
"""Simple validator for the maze generator.

The script executes ``generator.py``'s :class:`MazeGenerator` with the
provided parameters and performs a series of sanity checks on every
produced grid:

* Exactly one entrance and one exit exist, using only the legal symbols.
* Entrance and exit sit on the boundary, off the corners; the rest of the
  boundary is wall.
* No 2x2 block is fully open, so corridors are one cell wide.
* Every open cell is reachable from the entrance and the open cells form a
  tree.
"""

from __future__ import annotations

import argparse
from collections import deque
from typing import List, Sequence, Tuple

import generator
from generator import ENTRANCE, EXIT, MARKERS, PASSAGE, WALL, Grid


def find_cells(grid: Grid, marker: str) -> List[Tuple[int, int]]:
    return [
        (x, y)
        for x, row in enumerate(grid)
        for y, cell in enumerate(row)
        if cell == marker
    ]


def check_markers(grid: Grid) -> None:
    width = len(grid[0])
    for x, row in enumerate(grid):
        assert len(row) == width, f"row {x} has {len(row)} cells, expected {width}"
        for y, cell in enumerate(row):
            assert cell in MARKERS, f"illegal marker {cell!r} at {(x, y)}"

    entrances = find_cells(grid, ENTRANCE)
    exits = find_cells(grid, EXIT)
    assert len(entrances) == 1, f"expected 1 entrance, got {len(entrances)}"
    assert len(exits) == 1, f"expected 1 exit, got {len(exits)}"


def check_boundary(grid: Grid) -> None:
    (entrance,) = find_cells(grid, ENTRANCE)
    (exit_cell,) = find_cells(grid, EXIT)
    assert entrance != exit_cell, "entrance and exit share a cell"

    for name, cell in (("entrance", entrance), ("exit", exit_cell)):
        assert generator.is_boundary(grid, cell), f"{name} {cell} is not on the boundary"
        assert not generator.is_corner(grid, cell), f"{name} {cell} is on a corner"

    length, width = len(grid), len(grid[0])
    for x in range(length):
        for y in range(width):
            cell = (x, y)
            if cell in (entrance, exit_cell) or not generator.is_boundary(grid, cell):
                continue
            assert grid[x][y] == WALL, f"boundary cell {cell} is {grid[x][y]!r}"


def check_wall_thickness(grid: Grid) -> None:
    for x in range(len(grid) - 1):
        for y in range(len(grid[0]) - 1):
            block = (grid[x][y], grid[x + 1][y], grid[x][y + 1], grid[x + 1][y + 1])
            assert WALL in block, f"2x2 open block at {(x, y)}"


def check_connectivity(grid: Grid) -> None:
    (entrance,) = find_cells(grid, ENTRANCE)
    open_cells = {
        (x, y)
        for x, row in enumerate(grid)
        for y, cell in enumerate(row)
        if cell != WALL
    }

    seen = {entrance}
    queue = deque([entrance])
    edges = 0
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) in open_cells:
                edges += 1
                if (nx, ny) not in seen:
                    seen.add((nx, ny))
                    queue.append((nx, ny))

    unreachable = open_cells - seen
    assert not unreachable, f"cells not reachable from entrance: {sorted(unreachable)}"
    assert find_cells(grid, EXIT)[0] in seen, "exit is not reachable from entrance"
    # every edge was counted from both ends
    assert edges // 2 == len(open_cells) - 1, "open cells do not form a tree"


def check_maze(grid: Grid) -> None:
    check_markers(grid)
    check_boundary(grid)
    check_wall_thickness(grid)
    check_connectivity(grid)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate generated mazes")
    parser.add_argument("length", type=int, help="Number of rows (>= 3)")
    parser.add_argument("width", type=int, help="Number of columns (>= 3)")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first maze")
    parser.add_argument("--count", type=int, default=1, help="Number of mazes to check")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    passages = 0
    for seed in range(args.seed, args.seed + args.count):
        grid = generator.generate_maze(args.length, args.width, seed=seed)
        check_maze(grid)
        passages += len(find_cells(grid, PASSAGE))

    print(f"All checks passed. Validated {args.count} mazes, {passages} passage cells.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
