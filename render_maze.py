#!/usr/bin/env python3
"""迷宫的2D可视化工具。

调用 `generator.py` 生成迷宫，并使用matplotlib把字符网格画成图像。
用于快速预览生成结果，不会写入任何文件。
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
import numpy as np

from generator import (
    ENTRANCE,
    EXIT,
    PASSAGE,
    WALL,
    Grid,
    MazeConfig,
    MazeGenerator,
    print_maze,
)

# 标记 -> 数值编码，顺序与下面的颜色表一致
MARKER_CODES = {
    WALL: 0,
    PASSAGE: 1,
    ENTRANCE: 2,
    EXIT: 3,
}

# 各种格子对应的颜色
MARKER_COLORS = ["#2b2b2b", "#f5f5f5", "green", "red"]


def maze_to_array(grid: Grid) -> np.ndarray:
    """把字符网格转换成整数矩阵。

    Args:
        grid: `MazeGenerator.generate` 返回的网格

    Returns:
        形状为 (length, width) 的整数矩阵
    """
    return np.array([[MARKER_CODES[cell] for cell in row] for row in grid], dtype=int)


def plot_maze(grid: Grid, ax=None, title: Optional[str] = None):
    """在给定的坐标轴上绘制迷宫，返回坐标轴对象。"""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    data = maze_to_array(grid)
    cmap = ListedColormap(MARKER_COLORS)
    ax.imshow(data, cmap=cmap, vmin=0, vmax=len(MARKER_COLORS) - 1, interpolation="nearest")

    # 标出入口和出口
    for code, label in ((MARKER_CODES[ENTRANCE], "IN"), (MARKER_CODES[EXIT], "OUT")):
        rows, cols = np.nonzero(data == code)
        for x, y in zip(rows, cols):
            ax.text(y, x, label, color="white", fontsize=8, ha="center", va="center")

    ax.set_xticks([])
    ax.set_yticks([])
    length, width = data.shape
    ax.set_title(title or f"Maze {length} x {width}")
    return ax


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="迷宫可视化")
    parser.add_argument("--length", type=int, default=MazeConfig.length, help="迷宫行数")
    parser.add_argument("--width", type=int, default=MazeConfig.width, help="迷宫列数")
    parser.add_argument("--seed", type=int, default=None, help="随机种子")
    parser.add_argument("--ascii", action="store_true", help="只在终端打印字符网格")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """主函数：生成迷宫并显示图形或ASCII网格。

    Returns:
        0 表示成功，其他值表示错误
    """
    args = parse_args(argv)
    config = MazeConfig(length=args.length, width=args.width, seed=args.seed)
    generator = MazeGenerator(config)

    try:
        grid = generator.generate()
    except ValueError as e:
        print(f"错误: {e}")
        return 2

    if args.ascii:
        print_maze(grid)
        return 0

    print(f"入口: {generator.entrance}, 出口: {generator.exit}")
    plot_maze(grid)
    plt.tight_layout()
    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
