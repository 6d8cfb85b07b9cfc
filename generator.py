#!/usr/bin/env python3

import argparse
import random
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

# 网格中的四种标记
ENTRANCE = "I"
EXIT = "O"
WALL = "X"
PASSAGE = "."

MARKERS = (ENTRANCE, EXIT, WALL, PASSAGE)

MIN_DIMENSION = 3

# 每次跨两格：中间一格是要打通的墙，第二格是下一个候选通道
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 2),   # 右
    (2, 0),   # 下
    (0, -2),  # 左
    (-2, 0),  # 上
)

Cell = Tuple[int, int]
Grid = List[List[str]]


class MazeError(Exception):
    """迷宫生成相关错误的基类"""


class InvalidArgumentError(MazeError, ValueError):
    """迷宫尺寸不合法（小于 3 或不是整数）"""


class InvalidOperationError(MazeError, RuntimeError):
    """挖掘完成后找不到可用的出口位置"""


@dataclass
class MazeConfig:
    """迷宫生成配置"""
    length: int = 11             # 行数
    width: int = 21              # 列数
    seed: Optional[int] = None   # 随机种子，None 表示不固定
    uniform_walls: bool = True   # False 时沿用旧版的三选一边界抽取
    verbose: bool = False        # 打印生成过程


def shuffled_directions(rng: random.Random) -> List[Tuple[int, int]]:
    """返回四个方向的一个新随机排列，不修改 ``DIRECTIONS`` 本身。"""
    directions = list(DIRECTIONS)
    rng.shuffle(directions)
    return directions


def is_boundary(grid: Grid, cell: Cell) -> bool:
    x, y = cell
    return x == 0 or y == 0 or x == len(grid) - 1 or y == len(grid[0]) - 1


def is_corner(grid: Grid, cell: Cell) -> bool:
    x, y = cell
    return x in (0, len(grid) - 1) and y in (0, len(grid[0]) - 1)


def in_bounds(grid: Grid, cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < len(grid) and 0 <= y < len(grid[0])


def _is_closed(marker: str) -> bool:
    # 出口在挖掘规则里视同墙
    return marker == WALL or marker == EXIT


def is_valid_move(grid: Grid, cell: Cell, direction: Tuple[int, int]) -> bool:
    """判断从 ``cell`` 沿 ``direction`` 打通中间一格是否合法。

    规则：
        1. 目标格（跨两格后的位置）在网格内；
        2. 被打通的格子严格位于内部，不在外圈；
        3. 目标格是墙或出口，不会连到已有通道，因此不会形成环；
        4. 目标格是出口时直接允许；
        5. 否则被打通格子在垂直于前进方向上的两个邻居都必须是墙或出口，
           保证通道宽度为 1，墙厚度为 1。

    Args:
        grid: 当前网格
        cell: 当前所在格子
        direction: ``DIRECTIONS`` 中的一个向量

    Returns:
        是否可以打通
    """
    x, y = cell
    dx, dy = direction
    wall_x, wall_y = x + dx // 2, y + dy // 2
    next_x, next_y = x + dx, y + dy

    if not in_bounds(grid, (next_x, next_y)):
        return False
    if is_boundary(grid, (wall_x, wall_y)):
        return False

    target = grid[next_x][next_y]
    if not _is_closed(target):
        return False
    if target == EXIT:
        return True

    if dx != 0:
        # 纵向前进，检查左右两侧
        sides = ((wall_x, wall_y - 1), (wall_x, wall_y + 1))
    else:
        # 横向前进，检查上下两侧
        sides = ((wall_x - 1, wall_y), (wall_x + 1, wall_y))
    return all(_is_closed(grid[sx][sy]) for sx, sy in sides)


def inward_neighbor(grid: Grid, cell: Cell) -> Cell:
    """边界格子向内一步的格子（角落不适用）"""
    x, y = cell
    if x == 0:
        return (1, y)
    if x == len(grid) - 1:
        return (x - 1, y)
    if y == 0:
        return (x, 1)
    return (x, y - 1)


def boundary_cells(length: int, width: int) -> Iterator[Cell]:
    """按固定顺序（上、下、左、右）枚举所有非角落的边界格子"""
    for y in range(1, width - 1):
        yield (0, y)
    for y in range(1, width - 1):
        yield (length - 1, y)
    for x in range(1, length - 1):
        yield (x, 0)
    for x in range(1, length - 1):
        yield (x, width - 1)


def validate_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} 必须是整数，实际为 {value!r}")
    if value < MIN_DIMENSION:
        raise InvalidArgumentError(f"{name} 至少为 {MIN_DIMENSION}，实际为 {value}")
    return value


class MazeGenerator:
    """随机递归回溯迷宫生成器。

    生成顺序：填满墙 -> 放置入口 -> 从入口开始挖掘 -> 放置出口。
    所有随机数都来自同一个 ``random.Random`` 实例，传入固定种子即可复现结果。
    """

    def __init__(self, config: Optional[MazeConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or MazeConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        # 最近一次生成的入口、出口位置
        self.entrance: Optional[Cell] = None
        self.exit: Optional[Cell] = None

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    def generate(self, length: Optional[int] = None, width: Optional[int] = None) -> Grid:
        """生成一个 ``length x width`` 的迷宫。

        Args:
            length: 行数，默认取配置中的值
            width: 列数，默认取配置中的值

        Returns:
            二维字符网格，``grid[x][y]`` 中 x 为行、y 为列

        Raises:
            InvalidArgumentError: 尺寸小于 3 或不是整数
            InvalidOperationError: 找不到可以放置出口的边界格子
        """
        length = validate_dimension("length", self.config.length if length is None else length)
        width = validate_dimension("width", self.config.width if width is None else width)

        self._log(f"\n=== 开始生成 {length} x {width} 迷宫 ===")
        grid = self.fill(length, width)

        self.entrance = self.place_entrance(grid)
        self._log(f"入口位置: {self.entrance}")

        carved = self.carve(grid, self.entrance)
        self._log(f"挖掘完成，共打通 {carved} 个格子")

        self.exit = self.place_exit(grid, self.entrance)
        self._log(f"出口位置: {self.exit}")

        return grid

    @staticmethod
    def fill(length: int, width: int) -> Grid:
        return [[WALL for _ in range(width)] for _ in range(length)]

    def pick_boundary_cell(self, length: int, width: int) -> Cell:
        """随机选一条边，再在两个角之间随机选一个位置"""
        if self.config.uniform_walls:
            side = self.rng.randrange(4)
        else:
            # 旧版抽取：0=上, 1=左, 2=下，右边永远不会被选中
            side = (0, 2, 1)[self.rng.randrange(3)]

        if side == 0:
            return (0, self.rng.randint(1, width - 2))
        if side == 1:
            return (length - 1, self.rng.randint(1, width - 2))
        if side == 2:
            return (self.rng.randint(1, length - 2), 0)
        return (self.rng.randint(1, length - 2), width - 1)

    def place_entrance(self, grid: Grid) -> Cell:
        x, y = self.pick_boundary_cell(len(grid), len(grid[0]))
        grid[x][y] = ENTRANCE
        return (x, y)

    def carve(self, grid: Grid, start: Cell) -> int:
        """从 ``start`` 开始做深度优先挖掘，返回打通的格子数。

        使用显式栈代替递归，栈帧为 (当前格子, 剩余方向迭代器)。
        每个新栈帧都重新打乱方向顺序，访问顺序与递归写法一致。
        """
        length, width = len(grid), len(grid[0])
        visited = [[False for _ in range(width)] for _ in range(length)]

        visited[start[0]][start[1]] = True
        stack: List[Tuple[Cell, Iterator[Tuple[int, int]]]] = [
            (start, iter(shuffled_directions(self.rng)))
        ]
        carved = 0

        while stack:
            cell, directions = stack[-1]
            for direction in directions:
                if not is_valid_move(grid, cell, direction):
                    continue
                wall_x = cell[0] + direction[0] // 2
                wall_y = cell[1] + direction[1] // 2
                if grid[wall_x][wall_y] != EXIT:
                    if grid[wall_x][wall_y] == WALL:
                        carved += 1
                    grid[wall_x][wall_y] = PASSAGE
                if not visited[wall_x][wall_y]:
                    visited[wall_x][wall_y] = True
                    stack.append(((wall_x, wall_y), iter(shuffled_directions(self.rng))))
                    break
            else:
                stack.pop()

        return carved

    def exit_candidates(self, grid: Grid, entrance: Cell) -> List[Cell]:
        """出口候选：非入口、不与入口相邻、向内一格已被打通的边界格子"""
        ex, ey = entrance
        candidates = []
        for cell in boundary_cells(len(grid), len(grid[0])):
            if cell == entrance:
                continue
            if abs(cell[0] - ex) + abs(cell[1] - ey) == 1:
                continue
            ix, iy = inward_neighbor(grid, cell)
            if grid[ix][iy] != WALL:
                candidates.append(cell)
        return candidates

    def place_exit(self, grid: Grid, entrance: Cell) -> Cell:
        candidates = self.exit_candidates(grid, entrance)
        if not candidates:
            raise InvalidOperationError("没有可以放置出口的边界格子")
        x, y = self.rng.choice(candidates)
        grid[x][y] = EXIT
        return (x, y)


def generate_maze(length: int, width: int, seed: Optional[int] = None,
                  rng: Optional[random.Random] = None) -> Grid:
    """便捷函数：用给定种子（或随机源）生成一个迷宫"""
    return MazeGenerator(MazeConfig(length=length, width=width, seed=seed), rng=rng).generate()


def render_maze_text(grid: Grid) -> str:
    return "\n".join("".join(row) for row in grid)


def print_maze(grid: Grid) -> None:
    print(render_maze_text(grid))


def prompt_dimension(label: str,
                     input_func: Callable[[str], str] = input,
                     output: Callable[[str], None] = print) -> int:
    """反复提示用户输入，直到得到一个不小于 3 的整数。

    EOFError / KeyboardInterrupt 不在这里处理，交给调用方。
    """
    while True:
        raw = input_func(f"{label} : ")
        try:
            value = int(raw.strip())
        except ValueError:
            value = 0
        if value <= 0:
            output("无效输入，请输入正整数，或按 Ctrl+C 退出。")
            continue
        if value < MIN_DIMENSION:
            output(f"尺寸至少为 {MIN_DIMENSION}，请重新输入。")
            continue
        return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="随机递归回溯迷宫生成器")
    parser.add_argument("length", type=int, nargs="?", help="迷宫行数 (>= 3)")
    parser.add_argument("width", type=int, nargs="?", help="迷宫列数 (>= 3)")
    parser.add_argument("--seed", type=int, default=None, help="随机种子")
    parser.add_argument("--legacy-walls", action="store_true",
                        help="使用旧版的三选一边界抽取")
    parser.add_argument("--verbose", action="store_true", help="打印生成过程")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None,
         input_func: Callable[[str], str] = input) -> int:
    args = parse_args(argv)

    try:
        length = args.length if args.length is not None else prompt_dimension("Length", input_func)
        width = args.width if args.width is not None else prompt_dimension("Width", input_func)
    except (KeyboardInterrupt, EOFError):
        print("\n用户取消操作")
        return 1

    config = MazeConfig(
        length=length,
        width=width,
        seed=args.seed,
        uniform_walls=not args.legacy_walls,
        verbose=args.verbose,
    )
    try:
        grid = MazeGenerator(config).generate()
    except InvalidArgumentError as e:
        print(f"错误: {e}")
        return 2

    print_maze(grid)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
