from generator import (
    ENTRANCE,
    EXIT,
    MARKERS,
    MazeGenerator,
    MazeConfig,
    render_maze_text,
)


def test_maze_layout():
    """测试 5x5 迷宫的文本渲染是否符合要求。

    执行以下测试：
    1. 输出恰好 5 行，每行 5 个字符
    2. 只使用 I / O / X / . 四种字符
    3. 有且仅有一个入口、一个出口
    """
    grid = MazeGenerator(MazeConfig(seed=7)).generate(5, 5)
    text = render_maze_text(grid)

    lines = text.split("\n")
    assert len(lines) == 5
    assert all(len(line) == 5 for line in lines)
    assert set(text.replace("\n", "")) <= set(MARKERS)
    assert text.count(ENTRANCE) == 1
    assert text.count(EXIT) == 1


def test_render_has_no_header_or_trailing_newline():
    grid = [list("XIX"), list("X.X"), list("XOX")]
    assert render_maze_text(grid) == "XIX\nX.X\nXOX"
