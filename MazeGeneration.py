"""
兼容性导入模块。

早期版本通过 ``MazeGeneration`` 模块暴露迷宫生成器。
为保持旧代码能够继续工作，此文件从 ``generator`` 模块
中导入生成器及其配置并在 ``__all__`` 中导出。
"""

from generator import MazeConfig, MazeGenerator, generate_maze

# 控制 ``from MazeGeneration import *`` 的导出内容
__all__ = ["MazeConfig", "MazeGenerator", "generate_maze"]
