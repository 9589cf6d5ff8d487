import logging

import numpy as np

import config
from mazes.maze import Maze, validate_dimensions

logger = logging.getLogger(__name__)


def first_candidate(n):
    """固定選第一個候選 (測試用的決定性策略)"""
    return 0


def as_picker(rng):
    """
    把亂數來源轉成「從 [0, n) 選一個索引」的函式
    :param rng: None、numpy 的 random generator 實例，或 callable(n) -> int
    """
    if rng is None:
        rng = np.random.default_rng()
    if isinstance(rng, np.random.Generator):
        generator = rng
        return lambda n: int(generator.integers(n))
    if callable(rng):
        return rng
    raise TypeError(f"不支援的亂數來源: {rng!r}")


class MazeGenerator:
    @staticmethod
    def generate(width, height, rng=None):
        """
        以隨機 DFS (回溯法) 生成完美迷宮
        :param width: 迷宮寬度 (正整數)
        :param height: 迷宮高度 (正整數)
        :param rng: numpy 的 random generator 實例，或 callable(n) -> int
        :return: Maze，所有 visited 皆為 False
        """
        # 先檢查尺寸，不合法時不配置任何格子
        validate_dimensions(width, height)
        pick = as_picker(rng)

        # 1. 初始化：四面皆是牆
        maze = Maze.create(width, height)

        # 起點設為 (0, 0)
        current_x, current_y = config.START_POS
        maze.cells[current_y][current_x].visited = True

        # 2. DFS 生成完美迷宮 (確保連通性)
        stack = [(current_x, current_y)]
        carved = 0

        while stack:
            # 尋找未訪問的相鄰格
            neighbors = [
                (nx, ny, direction)
                for nx, ny, direction in maze.neighbors(current_x, current_y)
                if not maze.cells[ny][nx].visited
            ]

            if neighbors:
                index = pick(len(neighbors))
                if not 0 <= index < len(neighbors):
                    raise ValueError(
                        f"亂數來源回傳的索引 {index} 超出範圍 [0, {len(neighbors)})"
                    )
                nx, ny, direction = neighbors[index]
                # 記住目前位置以便回溯
                stack.append((current_x, current_y))
                # 打通兩格之間的牆
                maze.carve(current_x, current_y, direction)
                carved += 1
                current_x, current_y = nx, ny
                maze.cells[current_y][current_x].visited = True
            else:
                # 回溯
                current_x, current_y = stack.pop()

        # 3. 清除 visited
        for row in maze.cells:
            for cell in row:
                cell.visited = False

        logger.debug("生成 %dx%d 迷宮，打通 %d 面牆", maze.width, maze.height, carved)
        return maze
