import logging

import numpy as np

import config
from mazes.errors import InvalidDecoration

logger = logging.getLogger(__name__)

KINDS = ("exit", "bonus", "obstacle")

_FLAGS = {
    "exit": "is_exit",
    "bonus": "is_bonus",
    "obstacle": "is_obstacle",
}


def set_decoration(maze, x, y, kind):
    """
    在 (x, y) 上設置唯一一種裝飾，其餘兩種會被清除；不會改動牆
    迷宮只會有一個出口，設置新出口時舊的出口會被移除
    """
    if kind not in _FLAGS:
        raise InvalidDecoration(f"未知的裝飾種類: {kind!r}")
    if (x, y) == config.START_POS:
        raise InvalidDecoration(f"起點 {config.START_POS} 不能放置裝飾")
    cell = maze.cell(x, y)
    if kind == "exit":
        for row in maze.cells:
            for other in row:
                other.is_exit = False
    for flag in _FLAGS.values():
        setattr(cell, flag, False)
    setattr(cell, _FLAGS[kind], True)


def clear_decoration(maze, x, y):
    cell = maze.cell(x, y)
    for flag in _FLAGS.values():
        setattr(cell, flag, False)


def decoration_of(cell):
    """回傳格子上的裝飾種類，沒有則為 None"""
    for kind, flag in _FLAGS.items():
        if getattr(cell, flag):
            return kind
    return None


def decorate(maze, rng=None, attempts=None):
    """
    在剛生成的迷宮上放置出口、獎勵與障礙
    :param maze: Maze
    :param rng: numpy 的 random generator 實例
    :param attempts: 隨機抽樣次數，預設為 DECORATION_ATTEMPTS_FACTOR * 邊長
    :return: [(x, y, kind), ...] 依放置順序
    """
    if rng is None:
        rng = np.random.default_rng()
    if attempts is None:
        attempts = config.DECORATION_ATTEMPTS_FACTOR * max(maze.width, maze.height)

    # 1. 出口固定在右下角
    exit_pos = (maze.width - 1, maze.height - 1)
    placements = []
    if exit_pos != config.START_POS:
        set_decoration(maze, exit_pos[0], exit_pos[1], "exit")
        placements.append((exit_pos[0], exit_pos[1], "exit"))

    # 2. 隨機撒獎勵與障礙，只放在內部格子 (邊緣含起點與出口皆排除)
    for _ in range(attempts):
        x = int(rng.integers(maze.width))
        y = int(rng.integers(maze.height))
        if x in (0, maze.width - 1) or y in (0, maze.height - 1):
            continue
        if (x, y) in (config.START_POS, exit_pos):
            continue
        kind = "bonus" if rng.random() < config.BONUS_PROBABILITY else "obstacle"
        set_decoration(maze, x, y, kind)
        placements.append((x, y, kind))

    logger.debug(
        "放置裝飾 %d 個 (嘗試 %d 次)", len(placements), attempts
    )
    return placements
