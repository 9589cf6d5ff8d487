import logging

import numpy as np

import config
from mazes.decorations import decorate
from mazes.maze import DIRECTIONS
from mazes.maze_generator import MazeGenerator

logger = logging.getLogger(__name__)


class GameSession:
    """
    一局遊戲的狀態：迷宮、玩家位置、步數、分數與時間
    不處理畫面、輸入或分數保存
    """

    def __init__(self, difficulty=config.DEFAULT_DIFFICULTY, seed=None):
        self.rng = np.random.default_rng(seed)
        self.difficulty = difficulty
        self.maze = None
        self.player_pos = config.START_POS
        self.moves = 0
        self.score = 0
        self.time_elapsed = 0
        self.time_limit = 0
        self.is_playing = False
        self.has_won = False
        self.timed_out = False
        self.reset(difficulty)

    def reset(self, difficulty=None, seed=None):
        """開始新的一關 (整個迷宮重新生成)"""
        if difficulty is None:
            difficulty = self.difficulty
        if difficulty not in config.DIFFICULTY_SETTINGS:
            raise ValueError(f"未知難度: {difficulty!r}")
        if seed is not None:
            self.rng = np.random.default_rng(seed)

        settings = config.DIFFICULTY_SETTINGS[difficulty]
        size = settings["size"]

        self.difficulty = difficulty
        self.maze = MazeGenerator.generate(size, size, self.rng)
        decorate(self.maze, self.rng)

        self.player_pos = config.START_POS
        self.moves = 0
        self.score = 0
        self.time_elapsed = 0
        self.time_limit = settings["time_limit"]
        self.is_playing = True
        self.has_won = False
        self.timed_out = False

        logger.debug("新關卡: %s (%dx%d)", difficulty, size, size)
        return self.state()

    def move(self, direction):
        """
        朝指定方向移動一格
        :return: 是否真的移動了
        """
        if direction not in DIRECTIONS:
            raise ValueError(f"未知方向: {direction!r}")
        if not self.is_playing:
            return False

        x, y = self.player_pos
        if not self.maze.can_move(x, y, direction):
            return False

        dx, dy = DIRECTIONS[direction]
        self.player_pos = (x + dx, y + dy)
        self.moves += 1
        self._apply_cell_effect()
        self._check_win()
        return True

    def _apply_cell_effect(self):
        """獎勵加分、障礙扣分，觸發後即消失"""
        x, y = self.player_pos
        cell = self.maze.cell(x, y)
        if cell.is_bonus:
            self.score += config.SCORE_BONUS
            cell.is_bonus = False
        elif cell.is_obstacle:
            self.score += config.SCORE_OBSTACLE
            cell.is_obstacle = False

    def _check_win(self):
        x, y = self.player_pos
        if self.maze.cell(x, y).is_exit:
            self.has_won = True
            self.is_playing = False
            logger.debug("到達出口: 步數 %d, 分數 %d", self.moves, self.score)

    def tick(self, seconds=1):
        """時間前進；超過時限即結束遊戲"""
        if not self.is_playing:
            return
        self.time_elapsed += seconds
        if self.time_elapsed >= self.time_limit:
            self.is_playing = False
            self.timed_out = True
            logger.debug("超時: %d 秒", self.time_elapsed)

    def state(self):
        return {
            "difficulty": self.difficulty,
            "player_pos": self.player_pos,
            "moves": self.moves,
            "score": self.score,
            "time_elapsed": self.time_elapsed,
            "time_limit": self.time_limit,
            "is_playing": self.is_playing,
            "has_won": self.has_won,
            "timed_out": self.timed_out,
        }
