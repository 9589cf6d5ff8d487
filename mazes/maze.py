from dataclasses import dataclass, field
from typing import List

import numpy as np

import config
from mazes.errors import InvalidDimensions

# 方向: (dx, dy)，y 軸向下
DIRECTIONS = {
    "top": (0, -1),
    "right": (1, 0),
    "bottom": (0, 1),
    "left": (-1, 0),
}

OPPOSITE = {
    "top": "bottom",
    "right": "left",
    "bottom": "top",
    "left": "right",
}


@dataclass
class Walls:
    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True

    def __getitem__(self, direction):
        if direction not in DIRECTIONS:
            raise ValueError(f"未知方向: {direction!r}")
        return getattr(self, direction)

    def __setitem__(self, direction, value):
        if direction not in DIRECTIONS:
            raise ValueError(f"未知方向: {direction!r}")
        setattr(self, direction, bool(value))


@dataclass
class Cell:
    walls: Walls = field(default_factory=Walls)
    visited: bool = False  # 只在生成過程中使用
    is_exit: bool = False
    is_bonus: bool = False
    is_obstacle: bool = False


def validate_dimensions(width, height):
    """檢查寬高皆為正整數 (bool 不算)，否則拋出 InvalidDimensions"""
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(width, height)
        if value <= 0:
            raise InvalidDimensions(width, height)


@dataclass
class Maze:
    width: int
    height: int
    cells: List[List[Cell]]  # cells[y][x]

    @classmethod
    def create(cls, width, height):
        """建立四面皆是牆、未訪問的空白迷宮"""
        validate_dimensions(width, height)
        width, height = int(width), int(height)
        cells = [[Cell() for _ in range(width)] for _ in range(height)]
        return cls(width, height, cells)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"座標超出範圍: ({x}, {y})")
        return self.cells[y][x]

    def neighbors(self, x, y):
        """
        回傳 (x, y) 在格子內的相鄰格
        :return: [(nx, ny, direction), ...]，direction 為從 (x, y) 指向鄰居的方向
        """
        result = []
        for direction, (dx, dy) in DIRECTIONS.items():
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny, direction))
        return result

    def can_move(self, x, y, direction):
        """該方向沒有牆且目標仍在格子內時才可移動"""
        cell = self.cell(x, y)
        if direction not in DIRECTIONS:
            raise ValueError(f"未知方向: {direction!r}")
        dx, dy = DIRECTIONS[direction]
        if not self.in_bounds(x + dx, y + dy):
            return False
        return not cell.walls[direction]

    def carve(self, x, y, direction):
        """同時打通兩側的牆"""
        dx, dy = DIRECTIONS[direction]
        nx, ny = x + dx, y + dy
        self.cell(x, y).walls[direction] = False
        self.cell(nx, ny).walls[OPPOSITE[direction]] = False

    def passages(self):
        """
        列出所有打通的相鄰格對，每對只算一次 (只看右側與下側)
        :return: [((x, y), (nx, ny)), ...]
        """
        result = []
        for y in range(self.height):
            for x in range(self.width):
                walls = self.cells[y][x].walls
                if x + 1 < self.width and not walls.right:
                    result.append(((x, y), (x + 1, y)))
                if y + 1 < self.height and not walls.bottom:
                    result.append(((x, y), (x, y + 1)))
        return result

    def to_array(self):
        """
        匯出成 numpy 陣列 (牆與通道各占一格)
        格子 (x, y) 位於 [2*y+1, 2*x+1]
        """
        grid = np.full(
            (2 * self.height + 1, 2 * self.width + 1),
            config.ID_WALL,
            dtype=config.GRID_DTYPE,
        )
        for y in range(self.height):
            for x in range(self.width):
                gy, gx = 2 * y + 1, 2 * x + 1
                walls = self.cells[y][x].walls
                grid[gy, gx] = config.ID_EMPTY
                if x + 1 < self.width and not walls.right:
                    grid[gy, gx + 1] = config.ID_EMPTY
                if y + 1 < self.height and not walls.bottom:
                    grid[gy + 1, gx] = config.ID_EMPTY
        return grid
