class MazeError(Exception):
    """迷宮模組所有錯誤的基底類別"""


class InvalidDimensions(MazeError, ValueError):
    """寬或高不是正整數"""

    def __init__(self, width, height):
        super().__init__(f"迷宮尺寸必須為正整數: width={width!r}, height={height!r}")
        self.width = width
        self.height = height


class InvalidDecoration(MazeError, ValueError):
    """未知的裝飾種類，或試圖裝飾起點"""
