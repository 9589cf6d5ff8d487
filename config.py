import numpy as np

# --- 難度設定 ---
DIFFICULTY_SETTINGS = {
    "easy": {"size": 8, "time_limit": 120},
    "medium": {"size": 12, "time_limit": 180},
    "hard": {"size": 16, "time_limit": 300},
}
DEFAULT_DIFFICULTY = "easy"

# --- 起點 ---
START_POS = (0, 0)

# --- 裝飾 (出口 / 獎勵 / 障礙) ---
DECORATION_ATTEMPTS_FACTOR = 2  # 每邊長嘗試放置的次數
BONUS_PROBABILITY = 0.5

# --- 分數 ---
SCORE_BONUS = 1
SCORE_OBSTACLE = -1

# --- 陣列匯出 ID 定義 ---
ID_EMPTY = 0
ID_WALL = 1
GRID_DTYPE = np.int8
