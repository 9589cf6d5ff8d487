import numpy as np
import pytest

from maze_helpers import bfs_path
from mazes import maze_generator
from mazes.errors import InvalidDimensions
from mazes.maze import OPPOSITE, Walls
from mazes.maze_generator import MazeGenerator, as_picker, first_candidate

SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (3, 7), (10, 10), (15, 4)]


@pytest.mark.parametrize("width,height", SIZES)
def test_generated_maze_is_spanning_tree(width, height):
    maze = MazeGenerator.generate(width, height, np.random.default_rng(7))

    assert maze.width == width
    assert maze.height == height
    assert len(maze.cells) == height
    assert all(len(row) == width for row in maze.cells)
    assert len(maze.passages()) == width * height - 1
    assert len(bfs_path(maze, (0, 0))) == width * height


@pytest.mark.parametrize("width,height", SIZES)
def test_walls_are_symmetric(width, height):
    maze = MazeGenerator.generate(width, height, np.random.default_rng(3))

    for y in range(height):
        for x in range(width):
            for nx, ny, direction in maze.neighbors(x, y):
                here = maze.cells[y][x].walls[direction]
                there = maze.cells[ny][nx].walls[OPPOSITE[direction]]
                assert here == there


def test_visited_flags_are_cleared():
    maze = MazeGenerator.generate(9, 6, np.random.default_rng(1))

    assert not any(cell.visited for row in maze.cells for cell in row)


def test_decoration_flags_untouched_by_generator():
    maze = MazeGenerator.generate(9, 6, np.random.default_rng(1))

    for row in maze.cells:
        for cell in row:
            assert not (cell.is_exit or cell.is_bonus or cell.is_obstacle)


def test_outer_boundary_stays_walled():
    maze = MazeGenerator.generate(8, 5, np.random.default_rng(11))

    for x in range(maze.width):
        assert maze.cells[0][x].walls.top
        assert maze.cells[maze.height - 1][x].walls.bottom
    for y in range(maze.height):
        assert maze.cells[y][0].walls.left
        assert maze.cells[y][maze.width - 1].walls.right


def test_neighbors_stay_inside_grid():
    maze = MazeGenerator.generate(5, 4, np.random.default_rng(0))

    for y in range(maze.height):
        for x in range(maze.width):
            for nx, ny, _ in maze.neighbors(x, y):
                assert 0 <= nx < maze.width
                assert 0 <= ny < maze.height


def test_first_candidate_is_deterministic():
    first = MazeGenerator.generate(6, 4, first_candidate)
    second = MazeGenerator.generate(6, 4, first_candidate)

    assert first == second
    assert np.array_equal(first.to_array(), second.to_array())


def test_same_seed_gives_same_maze():
    first = MazeGenerator.generate(12, 9, np.random.default_rng(2024))
    second = MazeGenerator.generate(12, 9, np.random.default_rng(2024))

    assert first == second


def test_calls_do_not_share_state():
    first = MazeGenerator.generate(4, 4, first_candidate)
    first.cells[1][1].is_bonus = True
    first.cells[0][0].walls.right = not first.cells[0][0].walls.right

    second = MazeGenerator.generate(4, 4, first_candidate)

    assert not second.cells[1][1].is_bonus
    assert second == MazeGenerator.generate(4, 4, first_candidate)


def test_two_by_two_with_first_candidate():
    maze = MazeGenerator.generate(2, 2, first_candidate)

    assert len(maze.passages()) == 3
    assert bfs_path(maze, (0, 0)) == {(0, 0), (1, 0), (0, 1), (1, 1)}


def test_single_cell_has_no_passages():
    maze = MazeGenerator.generate(1, 1, first_candidate)

    assert maze.passages() == []
    assert maze.cells[0][0].walls == Walls()


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, -1), (2.5, 3), (True, 3), ("4", 4)])
def test_invalid_dimensions_are_rejected(width, height, monkeypatch):
    calls = []

    def fail_create(*args, **kwargs):
        raise AssertionError("不應配置任何格子")

    monkeypatch.setattr(maze_generator.Maze, "create", fail_create)

    with pytest.raises(InvalidDimensions):
        MazeGenerator.generate(width, height, lambda n: calls.append(n) or 0)
    assert calls == []


def test_invalid_dimensions_is_a_value_error():
    with pytest.raises(ValueError):
        MazeGenerator.generate(0, 0)


def test_numpy_integer_dimensions_are_accepted():
    maze = MazeGenerator.generate(np.int64(3), np.int32(2), first_candidate)

    assert (maze.width, maze.height) == (3, 2)
    assert type(maze.width) is int


def test_picker_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        MazeGenerator.generate(3, 3, lambda n: n)


def test_unsupported_random_source():
    with pytest.raises(TypeError):
        MazeGenerator.generate(3, 3, 42)


def test_as_picker_wraps_numpy_generator():
    pick = as_picker(np.random.default_rng(5))

    for n in range(1, 5):
        index = pick(n)
        assert isinstance(index, int)
        assert 0 <= index < n


def test_large_maze_cost_is_linear():
    calls = []
    rng = np.random.default_rng(99)

    def pick(n):
        calls.append(n)
        return int(rng.integers(n))

    maze = MazeGenerator.generate(50, 50, pick)

    # 每次選擇恰好打通一面牆
    assert len(calls) == 50 * 50 - 1
    assert all(1 <= n <= 4 for n in calls)
    assert len(maze.passages()) == 50 * 50 - 1
    assert len(bfs_path(maze, (0, 0))) == 50 * 50
    assert not any(cell.visited for row in maze.cells for cell in row)
