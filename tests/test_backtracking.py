import pytest
from hypothesis import given, strategies as st

from algobox.backtracking import find_paths, solve_n_queens

STEPS = {"D": (1, 0), "L": (0, -1), "R": (0, 1), "U": (-1, 0)}


def test_four_queens_board():
    assert solve_n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


def test_three_queens_impossible():
    assert solve_n_queens(3) is None


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8])
def test_queens_do_not_attack(n):
    board = solve_n_queens(n)
    queens = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


def test_queens_rejects_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_maze_example():
    maze = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]
    assert find_paths(maze) == ["DDRDRR", "DRDDRR"]


def test_blocked_start_has_no_paths():
    assert find_paths([[0, 1], [1, 1]]) == []


def test_maze_must_be_square():
    with pytest.raises(ValueError):
        find_paths([[1, 1], [1]])


@st.composite
def mazes(draw):
    size = draw(st.integers(1, 4))
    return draw(
        st.lists(st.lists(st.sampled_from([0, 1]), min_size=size, max_size=size),
                 min_size=size, max_size=size)
    )


@given(mazes())
def test_every_path_is_valid(maze):
    size = len(maze)
    paths = find_paths(maze)
    assert len(set(paths)) == len(paths)
    for path in paths:
        row, column = 0, 0
        seen = {(0, 0)}
        assert maze[0][0] == 1
        for move in path:
            step_row, step_column = STEPS[move]
            row, column = row + step_row, column + step_column
            assert 0 <= row < size and 0 <= column < size
            assert maze[row][column] == 1
            assert (row, column) not in seen
            seen.add((row, column))
        assert (row, column) == (size - 1, size - 1)
        assert len(path) >= 2 * (size - 1)