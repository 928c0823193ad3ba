"""Backtracking: the N-queens puzzle and paths of a rat through a maze."""

from __future__ import annotations

from collections.abc import Sequence

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Return the first N-queens board found, with 1 marking a queen, or None.

    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    def safe(placement: list[int], row: int) -> bool:
        column = len(placement)
        return all(
            other != row and abs(other - row) != column - other_column
            for other_column, other in enumerate(placement)
        )

    def place(placement: list[int]) -> list[int] | None:
        if len(placement) == n:
            return placement
        for row in range(n):
            if safe(placement, row):
                found = place([*placement, row])
                if found is not None:
                    return found
        return None

    rows = place([])
    if rows is None:
        return None
    return [[1 if rows[column] == row else 0 for column in range(n)] for row in range(n)]


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell of a square maze.

    Cells holding 1 are open. A path is a string of moves D, L, R and U, and the
    paths come in the order those moves are tried.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be square")
    if size == 0 or grid[0][0] != 1:
        return []

    paths: list[str] = []
    visited: set[tuple[int, int]] = set()

    def walk(row: int, column: int, route: str) -> None:
        if row == size - 1 and column == size - 1:
            paths.append(route)
            return
        visited.add((row, column))
        for letter, step_row, step_column in _MOVES:
            nxt = (row + step_row, column + step_column)
            if (
                0 <= nxt[0] < size
                and 0 <= nxt[1] < size
                and nxt not in visited
                and grid[nxt[0]][nxt[1]] == 1
            ):
                walk(nxt[0], nxt[1], route + letter)
        visited.discard((row, column))

    walk(0, 0, "")
    return paths