"""Rat in a maze: find a right/down path from the top-left to the bottom-right."""

from __future__ import annotations


def solve_maze(maze: list[list[int]]) -> list[list[int]] | None:
    """Return a matrix marking the path with 1s, or None if there is none.

    Open cells hold 1. The rat moves only right or down, trying right first.
    """
    size = len(maze)
    if size == 0 or any(len(row) != size for row in maze):
        raise ValueError("maze must be a non-empty square matrix")

    solution = [[0] * size for _ in range(size)]
    last = size - 1

    def step(row: int, col: int) -> bool:
        solution[row][col] = 1
        if row == last and col == last:
            return True
        if col < last and maze[row][col + 1] == 1 and step(row, col + 1):
            return True
        if row < last and maze[row + 1][col] == 1 and step(row + 1, col):
            return True
        solution[row][col] = 0
        return False

    return solution if step(0, 0) else None