"""All placements of n non-attacking queens on an n x n board."""

from __future__ import annotations


def is_safe(board: list[list[int]], row: int, col: int) -> bool:
    """Return True if a queen at (row, col) is not attacked from the left."""
    n = len(board)
    if any(board[row][c] for c in range(col)):
        return False
    for r, c in zip(range(row, -1, -1), range(col, -1, -1)):
        if board[r][c]:
            return False
    for r, c in zip(range(row, n), range(col, -1, -1)):
        if board[r][c]:
            return False
    return True


def solve_n_queens(n: int) -> list[list[list[int]]]:
    """Return every solution as a board of 0s and 1s, in search order."""
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]
    solutions: list[list[list[int]]] = []

    def place(col: int) -> None:
        if col >= n:
            solutions.append([row[:] for row in board])
            return
        for row in range(n):
            if is_safe(board, row, col):
                board[row][col] = 1
                place(col + 1)
                board[row][col] = 0

    place(0)
    return solutions


def format_board(board: list[list[int]]) -> str:
    """Render a board as a leading newline followed by one line per row."""
    return "\n" + "".join("".join(str(cell) for cell in row) + "\n" for row in board)