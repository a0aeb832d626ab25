"""Knight's tour on a square board, found by backtracking."""

from __future__ import annotations

MOVES: tuple[tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)


class NoSolutionError(Exception):
    """Raised when no knight's tour exists for the requested board."""


def is_safe(x: int, y: int, board: list[list[int]]) -> bool:
    """Return True if (x, y) lies on the board and has not been visited."""
    size = len(board)
    return 0 <= x < size and 0 <= y < size and board[x][y] == -1


def knight_tour(size: int = 8) -> list[list[int]]:
    """Return a board whose cells hold the move number of a tour from (0, 0).

    Raises NoSolutionError if no tour starting in the corner exists.
    """
    if size < 1:
        raise ValueError("board size must be positive")

    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    total = size * size

    def solve(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in MOVES:
            nx, ny = x + dx, y + dy
            if is_safe(nx, ny, board):
                board[nx][ny] = move
                if solve(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    if not solve(0, 0, 1):
        raise NoSolutionError(f"no knight's tour exists on a {size}x{size} board")
    return board