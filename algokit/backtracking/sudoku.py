"""Backtracking solver for 9x9 sudoku grids."""

from __future__ import annotations

SIZE = 9
BOX = 3
_HIGHLIGHT = "\033[93m"
_RESET = "\033[0m"


def is_possible(grid: list[list[int]], row: int, col: int, number: int) -> bool:
    """Return True if ``number`` may go at (row, col) under sudoku rules."""
    for k in range(SIZE):
        if grid[k][col] == number or grid[row][k] == number:
            return False
    top, left = (row // BOX) * BOX, (col // BOX) * BOX
    return all(
        grid[r][c] != number
        for r in range(top, top + BOX)
        for c in range(left, left + BOX)
    )


def solve_sudoku(grid: list[list[int]]) -> list[list[int]] | None:
    """Return a solved copy of ``grid`` (0 marks an empty cell), or None."""
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    board = [list(row) for row in grid]

    def solve(row: int, col: int) -> bool:
        if row == SIZE:
            return True
        if col == SIZE:
            return solve(row + 1, 0)
        if board[row][col] != 0:
            return solve(row, col + 1)
        for number in range(1, SIZE + 1):
            if is_possible(board, row, col, number):
                board[row][col] = number
                if solve(row, col + 1):
                    return True
        board[row][col] = 0
        return False

    return board if solve(0, 0) else None


def format_grid(grid: list[list[int]], starting: list[list[int]]) -> str:
    """Render ``grid``, highlighting cells that differ from ``starting``."""
    lines = []
    for i, (row, start_row) in enumerate(zip(grid, starting)):
        parts = []
        for j, (value, original) in enumerate(zip(row, start_row)):
            if value != original:
                parts.append(f"{_HIGHLIGHT}{value}{_RESET} ")
            else:
                parts.append(f"{value} ")
            if (j + 1) % BOX == 0:
                parts.append("\t")
        if (i + 1) % BOX == 0:
            parts.append("\n")
        parts.append("\n")
        lines.append("".join(parts))
    return "".join(lines)