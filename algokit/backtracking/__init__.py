"""Backtracking and search: knight's tour, minimax, N-queens, maze, sudoku, wildcards."""