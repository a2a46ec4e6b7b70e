"""Backtracking searches: Hamiltonian cycles, N queens and the rat in a maze."""

from collections.abc import Sequence

BLOCKED = "X"


def _square_size(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> list[list[int]]:
    """Return every Hamiltonian cycle through ``start``.

    ``adjacency`` is a square matrix whose non-zero entries mark edges.  Each
    cycle is listed as the vertices visited, beginning and ending with
    ``start``; neighbours are tried in index order, so a cycle and its
    reverse both appear.
    """
    size = _square_size(adjacency)
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} is outside 0..{size - 1}")

    cycles: list[list[int]] = []
    path = [start]
    visited = [False] * size
    visited[start] = True

    def extend(vertex: int) -> None:
        if len(path) == size:
            if adjacency[vertex][start]:
                cycles.append([*path, start])
            return
        for neighbour, connected in enumerate(adjacency[vertex]):
            if connected and not visited[neighbour]:
                visited[neighbour] = True
                path.append(neighbour)
                extend(neighbour)
                path.pop()
                visited[neighbour] = False

    extend(start)
    return cycles


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens, one per column.

    Returns the first board found (rows of 0s and 1s, queens tried row by
    row within each column), or None when no placement exists.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")

    rows_by_column: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(column: int) -> bool:
        if column == n:
            return True
        for row in range(n):
            diagonal, antidiagonal = row - column, row + column
            if (
                row in used_rows
                or diagonal in used_diagonals
                or antidiagonal in used_antidiagonals
            ):
                continue
            used_rows.add(row)
            used_diagonals.add(diagonal)
            used_antidiagonals.add(antidiagonal)
            rows_by_column.append(row)
            if place(column + 1):
                return True
            rows_by_column.pop()
            used_rows.discard(row)
            used_diagonals.discard(diagonal)
            used_antidiagonals.discard(antidiagonal)
        return False

    if not place(0):
        return None
    board = [[0] * n for _ in range(n)]
    for column, row in enumerate(rows_by_column):
        board[row][column] = 1
    return board


def rat_in_maze(maze: Sequence[Sequence[str]]) -> list[list[list[int]]]:
    """Return every path from the top-left to the bottom-right cell.

    The rat moves only right or down and cannot enter a cell marked ``X``.
    Each path is a grid of 0s and 1s marking the cells it passes through;
    paths trying a step right before a step down come first.  The
    destination cell is taken as reached whatever it holds.
    """
    rows = list(maze)
    if not rows or not rows[0]:
        raise ValueError("maze must have at least one cell")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("maze rows must all have the same length")

    last_row, last_column = len(rows) - 1, width - 1
    path = [[0] * width for _ in rows]
    solutions: list[list[list[int]]] = []

    def walk(i: int, j: int) -> None:
        if i == last_row and j == last_column:
            path[i][j] = 1
            solutions.append([row[:] for row in path])
            return
        if i > last_row or j > last_column or rows[i][j] == BLOCKED:
            return
        path[i][j] = 1
        walk(i, j + 1)
        walk(i + 1, j)
        path[i][j] = 0

    walk(0, 0)
    return solutions