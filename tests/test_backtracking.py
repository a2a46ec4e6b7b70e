import pytest

from dsakit.backtracking import hamiltonian_cycles, rat_in_maze, solve_n_queens

SAMPLE_GRAPH = [
    [0, 1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 0, 0, 1],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 1, 0],
]

SAMPLE_MAZE = ["0000", "000X", "000X", "0X00"]


def test_hamiltonian_cycles_are_valid():
    cycles = hamiltonian_cycles(SAMPLE_GRAPH, 0)
    assert cycles
    for cycle in cycles:
        assert cycle[0] == 0 and cycle[-1] == 0
        assert sorted(cycle[:-1]) == list(range(8))
        for a, b in zip(cycle, cycle[1:]):
            assert SAMPLE_GRAPH[a][b] == 1


def test_hamiltonian_cycles_come_in_both_directions():
    cycles = hamiltonian_cycles(SAMPLE_GRAPH, 0)
    as_tuples = {tuple(c) for c in cycles}
    assert len(as_tuples) == len(cycles)
    for cycle in cycles:
        assert tuple(reversed(cycle)) in as_tuples


def test_hamiltonian_cycles_none_in_a_path_graph():
    path_graph = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert hamiltonian_cycles(path_graph, 0) == []


def test_hamiltonian_cycles_reject_bad_input():
    with pytest.raises(ValueError):
        hamiltonian_cycles([[0, 1], [1]], 0)
    with pytest.raises(IndexError):
        hamiltonian_cycles(SAMPLE_GRAPH, 8)


def test_four_queens_first_solution():
    assert solve_n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_queens_do_not_attack(n):
    board = solve_n_queens(n)
    queens = [(r, c) for r in range(n) for c in range(n) if board[r][c]]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [2, 3])
def test_queens_without_solution(n):
    assert solve_n_queens(n) is None


def test_queens_negative_size():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def _trace(grid):
    height, width = len(grid), len(grid[0])
    i = j = 0
    cells = [(0, 0)]
    while (i, j) != (height - 1, width - 1):
        if j + 1 < width and grid[i][j + 1]:
            j += 1
        elif i + 1 < height and grid[i + 1][j]:
            i += 1
        else:
            break
        cells.append((i, j))
    return cells


def test_maze_paths_are_monotone_and_avoid_walls():
    solutions = rat_in_maze(SAMPLE_MAZE)
    assert solutions
    for grid in solutions:
        cells = _trace(grid)
        assert cells[-1] == (3, 3)
        assert len(cells) == sum(map(sum, grid)) == 7
        for i, j in cells[:-1]:
            assert SAMPLE_MAZE[i][j] != "X"


def test_maze_paths_are_distinct():
    solutions = rat_in_maze(SAMPLE_MAZE)
    keys = {tuple(map(tuple, grid)) for grid in solutions}
    assert len(keys) == len(solutions)


def test_open_two_by_two_maze():
    assert len(rat_in_maze(["00", "00"])) == 2


def test_blocked_start_has_no_path():
    assert rat_in_maze(["X0", "00"]) == []


def test_maze_rejects_empty_and_ragged():
    with pytest.raises(ValueError):
        rat_in_maze([])
    with pytest.raises(ValueError):
        rat_in_maze(["00", "0"])