import pytest

from dsakit.recursion import tower_of_hanoi


def _simulate(disks, moves, source="A", helper="B", destination="C"):
    pegs = {source: list(range(disks, 0, -1)), helper: [], destination: []}
    for disk, src, dest in moves:
        assert pegs[src] and pegs[src][-1] == disk
        assert not pegs[dest] or pegs[dest][-1] > disk
        pegs[dest].append(pegs[src].pop())
    return pegs


def test_zero_disks_needs_no_moves():
    assert tower_of_hanoi(0) == []


def test_single_disk_moves_directly():
    assert tower_of_hanoi(1, "A", "B", "C") == [(1, "A", "C")]


def test_two_disks():
    assert tower_of_hanoi(2, "A", "B", "C") == [(1, "A", "B"), (2, "A", "C"), (1, "B", "C")]


@pytest.mark.parametrize("disks", range(1, 9))
def test_move_count_is_minimal(disks):
    assert len(tower_of_hanoi(disks)) == 2**disks - 1


@pytest.mark.parametrize("disks", range(0, 8))
def test_moves_are_legal_and_finish_on_destination(disks):
    pegs = _simulate(disks, tower_of_hanoi(disks))
    assert pegs["C"] == list(range(disks, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_custom_peg_names():
    moves = tower_of_hanoi(3, "left", "middle", "right")
    pegs = _simulate(3, moves, "left", "middle", "right")
    assert pegs["right"] == [3, 2, 1]


def test_largest_disk_moves_once():
    moves = tower_of_hanoi(5)
    assert [move for move in moves if move[0] == 5] == [(5, "A", "C")]


def test_negative_disks_rejected():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)