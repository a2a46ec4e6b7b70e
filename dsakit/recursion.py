"""Recursive puzzles."""


def tower_of_hanoi(
    disks: int, source: str = "A", helper: str = "B", destination: str = "C"
) -> list[tuple[int, str, str]]:
    """Return the moves that carry ``disks`` disks from ``source`` to ``destination``.

    Each move is ``(disk, from_peg, to_peg)``; disk 1 is the smallest.
    """
    if disks < 0:
        raise ValueError(f"number of disks must be non-negative, got {disks}")
    moves: list[tuple[int, str, str]] = []

    def solve(count: int, src: str, spare: str, dest: str) -> None:
        if count == 0:
            return
        solve(count - 1, src, dest, spare)
        moves.append((count, src, dest))
        solve(count - 1, spare, src, dest)

    solve(disks, source, helper, destination)
    return moves