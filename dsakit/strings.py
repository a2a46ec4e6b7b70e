"""String reversal and length-first sorting."""

from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Sort longest first; strings of equal length in lexicographic order."""
    return sorted(strings, key=lambda s: (-len(s), s))