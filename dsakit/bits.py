"""Single-bit operations and population counts on integers."""


def _check_position(position: int) -> None:
    if position < 0:
        raise ValueError(f"bit position must be non-negative, got {position}")


def get_bit(n: int, position: int) -> int:
    """Return the bit of ``n`` at ``position`` as 0 or 1."""
    _check_position(position)
    return 1 if n & (1 << position) else 0


def set_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` set."""
    _check_position(position)
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` cleared."""
    _check_position(position)
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """Return ``n`` with the bit at ``position`` replaced by ``value`` (0 or 1)."""
    _check_position(position)
    if value not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, got {value}")
    return (n & ~(1 << position)) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """Return ``n`` with its lowest ``count`` bits cleared."""
    _check_position(count)
    return n & (-1 << count)


def clear_bits_range(n: int, low: int, high: int) -> int:
    """Return ``n`` with bits ``low`` through ``high`` (inclusive) cleared."""
    _check_position(low)
    if low > high:
        raise ValueError(f"range start {low} is after range end {high}")
    mask = (-1 << (high + 1)) | ((1 << low) - 1)
    return n & mask


def _check_unsigned(n: int) -> None:
    if n < 0:
        raise ValueError(f"cannot count set bits of a negative number, got {n}")


def count_set_bits(n: int) -> int:
    """Count the 1 bits of a non-negative integer, one bit at a time."""
    _check_unsigned(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Count the 1 bits of a non-negative integer by clearing the lowest each step."""
    _check_unsigned(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count