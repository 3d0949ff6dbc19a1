"""Bit manipulation helpers for non-negative and signed integers."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def get_ith_bit(n: int, i: int) -> int:
    """Return the value (0 or 1) of bit ``i`` of ``n``."""
    _require_non_negative("i", i)
    mask = 1 << i
    return int((n & mask) != 0)


def set_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set."""
    return n | (1 << i)


def clear_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared."""
    return n & ~(1 << i)


def update_ith_bit(n: int, i: int, v: int) -> int:
    """Return ``n`` with bit ``i`` replaced by ``v`` (0 or 1)."""
    if v not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, got {v}")
    return clear_ith_bit(n, i) | (v << i)


def toggle_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` flipped."""
    return n ^ (1 << i)


def clear_last_i_bits(n: int, i: int) -> int:
    """Return ``n`` with its ``i`` lowest bits cleared."""
    return n & (-1 << i)


def clear_bits_in_range(n: int, i: int, j: int) -> int:
    """Return ``n`` with bits ``i`` through ``j`` (inclusive) cleared."""
    mask = (-1 << (j + 1)) | ((1 << i) - 1)
    return n & mask


def replace_bits(n: int, i: int, j: int, m: int) -> int:
    """Return ``n`` with bits ``i`` through ``j`` replaced by the bits of ``m``."""
    return clear_bits_in_range(n, i, j) | (m << i)


def clear_lsb_till(num: int, pos: int) -> int:
    """Clear bits 0 through ``pos`` (inclusive)."""
    return num & ~((1 << (pos + 1)) - 1)


def clear_msb_till(num: int, pos: int) -> int:
    """Keep only bits 0 through ``pos`` (inclusive)."""
    return num & ((1 << (pos + 1)) - 1)


def is_odd(num: int) -> bool:
    """Return True when the lowest bit of ``num`` is set."""
    return bool(num & 1)


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_power_of_four(n: int) -> bool:
    """Return True when ``n`` is a power of four."""
    return is_power_of_two(n) and count_bits_kernighan(n - 1) % 2 == 0


def count_set_bits(n: int) -> int:
    """Count the set bits of ``n`` by testing one bit at a time."""
    _require_non_negative("n", n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_bits_kernighan(n: int) -> int:
    """Count the set bits of ``n`` by repeatedly dropping the lowest one."""
    _require_non_negative("n", n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def fast_power(base: int, exp: int) -> int:
    """Compute ``base ** exp`` by iterating over the bits of ``exp``."""
    _require_non_negative("exp", exp)
    result = 1
    while exp:
        if exp & 1:
            result *= base
        base *= base
        exp >>= 1
    return result


def power_mod(x: int, y: int, mod: int) -> int:
    """Compute ``x ** y % mod``; returns 0 whenever ``x`` is a multiple of ``mod``."""
    _require_non_negative("y", y)
    if mod == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    x %= mod
    if x == 0:
        return 0
    result = 1
    while y > 0:
        if y & 1:
            result = result * x % mod
        y >>= 1
        x = x * x % mod
    return result


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell the binary form of ``n``."""
    return int(format(n, "b"))


def binary_to_decimal(n: int) -> int:
    """Interpret the decimal digits of ``n`` as binary; any non-zero digit counts as 1."""
    _require_non_negative("n", n)
    result = 0
    weight = 1
    while n:
        if n % 10:
            result += weight
        weight <<= 1
        n //= 10
    return result


def binary_string(num: int, width: int = 11) -> str:
    """Return the ``width`` lowest bits of ``num``, most significant first."""
    return "".join("1" if num & (1 << i) else "0" for i in reversed(range(width)))


def largest_power_of_two(n: int) -> int:
    """Return the largest power of two not exceeding ``n`` (0 for 0)."""
    _require_non_negative("n", n)
    return 1 << (n.bit_length() - 1) if n else 0


def lowest_set_bit(x: int) -> int:
    """Return the value of the lowest set bit of ``x`` (0 for 0)."""
    return x ^ (x & (x - 1))


def all_subsets(items: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``items``, ordered by bitmask."""
    n = len(items)
    return [
        [item for j, item in enumerate(items) if mask & (1 << j)]
        for mask in range(1 << n)
    ]


def sort_by_bits(values: Sequence[int]) -> list[int]:
    """Sort by number of set bits, most first; ties go in ascending order."""
    return sorted(values, key=lambda v: (-count_set_bits(v), v))


def hamming_distance(x: int, y: int) -> int:
    """Count the bit positions where ``x`` and ``y`` differ."""
    _require_non_negative("x", x)
    _require_non_negative("y", y)
    return count_bits_kernighan(x ^ y)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using exclusive or."""
    a ^= b
    b ^= a
    a ^= b
    return a, b