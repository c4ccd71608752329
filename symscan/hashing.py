"""Hash functions that map identifiers or integer keys onto table slots."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed integer."""
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder matching division that rounds toward zero."""
    return a - b * _trunc_div(a, b)


def _check_size(table_size: int) -> None:
    if table_size <= 0:
        raise ValueError(f"table size must be positive, got {table_size}")


def ascii_sum(key: str) -> int:
    """Return the sum of the character codes of ``key`` as an unsigned 32-bit value."""
    return sum(ord(ch) for ch in key) & _UINT32_MASK


def _as_key(key: str | int) -> int:
    return ascii_sum(key) if isinstance(key, str) else key


def division_method(key: str | int, table_size: int) -> int:
    """Hash by division: the key (or the character-code sum of a string) modulo the size."""
    _check_size(table_size)
    return _trunc_mod(_as_key(key), table_size)


def midsquare_method(key: str | int, table_size: int) -> int:
    """Hash by squaring the key and keeping its middle three decimal digits."""
    _check_size(table_size)
    hash_key = _as_key(key) & _UINT32_MASK
    squared = _to_int32(hash_key * hash_key)
    mid_part = _trunc_mod(_trunc_div(squared, 100), 1000)
    return _trunc_mod(mid_part, table_size)


def folding_method(key: str | int, table_size: int) -> int:
    """Hash by adding the key's four-digit decimal groups together."""
    _check_size(table_size)
    hash_key = _as_key(key) & _UINT32_MASK
    fold = 0
    while hash_key > 0:
        hash_key, chunk = divmod(hash_key, 10000)
        fold += chunk
    return fold % table_size