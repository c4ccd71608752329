"""A hash table of integer entries with chaining, plus a small demo driver."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence

from symscan.hashing import division_method

DEFAULT_SIZE = 20
DEFAULT_INPUTS = (17, 18, 23, 25, 18, 38, 39, 22)


class ChainedHashTable:
    """Fixed number of buckets; new entries go to the front of their bucket's chain."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"hash table size must be positive, got {size}")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, hscode: int) -> list[int]:
        if not 0 <= hscode < self.size:
            raise IndexError(f"hash code {hscode} outside table of size {self.size}")
        return self._buckets[hscode]

    def add(self, index: int, hscode: int) -> None:
        """Put ``index`` at the head of the chain for ``hscode``."""
        self._bucket(hscode).insert(0, index)

    def chain(self, hscode: int) -> list[int]:
        """Return the entries of one bucket, head first."""
        return list(self._bucket(hscode))

    def find(self, hscode: int, match: Callable[[int], bool]) -> int | None:
        """Return the first entry in the bucket for which ``match`` holds, or None."""
        return next((entry for entry in self._bucket(hscode) if match(entry)), None)

    def format(self) -> str:
        """Render every non-empty bucket as ``[i]: a -> b -> NULL``."""
        lines = ["", "Hash Table:"]
        for code, bucket in enumerate(self._buckets):
            if bucket:
                chain = "".join(f"{entry} -> " for entry in bucket)
                lines.append(f"[{code}]: {chain}NULL")
        return "\n".join(lines) + "\n"


def insert_values(
    values: Iterable[int], size: int
) -> tuple[ChainedHashTable, list[str]]:
    """Insert each value once, reporting its hash and whether it was already present."""
    table = ChainedHashTable(size)
    messages = []
    for value in values:
        hash_value = division_method(value, size)
        if table.find(hash_value, lambda entry, v=value: entry == v) is None:
            table.add(value, hash_value)
            messages.append(f"{hash_value}\t{value}")
        else:
            messages.append(f"{hash_value}\t{value} (already exists)")
    return table, messages


def main(argv: Sequence[str] | None = None) -> int:
    """Insert integers (given on the command line, or a built-in set) and print the table."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = [int(arg) for arg in args] if args else list(DEFAULT_INPUTS)
    except ValueError as exc:
        print(f"invalid integer: {exc}", file=sys.stderr)
        return 1
    table, messages = insert_values(values, DEFAULT_SIZE)
    for message in messages:
        print(message)
    print(table.format(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())