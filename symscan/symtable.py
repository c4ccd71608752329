"""Symbol table backed by a string pool and a chained hash table."""

from __future__ import annotations

from dataclasses import dataclass

from symscan.hashing import division_method
from symscan.hashtable import ChainedHashTable

DEFAULT_HASH_SIZE = 100
DEFAULT_CAPACITY = 100
DEFAULT_POOL_SIZE = 1000


class SymbolTableOverflow(Exception):
    """Raised when the symbol table or its string pool has no room left."""


@dataclass(frozen=True)
class Symbol:
    """One stored identifier: its 1-based id, pool offset, length and text."""

    id: int
    index: int
    length: int
    name: str


class SymbolTable:
    """Stores each distinct identifier once and hands out 1-based ids."""

    def __init__(
        self,
        hash_size: int = DEFAULT_HASH_SIZE,
        capacity: int = DEFAULT_CAPACITY,
        pool_size: int = DEFAULT_POOL_SIZE,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if pool_size <= 0:
            raise ValueError(f"pool size must be positive, got {pool_size}")
        self.hash_table = ChainedHashTable(hash_size)
        self.capacity = capacity
        self.pool_size = pool_size
        self.duplicate = False
        self._symbols: list[Symbol] = []
        self._pool_used = 0

    def process(self, identifier: str) -> int:
        """Return the id of ``identifier``, storing it first if it is new.

        ``duplicate`` tells whether the last call found an existing entry.
        """
        hash_value = division_method(identifier, self.hash_table.size)
        found = self.hash_table.find(
            hash_value, lambda sid: self._symbols[sid - 1].name == identifier
        )
        self.duplicate = found is not None
        if found is not None:
            return found
        if len(self._symbols) >= self.capacity:
            raise SymbolTableOverflow("symbol table overflow")
        if self._pool_used + len(identifier) >= self.pool_size:
            raise SymbolTableOverflow("string pool overflow")
        symbol = Symbol(
            id=len(self._symbols) + 1,
            index=self._pool_used,
            length=len(identifier),
            name=identifier,
        )
        self._symbols.append(symbol)
        self.hash_table.add(symbol.id, hash_value)
        self._pool_used += len(identifier) + 1
        return symbol.id

    def symbols(self) -> list[Symbol]:
        """Return the stored symbols in id order."""
        return list(self._symbols)

    def format_symbols(self) -> str:
        """Render the symbol table listing."""
        lines = ["", "Symbol Table", "ID\tIndex\tLength\tSymbol"]
        lines.extend(
            f"{s.id}\t{s.index}\t{s.length}\t{s.name}" for s in self._symbols
        )
        return "\n".join(lines) + "\n"

    def format_hash_table(self) -> str:
        """Render the hash table's non-empty chains."""
        return self.hash_table.format()