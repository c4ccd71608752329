"""Identifier checker: splits text into identifiers, validates and stores them."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import chain

from symscan.hashing import ascii_sum, division_method
from symscan.hashtable import ChainedHashTable
from symscan.symtable import Symbol

SEPARATORS = frozenset(" ,;\t\n\r\0")
MAX_LENGTH = 15
DEFAULT_HASH_SIZE = 11
DEFAULT_CAPACITY = 100
DEFAULT_POOL_SIZE = 500
DEFAULT_PATH = "example.txt"

_LETTERS = frozenset(string.ascii_letters + "_")
_DIGITS = frozenset(string.digits)


class IdentifierError(Enum):
    """Reasons an identifier is rejected."""

    ILLEGAL = "Illegal identifier"
    START_WITH_DIGIT = "Start with digit"
    TOO_LONG = "Too long identifier"

    def message(self, token: str) -> str:
        return f"Error - {self.value} ({token})"


class InsertStatus(Enum):
    ADDED = "added"
    EXISTS = "exists"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class Insertion:
    """Outcome of inserting one identifier."""

    status: InsertStatus
    hash_value: int
    name: str

    @property
    def added(self) -> bool:
        return self.status is InsertStatus.ADDED

    @property
    def message(self) -> str:
        if self.status is InsertStatus.ADDED:
            return f"{self.hash_value}\t{self.name}"
        if self.status is InsertStatus.EXISTS:
            return f"{self.hash_value}\t{self.name} (already exists)"
        return "Error - Symbol table overflow"


class IdentifierTable:
    """Symbol table of identifiers keyed by the sum of their character codes."""

    def __init__(
        self, hash_size: int = DEFAULT_HASH_SIZE, capacity: int = DEFAULT_CAPACITY
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.hash_table = ChainedHashTable(hash_size)
        self.capacity = capacity
        self._symbols: list[Symbol] = []

    def insert(self, name: str, pool_index: int) -> Insertion:
        """Store ``name`` found at ``pool_index`` unless it is already present."""
        hash_value = division_method(ascii_sum(name), self.hash_table.size)
        found = self.hash_table.find(
            hash_value, lambda sid: self._symbols[sid - 1].name == name
        )
        if found is not None:
            return Insertion(InsertStatus.EXISTS, hash_value, name)
        if len(self._symbols) >= self.capacity:
            return Insertion(InsertStatus.OVERFLOW, hash_value, name)
        symbol_id = len(self._symbols) + 1
        self.hash_table.add(symbol_id, hash_value)
        self._symbols.append(Symbol(symbol_id, pool_index, len(name), name))
        return Insertion(InsertStatus.ADDED, hash_value, name)

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


@dataclass
class ScanResult:
    table: IdentifierTable
    messages: list[str]
    pool_overflow: bool = False


def scan(text: str) -> ScanResult:
    """Split ``text`` on separators, validate each identifier and store the valid ones.

    Scanning stops early when the string pool is full.
    """
    result = ScanResult(IdentifierTable(DEFAULT_HASH_SIZE, DEFAULT_CAPACITY), [])
    pool_start = 0
    token: list[str] = []
    error: IdentifierError | None = None
    for ch in chain(text, [None]):
        if pool_start + len(token) >= DEFAULT_POOL_SIZE:
            result.pool_overflow = True
            break
        if ch is None or ch in SEPARATORS:
            if not token:
                continue
            name = "".join(token)
            token = []
            if len(name) > MAX_LENGTH:
                error = IdentifierError.TOO_LONG
            if error is None:
                insertion = result.table.insert(name, pool_start)
                result.messages.append(insertion.message)
                if insertion.added:
                    pool_start += len(name) + 1
            else:
                result.messages.append(error.message(name))
                error = None
        elif ch in _LETTERS:
            token.append(ch)
        elif ch in _DIGITS:
            if not token:
                error = IdentifierError.START_WITH_DIGIT
            token.append(ch)
        else:
            error = IdentifierError.ILLEGAL
            token.append(ch)
    return result


def _render(result: ScanResult) -> str:
    body = "".join(f"{message}\n" for message in result.messages)
    return body + result.table.format_symbols() + result.table.format_hash_table()


def report(text: str) -> str:
    """Return the full listing printed for ``text``."""
    return _render(scan(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Check the identifiers in a file and print the symbol and hash tables."""
    parser = argparse.ArgumentParser(description="Check identifiers in a text file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError as exc:
        print(f"cannot open {args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    result = scan(text)
    if result.pool_overflow:
        print("Error - String Pool overflow", file=sys.stderr)
    print(_render(result), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())