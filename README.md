# symscan

Building blocks for the front end of a small compiler, written in plain
Python with no third-party dependencies.

## Modules

- `symscan.hashing`: hash functions. `ascii_sum(key)` adds the character
  codes of a string (kept to an unsigned 32-bit value).
  `division_method`, `midsquare_method` and `folding_method` each take a
  string (hashed by its character-code sum) or an integer key and a table
  size, and raise `ValueError` for a size that is not positive.
- `symscan.hashtable`: `ChainedHashTable(size)`, a fixed number of buckets
  in which `add(index, hscode)` puts each new entry at the front of its
  chain. `chain(hscode)` returns one bucket head first, `find(hscode, match)`
  returns the first entry satisfying a predicate or `None`, and `format()`
  renders non-empty buckets as `[i]: a -> b -> NULL`.
  `insert_values(values, size)` inserts integers once each and returns the
  table with one message line per value.
- `symscan.symtable`: `SymbolTable(hash_size=100, capacity=100,
  pool_size=1000)` stores each distinct identifier once. `process(name)`
  returns its 1-based id, and sets `duplicate` to tell whether the name was
  already there. It raises `SymbolTableOverflow` when the table or its
  string pool is full. `symbols()`, `format_symbols()` and
  `format_hash_table()` give its contents.
- `symscan.identifiers`: `scan(text)` splits text on spaces, commas,
  semicolons, tabs, line breaks and NUL characters; rejects names that start
  with a digit, contain characters other than letters, digits and `_`, or are
  longer than 15 characters; and stores the valid ones in an
  `IdentifierTable` (11 hash buckets). Scanning stops when the 500-character
  string pool is full. `report(text)` returns the whole printed listing.
- `symscan.tokens`: the `TokenType` enumeration of token kinds, and
  `token_header()`, `format_token_line(lineno, token_type, text)` and
  `format_error(err_num, lineno, token)` for the lines of a token listing.
- `symscan.textfiles`: `read_lines(path)` yields a file's lines;
  `split_segments(text)` cuts text before each `.` or line break that
  follows a non-empty segment, flagging segments that begin with a digit.

## Installation

```
pip install .
```

Install with `pip install .[test]` to run the tests with `pytest`.

## Commands

Check the identifiers in a file (default `example.txt`), then print the
symbol table and hash table:

```
symscan-ids example.txt
```

Hash integers into a chained table of 20 buckets and print each insertion
and then the table. Without arguments a built-in set is used:

```
symscan-hash
symscan-hash 3 23 43 3
```

Print a text file (default `example.txt`), or with `--segments` print its
segments (default file `file.txt`):

```
symscan-text example.txt
symscan-text --segments file.txt
```

## Library use

```python
from symscan.hashing import ascii_sum, division_method
from symscan.symtable import SymbolTable
from symscan.identifiers import report

division_method(ascii_sum("count"), 100)

table = SymbolTable(hash_size=100, capacity=100, pool_size=1000)
first = table.process("count")
again = table.process("count")   # same id as first; table.duplicate is True
print(table.format_symbols())
print(table.format_hash_table())

print(report("alpha beta 9lives alpha"))
```

## What it does not do

The package has no lexical scanner that turns source code into tokens.
`symscan.tokens` only defines the token kinds and formats listing and error
lines; producing the tokens is left to the caller.