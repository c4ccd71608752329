"""Identifier scanning with hashed symbol tables, string pools and token report lines."""

__version__ = "0.1.0"
__all__ = ["hashing", "hashtable", "tokens", "symtable", "identifiers", "textfiles"]