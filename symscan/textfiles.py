"""Small text-file utilities: echo a file, or cut it into dot/line segments."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from os import PathLike

SEGMENT_SEPARATORS = frozenset(".\r\n")
DEFAULT_ECHO_PATH = "example.txt"
DEFAULT_SEGMENT_PATH = "file.txt"


@dataclass(frozen=True)
class Segment:
    """A piece of text, its offset in the pool, and whether it was flagged."""

    text: str
    index: int
    error: bool = False

    def format(self) -> str:
        if self.error:
            return f"Error - start with digit ({self.text})"
        return f"{self.text} ({self.index})"


def read_lines(path: str | PathLike[str]) -> Iterator[str]:
    """Yield the lines of a text file, newlines kept."""
    with open(path, encoding="utf-8") as fh:
        yield from fh


def split_segments(text: str) -> list[Segment]:
    """Cut ``text`` before every separator that follows a non-empty segment.

    The separator starts the next segment. Every segment but the last is
    flagged when it begins with a digit.
    """
    segments: list[Segment] = []
    start = 0
    current: list[str] = []
    for ch in text:
        if ch in SEGMENT_SEPARATORS and current:
            piece = "".join(current)
            segments.append(Segment(piece, start, piece[0] in string.digits))
            start += len(piece) + 1
            current = []
        current.append(ch)
    if current:
        segments.append(Segment("".join(current), start))
    return segments


def main(argv: Sequence[str] | None = None) -> int:
    """Print a file's contents, or its segments with --segments."""
    parser = argparse.ArgumentParser(description="Echo or segment a text file.")
    parser.add_argument("path", nargs="?")
    parser.add_argument("--segments", action="store_true")
    args = parser.parse_args(argv)
    path = args.path or (DEFAULT_SEGMENT_PATH if args.segments else DEFAULT_ECHO_PATH)
    try:
        if args.segments:
            with open(path, encoding="utf-8") as fh:
                text = fh.read()
            for segment in split_segments(text):
                print(segment.format())
        else:
            for line in read_lines(path):
                print(line, end="")
    except OSError as exc:
        print(f"cannot open {path}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())