"""Small text helpers: integer parsing, word splitting and line reading."""

from itertools import takewhile
from typing import IO, Iterator, List

BUFFER_SIZE = 1000

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading, optionally signed decimal integer; 0 when there is none."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def split_words(text: str, sep: str) -> List[str]:
    """Split text on a separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of a text stream, each keeping its trailing newline."""
    pending = ""
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending