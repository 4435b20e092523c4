from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Union


class Token(Enum):
    INC = '+'
    DEC = '-'
    NEXT = '>'
    PREV = '<'
    PRINT = '.'
    READ = ','
    LOOP_START = '['
    LOOP_END = ']'


# byte value -> token; everything else is a comment
_TOKEN_TABLE: Dict[int, Token] = {ord(t.value): t for t in Token}


def _as_bytes(source: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(source, str):
        return source.encode('utf-8', errors='surrogatepass')
    return bytes(source)


def tokenize(source: Union[str, bytes, bytearray]) -> Iterator[Token]:
    """Yield the tokens of `source`, silently skipping any other byte.

    The scan runs over raw bytes, so non-ASCII comment text never needs to
    decode cleanly. The generator is lazy; call again to restart.
    """
    table = _TOKEN_TABLE
    for b in _as_bytes(source):
        tok = table.get(b)
        if tok is not None:
            yield tok
