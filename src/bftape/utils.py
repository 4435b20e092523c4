from __future__ import annotations

from typing import TypeVar

S = TypeVar('S', str, bytes, bytearray)


def strip_shebang(source: S) -> S:
    """Drop a leading `#!` line, keeping the newline that ends it.

    `#!/usr/bin/env bftape\\n+++` becomes `\\n+++`; sources without a shebang
    come back untouched.
    """
    if isinstance(source, (bytes, bytearray)):
        marker, newline = b'#!', b'\n'
    else:
        marker, newline = '#!', '\n'

    if not source.startswith(marker):
        return source

    index = source.find(newline)
    if index == -1:
        return source[len(source):]
    return source[index:]
