from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Type, Union


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(error_cls: Type["ParseError"]) -> Optional[str]:
    if issubclass(error_cls, UnmatchedLoopStart):
        return 'Every "[" needs a closing "]" later in the program.'
    if issubclass(error_cls, UnmatchedLoopEnd):
        return 'This "]" closes nothing; check for a missing "[" or an extra "]".'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ParseError(BFError):
    line: Optional[int] = None
    column: Optional[int] = None
    context: str = ""
    hint: Optional[str] = None


@dataclass
class UnmatchedLoopStart(ParseError):
    message: str = "could not find match for `[`"


@dataclass
class UnmatchedLoopEnd(ParseError):
    message: str = "could not find match for `]`"


def _find_unmatched(code: bytes, error_cls: Type[ParseError]) -> Optional[int]:
    """Byte offset of the bracket responsible for `error_cls`, if any."""
    open_at: List[int] = []
    for offset, b in enumerate(code):
        if b == 0x5B:  # [
            open_at.append(offset)
        elif b == 0x5D:  # ]
            if not open_at:
                return offset if issubclass(error_cls, UnmatchedLoopEnd) else None
            open_at.pop()
    if open_at and issubclass(error_cls, UnmatchedLoopStart):
        return open_at[-1]
    return None


def make_parse_error(error: ParseError, *, source: Union[str, bytes]) -> ParseError:
    """Return a copy of `error` located in `source`, with context and hint."""
    code = source.encode('utf-8', errors='surrogatepass') if isinstance(source, str) else bytes(source)
    error_cls = type(error)
    offset = _find_unmatched(code, error_cls)
    if offset is None:
        return error

    line = code.count(b'\n', 0, offset) + 1
    column = offset - (code.rfind(b'\n', 0, offset) + 1) + 1
    lines = code.decode('utf-8', errors='replace').split('\n')
    ctx = _build_context(lines, line)
    hint = _hint_for(error_cls)
    hint_block = f"\nHint: {hint}" if hint else ""
    return error_cls(
        message=f"ParseError: {error.message} (line {line}, column {column})\n{ctx}{hint_block}",
        line=line,
        column=column,
        context=ctx,
        hint=hint,
    )
