from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple, Union

from .errors import UnmatchedLoopEnd, UnmatchedLoopStart
from .lexer import Token

logger = logging.getLogger(__name__)


class Op(Enum):
    INC = '+'
    DEC = '-'
    NEXT = '>'
    PREV = '<'
    PRINT = '.'
    READ = ','


@dataclass(frozen=True, eq=False, repr=False)
class Loop:
    body: Tuple["Instruction", ...] = ()

    # Nesting can go far deeper than the recursion limit, so comparison,
    # hashing and repr walk the tree instead of recursing into children.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Loop):
            return NotImplemented
        pending: List[Tuple[Instruction, Instruction]] = [(self, other)]
        while pending:
            a, b = pending.pop()
            if isinstance(a, Loop) and isinstance(b, Loop):
                if len(a.body) != len(b.body):
                    return False
                pending.extend(zip(a.body, b.body))
            elif isinstance(a, Loop) or isinstance(b, Loop) or a is not b:
                return False
        return True

    def __hash__(self) -> int:
        return hash((Loop, emit(self.body)))

    def __repr__(self) -> str:
        return f"Loop({emit(self.body)!r})"


Instruction = Union[Op, Loop]

_LEAF_OPS = {
    Token.INC: Op.INC,
    Token.DEC: Op.DEC,
    Token.NEXT: Op.NEXT,
    Token.PREV: Op.PREV,
    Token.PRINT: Op.PRINT,
    Token.READ: Op.READ,
}


def parse(tokens: Iterable[Token]) -> Tuple[Instruction, ...]:
    """Build the instruction tree for a token stream.

    Raises UnmatchedLoopEnd on a `]` with no open loop and UnmatchedLoopStart
    if a `[` is still open when the stream ends.
    """
    # frames[0] is the top level, frames[-1] the innermost open loop body
    frames: List[List[Instruction]] = [[]]

    for tok in tokens:
        if tok is Token.LOOP_START:
            frames.append([])
        elif tok is Token.LOOP_END:
            if len(frames) == 1:
                raise UnmatchedLoopEnd()
            body = frames.pop()
            frames[-1].append(Loop(tuple(body)))
        else:
            frames[-1].append(_LEAF_OPS[tok])

    if len(frames) != 1:
        raise UnmatchedLoopStart()

    program = tuple(frames[0])
    logger.debug("parsed %d top-level instructions", len(program))
    return program


def count_instructions(program: Iterable[Instruction]) -> int:
    """Total number of nodes in the tree, loops included."""
    total = 0
    pending: List[Instruction] = list(program)
    while pending:
        ins = pending.pop()
        total += 1
        if isinstance(ins, Loop):
            pending.extend(ins.body)
    return total


def emit(program: Iterable[Instruction]) -> str:
    """Render a tree back to canonical source text (commands only)."""
    out: List[str] = []
    # entries are instructions or the closing-bracket marker None
    pending: List[Union[Instruction, None]] = list(program)[::-1]
    while pending:
        ins = pending.pop()
        if ins is None:
            out.append(']')
        elif isinstance(ins, Loop):
            out.append('[')
            pending.append(None)
            pending.extend(reversed(ins.body))
        else:
            out.append(ins.value)
    return "".join(out)
