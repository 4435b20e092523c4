from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

import numpy as np

from .engine import Engine
from .errors import ParseError, make_parse_error
from .instructions import Instruction, count_instructions, parse
from .lexer import tokenize
from .state import DEFAULT_TAPE_LENGTH, RunStatus, RuntimeSettings
from .utils import strip_shebang

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    tape_length: int = DEFAULT_TAPE_LENGTH
    should_flush: bool = True
    quit_on_eof: bool = False

    def settings(self) -> RuntimeSettings:
        return RuntimeSettings(should_flush=self.should_flush, quit_on_eof=self.quit_on_eof)


@dataclass(frozen=True)
class RunResult:
    output: Optional[bytes]
    status: RunStatus
    pointer: int
    tape: np.ndarray


def parse_source(source: Union[str, bytes]) -> Tuple[Instruction, ...]:
    """Tokenize and parse `source`; parse errors carry line/column context."""
    try:
        program = parse(tokenize(source))
    except ParseError as e:
        raise make_parse_error(e, source=source) from None
    logger.debug("program has %d instructions", count_instructions(program))
    return program


def run_string(
    source: Union[str, bytes],
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = options or RunOptions()
    program = parse_source(strip_shebang(source))

    engine = Engine(opts.tape_length)
    inp = stdin if stdin is not None else io.BytesIO()
    out = stdout if stdout is not None else io.BytesIO()

    status = engine.run(program, inp, out, opts.settings())
    out.flush()

    return RunResult(
        output=out.getvalue() if stdout is None else None,
        status=status,
        pointer=engine.pointer,
        tape=engine.tape.copy(),
    )


def run_file(
    path: str | Path,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    p = Path(path)
    return run_string(p.read_bytes(), stdin=stdin, stdout=stdout, options=options)
