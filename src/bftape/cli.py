from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import RunOptions, parse_source
from .engine import Engine
from .errors import BFError
from .state import DEFAULT_TAPE_LENGTH
from .utils import strip_shebang

logger = logging.getLogger(__name__)


def _bool_arg(value: str) -> bool:
    v = value.strip().lower()
    if v in ('true', 'yes', '1', 'on'):
        return True
    if v in ('false', 'no', '0', 'off'):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bftape",
        description="Configurable Brainfuck interpreter.",
    )
    parser.add_argument("input", type=Path, nargs="?", metavar="FILE",
                        help="Brainfuck program to interpret (read from stdin if omitted)")
    parser.add_argument("-t", "--tape-length", type=_positive_int, default=DEFAULT_TAPE_LENGTH,
                        metavar="BYTES", help=f"Tape size in cells (default {DEFAULT_TAPE_LENGTH})")
    parser.add_argument("-f", "--flush", type=_bool_arg, default=True, metavar="BOOL",
                        help="Flush output after every print (default true)")
    parser.add_argument("--quit-on-eof", type=_bool_arg, default=None, metavar="BOOL",
                        help="Stop at the first read past end of input "
                             "(default: true unless stdin is a terminal)")
    parser.add_argument("--dump", action="store_true",
                        help="Print the final pointer and non-zero cells to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_program(path: Optional[Path]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _dump(engine: Engine) -> None:
    cells = engine.nonzero_cells()
    sys.stderr.write(f"pointer: {engine.pointer} (value {engine.current})\n")
    for i in range(0, len(cells), 8):
        row = cells[i:i + 8]
        sys.stderr.write(" ".join(f"{addr}:{val}" for addr, val in row) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        code = _read_program(args.input)
    except OSError as e:
        sys.stderr.write(f"fatal: unable to open file \"{args.input}\": {e}\n")
        return 1

    code = strip_shebang(code)
    if not code.strip():
        return 0

    try:
        program = parse_source(code)
    except BFError as err:
        sys.stderr.write(f"fatal: {err}\n")
        return 1

    quit_on_eof = args.quit_on_eof
    if quit_on_eof is None:
        # program text came through stdin, so nothing is left to read there
        quit_on_eof = args.input is None or not _stdin_is_tty()

    options = RunOptions(tape_length=args.tape_length, should_flush=args.flush, quit_on_eof=quit_on_eof)
    engine = Engine(options.tape_length)
    stdout = sys.stdout.buffer

    try:
        status = engine.run(program, sys.stdin.buffer, stdout, options.settings())
        stdout.flush()
    except OSError as e:
        sys.stderr.write(f"fatal: I/O error: {e}\n")
        return 1

    logger.debug("finished: %s", status.value)
    if args.dump:
        _dump(engine)
    return 0
