from __future__ import annotations

import logging
import numbers
from typing import BinaryIO, List, Optional, Sequence, Tuple

import numpy as np

from .instructions import Instruction, Loop, Op
from .state import DEFAULT_TAPE_LENGTH, RunStatus, RuntimeSettings

logger = logging.getLogger(__name__)


class Engine:
    """Tape, cursor and the iterative tree walker that drives them.

    The tape is a fixed-length uint8 array; arithmetic wraps modulo 256 and
    the cursor wraps at both ends, so ordinary programs never fault here.
    """

    def __init__(self, tape_length: int = DEFAULT_TAPE_LENGTH):
        if isinstance(tape_length, bool) or not isinstance(tape_length, numbers.Integral):
            raise TypeError(f"tape length must be an integer, got {tape_length!r}")
        if tape_length <= 0:
            raise ValueError(f"tape length must be positive, got {tape_length}")
        self.pointer = 0
        self.tape = np.zeros(int(tape_length), dtype=np.uint8)

    def next(self) -> None:
        """Shift the cursor to the next cell, wrapping to 0 past the end."""
        if self.pointer == len(self.tape) - 1:
            self.pointer = 0
        else:
            self.pointer += 1

    def prev(self) -> None:
        """Shift the cursor to the previous cell, wrapping to the last one."""
        if self.pointer == 0:
            self.pointer = len(self.tape) - 1
        else:
            self.pointer -= 1

    @property
    def current(self) -> int:
        return int(self.tape[self.pointer])

    def nonzero_cells(self) -> List[Tuple[int, int]]:
        """(address, value) pairs for every non-zero cell, in address order."""
        addrs = np.nonzero(self.tape)[0]
        return [(int(addr), int(self.tape[addr])) for addr in addrs]

    def run(
        self,
        instructions: Sequence[Instruction],
        stdin: BinaryIO,
        stdout: BinaryIO,
        settings: Optional[RuntimeSettings] = None,
    ) -> RunStatus:
        """Execute `instructions` against this engine's tape.

        `stdin` must offer `read(n) -> bytes` (empty at end of input) and
        `stdout` must offer `write(bytes)` and `flush()`. Errors raised by
        either stream propagate unchanged; end of input is handled according
        to `settings.quit_on_eof`.

        Returns RunStatus.HALTED_ON_EOF if a read at end of input stopped the
        run, RunStatus.COMPLETED otherwise.
        """
        if settings is None:
            settings = RuntimeSettings()
        logger.debug(
            "run: tape_length=%d should_flush=%s quit_on_eof=%s",
            len(self.tape), settings.should_flush, settings.quit_on_eof,
        )

        tape = self.tape
        stack: List[Instruction] = list(instructions)[::-1]

        while stack:
            ins = stack.pop()

            if isinstance(ins, Loop):
                if tape[self.pointer] != 0:
                    # popped in reverse, so the loop goes back first and its
                    # body lands on top of it
                    stack.append(ins)
                    stack.extend(reversed(ins.body))
            elif ins is Op.INC:
                tape[self.pointer] = np.uint8((int(tape[self.pointer]) + 1) % 256)
            elif ins is Op.DEC:
                tape[self.pointer] = np.uint8((int(tape[self.pointer]) - 1) % 256)
            elif ins is Op.NEXT:
                self.next()
            elif ins is Op.PREV:
                self.prev()
            elif ins is Op.PRINT:
                stdout.write(bytes((int(tape[self.pointer]),)))
                if settings.should_flush:
                    stdout.flush()
            elif ins is Op.READ:
                # buffered output has to be visible before we block on input
                if not settings.should_flush:
                    stdout.flush()

                data = stdin.read(1)
                if data:
                    tape[self.pointer] = np.uint8(data[0])
                elif settings.quit_on_eof:
                    logger.debug("end of input at cell %d, halting", self.pointer)
                    return RunStatus.HALTED_ON_EOF
            else:
                raise TypeError(f"not an instruction: {ins!r}")

        return RunStatus.COMPLETED
