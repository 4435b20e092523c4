from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_TAPE_LENGTH = 30_000


@dataclass(frozen=True)
class RuntimeSettings:
    """How the engine treats output buffering and end of input.

    should_flush: flush the output after every print; when False, output is
    only flushed before each read (so prompts show up) and at the caller's
    discretion.
    quit_on_eof: stop the whole run at the first read past the end of input
    instead of leaving the cell untouched and carrying on.
    """
    should_flush: bool = True
    quit_on_eof: bool = False


class RunStatus(Enum):
    COMPLETED = 'completed'
    HALTED_ON_EOF = 'halted_on_eof'
