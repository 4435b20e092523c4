
from .engine import Engine
from .errors import BFError, ParseError, UnmatchedLoopEnd, UnmatchedLoopStart
from .instructions import Instruction, Loop, Op, parse
from .lexer import Token, tokenize
from .state import DEFAULT_TAPE_LENGTH, RunStatus, RuntimeSettings
from .api import RunOptions, RunResult, parse_source, run_file, run_string
from .utils import strip_shebang

__all__ = [
    'Engine',
    'BFError',
    'ParseError',
    'UnmatchedLoopEnd',
    'UnmatchedLoopStart',
    'Instruction',
    'Loop',
    'Op',
    'parse',
    'Token',
    'tokenize',
    'DEFAULT_TAPE_LENGTH',
    'RunStatus',
    'RuntimeSettings',
    'RunOptions',
    'RunResult',
    'parse_source',
    'run_file',
    'run_string',
    'strip_shebang',
]
