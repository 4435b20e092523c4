import os

import pytest

from bftape import strip_shebang

PROGRAMS = os.path.join(os.path.dirname(__file__), '..', 'examples', 'programs')


def _load(name: str) -> bytes:
    with open(os.path.join(PROGRAMS, name), 'rb') as f:
        return strip_shebang(f.read())


@pytest.fixture
def programs_dir() -> str:
    return PROGRAMS


@pytest.fixture
def hello_world() -> bytes:
    return _load('hello-world.b')


@pytest.fixture
def rot13() -> bytes:
    return _load('rot13.b')
