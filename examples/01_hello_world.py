#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bftape import Engine, RuntimeSettings, parse, strip_shebang, tokenize


def main():
    # Plain usage: run a program straight against the process stdio.
    path = os.path.join(os.path.dirname(__file__), "programs", "hello-world.b")
    with open(path, "rb") as f:
        code = strip_shebang(f.read())

    instructions = parse(tokenize(code))

    bf = Engine()
    bf.run(instructions, sys.stdin.buffer, sys.stdout.buffer, RuntimeSettings())


if __name__ == "__main__":
    main()
