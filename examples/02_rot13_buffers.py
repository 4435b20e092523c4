#!/usr/bin/env python3

import io
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bftape import Engine, RuntimeSettings, parse, strip_shebang, tokenize


def main():
    # In-memory buffers instead of stdio. rot13.b never stops on its own,
    # so quit_on_eof ends the run once the input buffer is drained.
    path = os.path.join(os.path.dirname(__file__), "programs", "rot13.b")
    with open(path, "rb") as f:
        code = strip_shebang(f.read())

    settings = RuntimeSettings(should_flush=False, quit_on_eof=True)
    instructions = parse(tokenize(code))

    input_bytes = b"Hello, World!\n"
    stdin = io.BytesIO(input_bytes)
    stdout = io.BytesIO()

    Engine().run(instructions, stdin, stdout, settings)

    plain = input_bytes.decode().strip()
    ciphered = stdout.getvalue().decode().strip()
    print(f"Ayo! \"{plain}\" ciphered in ROT13 is \"{ciphered}\"")


if __name__ == "__main__":
    main()
