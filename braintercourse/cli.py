"""Command line entry point: run a program, print its output, show it."""

from __future__ import annotations

import sys
from typing import BinaryIO, Optional, Sequence, TextIO

from braintercourse.interpreter import BUFFER_SIZE, BrainfuckError, run
from braintercourse.renderer import run_renderer

USAGE = "Usage:\n\tbraintercourse\n\tbraintercourse <brainfuck program>\n"


def read_program(argv: Sequence[str], stdin: BinaryIO, stdout: TextIO) -> str:
    """Take the program from the single argument, or prompt for one line.

    Raises ValueError carrying the usage text when given too many arguments.
    """
    if len(argv) == 1:
        return argv[0]
    if len(argv) > 1:
        raise ValueError(USAGE)
    stdout.write("Enter program:\n")
    stdout.flush()
    line = stdin.readline(BUFFER_SIZE - 1)
    return line.decode("latin-1") if isinstance(line, bytes) else line


def _write_output(data: bytes) -> None:
    sys.stdout.flush()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is not None:
        buffer.write(data)
        buffer.flush()
    else:
        sys.stdout.write(data.decode("latin-1"))
        sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        program = read_program(args, getattr(sys.stdin, "buffer", sys.stdin), sys.stdout)
    except ValueError as error:
        sys.stderr.write(str(error))
        return 1

    try:
        result = run(program)
    except BrainfuckError as error:
        sys.stderr.write(f"{error}\n")
        return 1

    _write_output(result.output)
    run_renderer(program, result.used_memory(), result.output_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())