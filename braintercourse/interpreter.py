"""Brainfuck interpreter that keeps the final machine state for display."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional

ARRAY_SIZE = 30000
BUFFER_SIZE = 1000

ByteReader = Callable[[], Optional[int]]


class BrainfuckError(Exception):
    """Raised when a program cannot be executed any further."""


class MemoryOverflowError(BrainfuckError):
    """The data pointer was moved past the last memory cell."""

    def __init__(self) -> None:
        super().__init__("Memory overflow error caused by '>'")


class MemoryUnderflowError(BrainfuckError):
    """The data pointer was moved before the first memory cell."""

    def __init__(self) -> None:
        super().__init__("Memory underflow error caused by '<'")


@dataclass
class ExecutionResult:
    """Final state of a finished program run."""

    memory: list[int]
    output: bytes
    max_data_ptr: int

    def used_memory(self) -> list[int]:
        """Cells from the first one up to the highest the pointer reached."""
        return self.memory[: self.max_data_ptr + 1]

    @property
    def output_text(self) -> str:
        return self.output.decode("latin-1")


def _to_cell(value: int) -> int:
    """Wrap a value into the signed byte range of a cell."""
    return (value + 128) % 256 - 128


def _match_brackets(program: str) -> tuple[dict[int, int], dict[int, int]]:
    forward: dict[int, int] = {}
    backward: dict[int, int] = {}
    open_positions: list[int] = []
    for position, op in enumerate(program):
        if op == "[":
            open_positions.append(position)
        elif op == "]" and open_positions:
            start = open_positions.pop()
            forward[start] = position
            backward[position] = start
    return forward, backward


def _read_stdin_byte() -> Optional[int]:
    data = sys.stdin.buffer.read(1)
    return data[0] if data else None


def run(program: str, read_byte: Optional[ByteReader] = None) -> ExecutionResult:
    """Execute a program and return memory, output and the highest cell used.

    ``read_byte`` supplies input for ``,``; it returns a byte value or None at
    end of input, which stores -1 in the cell. It defaults to standard input.
    """
    reader = read_byte or _read_stdin_byte
    forward, backward = _match_brackets(program)
    memory = [0] * ARRAY_SIZE
    output = bytearray()
    data_ptr = 0
    max_data_ptr = 0
    inst_ptr = 0

    while inst_ptr < len(program):
        op = program[inst_ptr]
        if op == "\0":
            break
        if op == ">":
            if data_ptr >= ARRAY_SIZE - 1:
                raise MemoryOverflowError()
            data_ptr += 1
            max_data_ptr = max(max_data_ptr, data_ptr)
        elif op == "<":
            if data_ptr <= 0:
                raise MemoryUnderflowError()
            data_ptr -= 1
        elif op == "+":
            memory[data_ptr] = _to_cell(memory[data_ptr] + 1)
        elif op == "-":
            memory[data_ptr] = _to_cell(memory[data_ptr] - 1)
        elif op == "[":
            if memory[data_ptr] == 0:
                if inst_ptr not in forward:
                    raise BrainfuckError(f"unmatched '[' at position {inst_ptr}")
                inst_ptr = forward[inst_ptr]
        elif op == "]":
            if memory[data_ptr] != 0:
                if inst_ptr not in backward:
                    raise BrainfuckError(f"unmatched ']' at position {inst_ptr}")
                inst_ptr = backward[inst_ptr]
        elif op == ".":
            byte = memory[data_ptr] & 0xFF
            if byte:
                if len(output) >= BUFFER_SIZE - 1:
                    raise BrainfuckError("output buffer full")
                output.append(byte)
        elif op == ",":
            value = reader()
            memory[data_ptr] = _to_cell(-1 if value is None else value)
        inst_ptr += 1

    return ExecutionResult(memory=memory, output=bytes(output), max_data_ptr=max_data_ptr)