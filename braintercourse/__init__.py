"""Brainfuck interpreter with a window showing program, memory cells and output."""

__version__ = "0.1.0"
__all__ = ["cli", "interpreter", "renderer"]