# braintercourse

braintercourse runs a Brainfuck program and prints the program's output. Then it opens a window that shows three things: the program's instructions, the memory cells the program used, and the output text.

## Installing

```
pip install .
```

The window is drawn with pygame. Installing the package also installs pygame.

## Running

Pass the program as a single argument:

```
braintercourse "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
```

If you give no argument, the command prints `Enter program:` and reads one line from standard input. It reads at most 999 characters.

```
braintercourse
Enter program:
```

If you give more than one argument, the command writes a usage message to standard error and exits with status 1.

When the program finishes, the command writes its output to standard output and opens the visualizer window. Close the window to exit. If the program fails with an error, the command writes the error message to standard error, exits with status 1, and does not open the window.

While the program runs, each `,` instruction reads one byte from standard input.

## The language

The memory tape has 30000 cells. Every cell starts at zero. A cell holds a signed byte from -128 to 127. Incrementing past 127 wraps the value to -128, and decrementing past -128 wraps it to 127.

| Instruction | Effect |
|-------------|--------|
| `>` | Move the data pointer one cell to the right |
| `<` | Move the data pointer one cell to the left |
| `+` | Increment the current cell |
| `-` | Decrement the current cell |
| `[` | If the current cell is zero, jump forward past the matching `]` |
| `]` | If the current cell is not zero, jump back to the matching `[` |
| `.` | Append the current cell, as a byte, to the output. A cell that holds zero adds nothing. |
| `,` | Read one byte of input into the current cell. At end of input the cell is set to -1. |

The interpreter ignores every other character. A NUL character ends the program.

Execution stops with an error in these cases:

- Moving right past the last cell raises `MemoryOverflowError`.
- Moving left from the first cell raises `MemoryUnderflowError`.
- A jump that needs an unmatched `[` or `]` raises `BrainfuckError`.
- Writing more than 999 bytes of output raises `BrainfuckError` with the message "output buffer full".

`MemoryOverflowError` and `MemoryUnderflowError` are both subclasses of `BrainfuckError`.

## Using it from Python

```python
from braintercourse.interpreter import run

result = run("++++++++[>++++++++<-]>+.", read_byte=lambda: None)
print(result.output)          # b'A'
print(result.output_text)     # A
print(result.used_memory())   # [0, 65]
```

`run(program, read_byte=None)` returns an `ExecutionResult` with these members:

- `memory`: all 30000 cells.
- `output`: the output as bytes.
- `output_text`: the output decoded as Latin-1.
- `max_data_ptr`: the highest cell index the pointer reached.
- `used_memory()`: the cells from index 0 up to `max_data_ptr`.

`read_byte` is called once for each `,` instruction. It returns a byte value, or `None` at end of input. If you leave it out, the interpreter reads from standard input.

`braintercourse.renderer.build_scene(program, memory, output, measure)` lays out one frame without opening a window. It returns a list of `Rectangle`, `Label` and `Triangle` shapes in drawing order. `measure(text, font_size)` must return the width of the text. `braintercourse.renderer.run_renderer(program, memory, output)` opens the pygame window and draws that scene until you close the window.

## What it does not do

The window shows only the state after the program has finished. You cannot step through the program, and the window is not animated. The two pointer markers stay at fixed positions and do not follow the instruction or data pointer. The cell rows are not scrolled or wrapped, so a long program or a wide memory range runs off the right edge of the window.