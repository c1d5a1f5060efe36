import pytest

from braintercourse.interpreter import (
    ARRAY_SIZE,
    BUFFER_SIZE,
    BrainfuckError,
    ExecutionResult,
    MemoryOverflowError,
    MemoryUnderflowError,
    run,
)

HELLO = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def no_input():
    raise AssertionError("input should not be read")


def test_hello_world():
    result = run(HELLO, no_input)
    assert result.output == b"Hello World!\n"
    assert result.output_text == "Hello World!\n"


def test_increment_and_move():
    result = run("+++>++", no_input)
    assert result.memory[0] == 3
    assert result.memory[1] == 2
    assert result.max_data_ptr == 1


def test_wrapping_stays_in_signed_range():
    result = run("+" * 200, no_input)
    assert -128 <= result.memory[0] <= 127
    assert run("+" * 256, no_input).memory[0] == 0
    assert run("-" * 77 + "+" * 77, no_input).memory[0] == 0


def test_overflow_error():
    with pytest.raises(MemoryOverflowError) as info:
        run(">" * ARRAY_SIZE, no_input)
    assert str(info.value) == "Memory overflow error caused by '>'"


def test_last_cell_reachable():
    result = run(">" * (ARRAY_SIZE - 1), no_input)
    assert result.max_data_ptr == ARRAY_SIZE - 1
    assert len(result.used_memory()) == ARRAY_SIZE


def test_underflow_error():
    with pytest.raises(MemoryUnderflowError) as info:
        run("<", no_input)
    assert str(info.value) == "Memory underflow error caused by '<'"
    assert isinstance(info.value, BrainfuckError)


def test_read_and_echo():
    result = run(",.", lambda: 65)
    assert result.output == bytes([65])


def test_end_of_input_stores_minus_one():
    result = run(",", lambda: None)
    assert result.memory[0] == -1


def test_high_byte_read_is_signed_and_echoed_raw():
    result = run(",.", lambda: 200)
    assert result.memory[0] < 0
    assert result.output == bytes([200])


def test_zero_cell_output_is_dropped():
    assert run("..", no_input).output == b""


def test_loop_skipped_when_zero():
    result = run("[.+]+", no_input)
    assert result.memory[0] == 1
    assert result.output == b""


def test_nested_loops():
    result = run("++[>++[>+<-]<-]>>", no_input)
    assert result.memory[2] == 4
    assert result.memory[0] == 0


def test_unmatched_open_bracket_when_jumping():
    with pytest.raises(BrainfuckError):
        run("[", no_input)


def test_unmatched_close_bracket_when_jumping():
    with pytest.raises(BrainfuckError):
        run("+]", no_input)


def test_unmatched_close_bracket_not_taken():
    assert run("]", no_input).output == b""


def test_used_memory():
    result = ExecutionResult(memory=[0, 0, 1, 0, 0], output=b"", max_data_ptr=2)
    assert result.used_memory() == [0, 0, 1]
    assert run(">>+", no_input).used_memory() == [0, 0, 1]


def test_output_buffer_limit():
    ok = run("+" * 65 + "." * (BUFFER_SIZE - 1), no_input)
    assert len(ok.output) == BUFFER_SIZE - 1
    with pytest.raises(BrainfuckError):
        run("+" * 65 + "." * BUFFER_SIZE, no_input)


def test_other_characters_ignored():
    assert run("a+b+\n", no_input).memory[0] == run("++", no_input).memory[0]