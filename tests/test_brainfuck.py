import pytest

from brainfuck import BrainfuckInterpreter, execute, run_source, to_ascii
from bfcore.errors import OutputValueOutOfRange, UnmatchedLoopClose, UnmatchedLoopOpen
from bfcore.loops import JumpTable
from bfcore.program import HELLO_WORLD, Instruction, Program, parse_program


def test_hello_world():
    assert run_source(HELLO_WORLD) == "Hello World!\n"


def test_output_small_value():
    assert run_source("+++.") == chr(3)


def test_output_out_of_range():
    with pytest.raises(OutputValueOutOfRange) as info:
        run_source("+" * 200 + ".")
    assert info.value.value == 200


def test_negative_output_out_of_range():
    with pytest.raises(OutputValueOutOfRange) as info:
        run_source("-.")
    assert info.value.value == -1


def test_to_ascii_bounds():
    assert to_ascii(0) == "\x00"
    assert to_ascii(127) == "\x7f"
    with pytest.raises(OutputValueOutOfRange):
        to_ascii(128)


def test_output_before_failure_is_kept():
    out = []
    with pytest.raises(OutputValueOutOfRange):
        execute("+." + "+" * 199 + ".", out)
    assert out == ["\x01"]


@pytest.mark.parametrize("program_cls, code", [(UnmatchedLoopOpen, "+.["), (UnmatchedLoopClose, "+.]")])
def test_malformed_program_never_runs(program_cls, code):
    out = []
    with pytest.raises(program_cls):
        execute(code, out)
    assert out == []


@pytest.mark.parametrize("n", [0, 1, 5, 17])
def test_counted_loop_runs_n_times(n):
    itp = BrainfuckInterpreter("+" * n + "[>+<-]>")
    itp.run()
    assert itp.tape.current_value() == n
    assert itp.tape.cells() == [0, n]


def test_zero_counter_skips_body():
    itp = BrainfuckInterpreter("[+.]")
    assert itp.run() == []
    assert itp.steps == 1
    assert itp.tape.current_value() == 0


def test_loop_close_jumps_past_open():
    itp = BrainfuckInterpreter("++[-]")
    positions = []
    while not itp.finished:
        positions.append(itp.instruction_pointer)
        itp.step()
    # after the first pass the close resumes at the body, not at '['
    assert positions == [0, 1, 2, 3, 4, 3, 4]


def test_step_reports_running_state():
    itp = BrainfuckInterpreter("++")
    assert itp.step() is True
    assert itp.step() is False
    assert itp.finished
    assert itp.step() is False
    assert itp.steps == 2


def test_empty_program():
    itp = BrainfuckInterpreter("")
    assert itp.run() == []
    assert itp.steps == 0


def test_sparse_program_gaps_are_noops():
    program = Program({0: Instruction.INCREMENT, 3: Instruction.OUTPUT}, length=6)
    itp = BrainfuckInterpreter(program)
    assert itp.run() == ["\x01"]
    assert itp.steps == 6


def test_loop_open_without_table_entry_falls_through():
    itp = BrainfuckInterpreter(parse_program("[]"))
    itp.jump_table = JumpTable()
    itp.run()
    assert itp.steps == 2
    assert itp.finished


def test_execute_appends_to_caller_output():
    out = ["x"]
    result = execute("++++++++[>++++++++<-]>+.", out)
    assert result is out
    assert out == ["x", "A"]


def test_output_writes_counted():
    itp = BrainfuckInterpreter("+.+.")
    itp.run()
    assert itp.output_writes == 2
    assert itp.output == ["\x01", "\x02"]


def test_moving_left_of_start_is_allowed():
    assert run_source("<+++.>.") == "\x03\x00"


def test_ten_minus_variant_prints_b():
    # ten '-' before the last letter instead of eight lands two below 'd'
    code = HELLO_WORLD.replace(".--------.", ".----------.")
    assert code != HELLO_WORLD
    assert run_source(code) == "Hello Worlb!\n"
