#!/usr/bin/env python3
"""
Brainfuck Interpreter

Runs a parsed Program against an unbounded tape:
    >   Move the cursor right
    <   Move the cursor left
    +   Increment the current cell
    -   Decrement the current cell
    .   Output the current cell as an ASCII character (0-127)
    [   Jump past the matching ] if the current cell is 0
    ]   Jump back past the matching [ if the current cell is nonzero

All other characters are comments and ignored. The interpreter has no
step limit of its own; see bfcore.bf_runner for bounded execution.
"""

from typing import List, Optional, Union

from bfcore.errors import OutputValueOutOfRange
from bfcore.loops import build_jump_table
from bfcore.program import Instruction, Program, parse_program
from bfcore.tape import TapeMemory

ASCII_MAX = 127


def to_ascii(value: int) -> str:
    """Translate a cell value into the character Output appends."""
    if not 0 <= value <= ASCII_MAX:
        raise OutputValueOutOfRange(value)
    return chr(value)


class BrainfuckInterpreter:
    def __init__(self, program: Union[Program, str], output: Optional[List[str]] = None):
        if isinstance(program, str):
            program = parse_program(program)
        self.program = program
        # Malformed brackets fail here, before anything runs.
        self.jump_table = build_jump_table(program)
        self.tape = TapeMemory()
        self.output = output if output is not None else []
        self.instruction_pointer = 0
        self.steps = 0
        self.output_writes = 0

    @property
    def finished(self) -> bool:
        return self.instruction_pointer >= len(self.program)

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has ended."""
        if self.finished:
            return False

        pc = self.instruction_pointer
        cmd = self.program[pc]
        tape = self.tape
        next_pc = pc + 1

        if cmd is Instruction.MOVE_RIGHT:
            tape.move_right()

        elif cmd is Instruction.MOVE_LEFT:
            tape.move_left()

        elif cmd is Instruction.INCREMENT:
            tape.increment()

        elif cmd is Instruction.DECREMENT:
            tape.decrement()

        elif cmd is Instruction.OUTPUT:
            self.output.append(to_ascii(tape.current_value()))
            self.output_writes += 1

        elif cmd is Instruction.LOOP_OPEN:
            if tape.current_value() == 0:
                end = self.jump_table.open_to_close(pc)
                if end is not None:
                    next_pc = end + 1

        elif cmd is Instruction.LOOP_CLOSE:
            if tape.current_value() != 0:
                start = self.jump_table.close_to_open(pc)
                if start is not None:
                    next_pc = start + 1

        self.instruction_pointer = next_pc
        self.steps += 1
        return not self.finished

    def run(self) -> List[str]:
        """Step until the program counter runs off the end of the program."""
        while self.step():
            pass
        return self.output


def execute(program: Union[Program, str], output: Optional[List[str]] = None) -> List[str]:
    return BrainfuckInterpreter(program, output).run()


def run_source(code: str) -> str:
    """Run source text and return everything it printed."""
    return ''.join(execute(parse_program(code)))
