#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Shows the step-by-step execution of a program, displaying the tape around
the cursor and the output so far after each step.
"""

from brainfuck import BrainfuckInterpreter
from bfcore.program import Instruction

_DESCRIBE = {
    Instruction.MOVE_RIGHT: "Move cursor right",
    Instruction.MOVE_LEFT: "Move cursor left",
    Instruction.INCREMENT: "Increment cell",
    Instruction.DECREMENT: "Decrement cell",
    Instruction.OUTPUT: "Output cell",
    Instruction.NOOP: "Comment",
}


class BrainfuckDebugger(BrainfuckInterpreter):
    """Interpreter that prints its state after every step."""

    def __init__(self, program, output=None, show_memory_range=4, max_steps=100):
        super().__init__(program, output)
        self.show_memory_range = show_memory_range
        self.max_steps = max_steps

    def step(self) -> bool:
        pc = self.instruction_pointer
        if self.finished:
            return False
        cmd = self.program[pc]
        cell = self.tape.current_value()

        running = super().step()

        print(f"\nStep {self.steps}: Execute '{cmd.symbol}' at position {pc}")
        if cmd is Instruction.LOOP_OPEN:
            if cell == 0:
                print(f"  Loop start: cell = 0, jump to position {self.instruction_pointer}")
            else:
                print(f"  Loop start: cell = {cell}, enter loop")
        elif cmd is Instruction.LOOP_CLOSE:
            if cell != 0:
                print(f"  Loop end: cell = {cell}, jump back to position {self.instruction_pointer}")
            else:
                print(f"  Loop end: cell = 0, exit loop")
        else:
            print(f"  {_DESCRIBE[cmd]} → cell[{self.tape.position}] = {self.tape.current_value()}")

        self.show_state(f"AFTER STEP {self.steps}")
        return running

    def debug_run(self):
        """Run with a trace, stopping after max_steps."""
        print(f"🐛 BRAINFUCK DEBUGGER")
        print(f"Program: {self.program.to_source()}")
        print("=" * 80)
        self.show_state("INITIAL")

        while self.steps < self.max_steps and self.step():
            pass

        if not self.finished:
            print(f"\n⚠️ Execution stopped after {self.max_steps} steps (possible infinite loop)")

        print(f"\n🎯 FINAL RESULT:")
        print(f"Output: {''.join(self.output)!r} → {[ord(c) for c in self.output]}")
        return ''.join(self.output)

    def show_state(self, label):
        """Show the program with the pc marked, the tape window and the output."""
        print(f"\n{label}:")

        source = self.program.to_source()
        pc = self.instruction_pointer
        if pc < len(source):
            source = source[:pc] + f"[{source[pc]}]" + source[pc + 1:]
        print(f"Program:  {source}")

        radius = self.show_memory_range
        cells = self.tape.window(radius)
        first = self.tape.position - radius
        print(f"Memory:   [" + "|".join(f"{v:3d}" for v in cells) + "]")
        print(f"Pointer:   " + " ".join(" ^ " if i == radius else "   " for i in range(len(cells))))
        print(f"Address:   " + " ".join(f"{first + i:3d}" for i in range(len(cells))))

        if self.output:
            print(f"Output:   {''.join(self.output)!r} → {[ord(c) for c in self.output]}")
        else:
            print(f"Output:   (empty)")


if __name__ == "__main__":
    print("🧪 EXAMPLE 1: Count down from 3")
    BrainfuckDebugger("+++[-]").debug_run()

    print("\n" + "=" * 80)
    print("\n🧪 EXAMPLE 2: Print chr(3)")
    BrainfuckDebugger("+++.").debug_run()
