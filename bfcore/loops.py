from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from bfcore.errors import UnmatchedLoopClose, UnmatchedLoopOpen
from bfcore.program import Instruction, Program


@dataclass(frozen=True)
class JumpTable:
    """Matched bracket positions, looked up from either end."""
    opens: Dict[int, int] = field(default_factory=dict)
    closes: Dict[int, int] = field(default_factory=dict)

    def open_to_close(self, position: int) -> Optional[int]:
        return self.opens.get(position)

    def close_to_open(self, position: int) -> Optional[int]:
        return self.closes.get(position)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        return iter(sorted(self.opens.items()))

    def __len__(self) -> int:
        return len(self.opens)


def build_jump_table(program: Program) -> JumpTable:
    """Match every '[' with its ']' in a single pass over the program.

    Raises UnmatchedLoopClose on the first ']' with nothing open, and
    UnmatchedLoopOpen for any '[' still open at the end.
    """
    opens: Dict[int, int] = {}
    closes: Dict[int, int] = {}
    stack: List[int] = []

    for position, instruction in program:
        if instruction is Instruction.LOOP_OPEN:
            stack.append(position)
        elif instruction is Instruction.LOOP_CLOSE:
            if not stack:
                raise UnmatchedLoopClose(position)
            start = stack.pop()
            opens[start] = position
            closes[position] = start

    if stack:
        raise UnmatchedLoopOpen(stack[0], stack)

    return JumpTable(opens, closes)
