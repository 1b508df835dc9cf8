"""
Instruction set and program representation.

The language has seven working commands:
    >   Move the cursor right
    <   Move the cursor left
    +   Increment the current cell
    -   Decrement the current cell
    .   Output the current cell as an ASCII character
    [   Jump past the matching ] if the current cell is 0
    ]   Jump back past the matching [ if the current cell is nonzero

All other characters are comments and translate to NOOP, one instruction
per source character so positions in the program match positions in the
source text.
"""

from enum import Enum
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union


class Instruction(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'
    NOOP = ' '

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> 'Instruction':
        """Translate one source character; anything unrecognised is a NOOP."""
        return _BY_CHAR.get(char, cls.NOOP)


_BY_CHAR = {i.value: i for i in Instruction if i is not Instruction.NOOP}

COMMANDS = ''.join(_BY_CHAR)

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


class Program:
    """An immutable, position-indexed instruction sequence.

    Positions are zero-based and lie in ``[0, len(program))``. A position
    with no recorded instruction reads as ``Instruction.NOOP``.
    """

    __slots__ = ('_instructions', '_length')

    def __init__(self, instructions: Union[Mapping[int, Instruction], Iterable[Tuple[int, Instruction]]],
                 length: Optional[int] = None):
        pairs = instructions.items() if isinstance(instructions, Mapping) else instructions
        table: Dict[int, Instruction] = {}
        for position, instruction in pairs:
            if not isinstance(instruction, Instruction):
                raise TypeError(f"Expected an Instruction at position {position}, got {instruction!r}")
            if position < 0:
                raise ValueError(f"Negative instruction position {position}")
            if position in table:
                raise ValueError(f"Duplicate instruction position {position}")
            table[position] = instruction

        if length is None:
            length = max(table) + 1 if table else 0
        elif table and max(table) >= length:
            raise ValueError(f"Instruction position {max(table)} outside program of length {length}")

        self._instructions = table
        self._length = length

    @classmethod
    def from_instructions(cls, instructions: Iterable[Instruction]) -> 'Program':
        items = list(instructions)
        return cls(enumerate(items), length=len(items))

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, position: int) -> Instruction:
        if not 0 <= position < self._length:
            raise IndexError(f"Program position {position} out of range")
        return self._instructions.get(position, Instruction.NOOP)

    def __iter__(self) -> Iterator[Tuple[int, Instruction]]:
        for position in range(self._length):
            yield position, self[position]

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented
        return self._length == other._length and list(self) == list(other)

    def __repr__(self):
        return f"Program({self.to_source()!r})"

    def to_source(self) -> str:
        """Render back to text; NOOP positions become spaces so positions are kept."""
        return ''.join(instruction.symbol for _, instruction in self)


def parse_program(source: str) -> Program:
    """Translate source text into a Program, one instruction per character."""
    return Program.from_instructions(Instruction.from_char(c) for c in source)
