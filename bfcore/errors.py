"""Exceptions raised by the interpreter core."""


class BrainfuckError(Exception):
    """Base class for every fault the interpreter reports."""


class LoopNestingError(BrainfuckError):
    """The program's brackets do not form a well-formed nesting."""

    def __init__(self, position: int, message: str):
        super().__init__(message)
        self.position = position


class UnmatchedLoopOpen(LoopNestingError):
    def __init__(self, position: int, positions=None):
        self.positions = tuple(positions) if positions else (position,)
        super().__init__(position, f"Unmatched '[' at position {position}")


class UnmatchedLoopClose(LoopNestingError):
    def __init__(self, position: int):
        super().__init__(position, f"Unmatched ']' at position {position}")


class OutputValueOutOfRange(BrainfuckError):
    """Output was asked for a cell value outside 0-127."""

    def __init__(self, value: int):
        super().__init__(f"Cell value {value} cannot be output as an ASCII character")
        self.value = value
