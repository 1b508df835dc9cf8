from typing import List

import numpy as np

# Cells hold signed 32-bit values and wrap on overflow in either direction.
CELL = np.iinfo(np.int32)
CELL_MIN = int(CELL.min)
CELL_MAX = int(CELL.max)
_CELL_SPAN = CELL_MAX - CELL_MIN + 1


def wrap_cell(value: int) -> int:
    """Fold an integer into the cell range (two's complement wraparound)."""
    return (value - CELL_MIN) % _CELL_SPAN + CELL_MIN


class TapeMemory:
    """Unbounded bidirectional tape seen from the cursor.

    ``left`` holds the cells left of the cursor in address order, ``right``
    holds the cells right of it nearest-last, so the logical tape is
    ``left + [current] + reversed(right)``. An empty side means every further
    cell that way is still zero.
    """

    def __init__(self):
        self.left: List[int] = []
        self.right: List[int] = []
        self.current = 0
        self.position = 0

    def move_right(self):
        # The departing cell is always parked, even when landing on fresh tape.
        self.left.append(self.current)
        self.current = self.right.pop() if self.right else 0
        self.position += 1

    def move_left(self):
        self.right.append(self.current)
        self.current = self.left.pop() if self.left else 0
        self.position -= 1

    def increment(self):
        self.current = wrap_cell(self.current + 1)

    def decrement(self):
        self.current = wrap_cell(self.current - 1)

    def current_value(self) -> int:
        return self.current

    def cells(self) -> List[int]:
        """The visited stretch of tape in address order."""
        return self.left + [self.current] + self.right[::-1]

    def window(self, radius: int = 5) -> np.ndarray:
        """Cells ``position - radius`` .. ``position + radius`` as an int32 array."""
        view = np.zeros(2 * radius + 1, dtype=np.int32)
        view[radius] = self.current
        for offset in range(1, radius + 1):
            if offset <= len(self.left):
                view[radius - offset] = self.left[-offset]
            if offset <= len(self.right):
                view[radius + offset] = self.right[-offset]
        return view

    def __repr__(self):
        return f"TapeMemory(position={self.position}, cells={self.cells()})"
