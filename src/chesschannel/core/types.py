"""Square type and coordinate helpers.

Board layout (row-major, as rendered on screen):
    (0, 0) ... (0, 7)   black back rank
    ...
    (7, 0) ... (7, 7)   white back rank
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A board coordinate ``(row, col)``."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        """Square shifted by the given deltas (may fall off the board)."""
        return Square(self.row + d_row, self.col + d_col)

    @property
    def is_valid(self) -> bool:
        return is_on_board(self.row, self.col)


def is_on_board(row: int, col: int) -> bool:
    """Check whether ``(row, col)`` lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
