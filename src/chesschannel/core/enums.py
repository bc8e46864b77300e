"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Player(IntEnum):
    """Side owning a piece.

    Row 0 is black's back rank and row 7 is white's, so white pawns advance
    toward decreasing rows.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a single pawn step."""
        return -1 if self == Player.WHITE else 1

    @property
    def back_row(self) -> int:
        return 7 if self == Player.WHITE else 0

    @property
    def pawn_row(self) -> int:
        """Row the pawns start on."""
        return 6 if self == Player.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self == Player.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameStatus(IntEnum):
    """What the status line reports for the side to move."""

    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
