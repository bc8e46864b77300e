"""Record of the most recently executed move."""

from __future__ import annotations

from dataclasses import dataclass

from chesschannel.core.enums import PieceType
from chesschannel.core.piece import Piece
from chesschannel.core.types import Square


@dataclass(frozen=True, slots=True)
class LastMove:
    """Immutable value object for a completed move.

    ``piece`` is the moving piece as it stood before the move, so a promoted
    pawn is still recorded as a pawn.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece

    @property
    def is_double_pawn_step(self) -> bool:
        return (
            self.piece.piece_type == PieceType.PAWN
            and abs(self.to_sq.row - self.from_sq.row) == 2
        )

    def __str__(self) -> str:
        return f"{self.piece}{tuple(self.from_sq)}->{tuple(self.to_sq)}"
