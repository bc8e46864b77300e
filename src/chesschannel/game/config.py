"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Rule switches for :class:`~chesschannel.game.engine.ChessEngine`.

    Attributes:
        strict_en_passant: Only remove the bypassed pawn when the previous
            move was its double step. When off, any diagonal pawn move onto
            an empty square captures the pawn beside it.
        allow_castling: Offer the two-column king move.
    """

    strict_en_passant: bool = False
    allow_castling: bool = True
