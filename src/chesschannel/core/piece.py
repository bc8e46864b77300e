"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesschannel.core.enums import Player, PieceType

# Diagram character ↔ (Player, PieceType)
_CHAR_MAP: dict[str, tuple[Player, PieceType]] = {
    "P": (Player.WHITE, PieceType.PAWN),
    "N": (Player.WHITE, PieceType.KNIGHT),
    "B": (Player.WHITE, PieceType.BISHOP),
    "R": (Player.WHITE, PieceType.ROOK),
    "Q": (Player.WHITE, PieceType.QUEEN),
    "K": (Player.WHITE, PieceType.KING),
    "p": (Player.BLACK, PieceType.PAWN),
    "n": (Player.BLACK, PieceType.KNIGHT),
    "b": (Player.BLACK, PieceType.BISHOP),
    "r": (Player.BLACK, PieceType.ROOK),
    "q": (Player.BLACK, PieceType.QUEEN),
    "k": (Player.BLACK, PieceType.KING),
}

_UNICODE: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}

_DIAGRAM_CHARS: dict[tuple[Player, PieceType], str] = {
    v: k for k, v in _CHAR_MAP.items()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    State changes (first move, promotion) produce a new ``Piece``.
    """

    piece_type: PieceType
    owner: Player
    has_moved: bool = False

    # ── Replacement helpers ──────────────────────────────────────────────

    def moved(self) -> Piece:
        """Same piece with ``has_moved`` set."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    def promoted(self, piece_type: PieceType = PieceType.QUEEN) -> Piece:
        return replace(self, piece_type=piece_type)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        return _DIAGRAM_CHARS[(self.owner, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, has_moved: bool = False) -> Piece:
        """Create piece from a diagram character, e.g. 'N' → white knight."""
        try:
            owner, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, owner, has_moved)

    @property
    def symbol(self) -> str:
        """Filled Unicode glyph; the renderer colours it by owner."""
        return _UNICODE[self.piece_type]
