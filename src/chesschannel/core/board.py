"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chesschannel.core.enums import Player, PieceType
from chesschannel.core.piece import Piece
from chesschannel.core.types import ALL_SQUARES, BOARD_SIZE, Square

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

BoardSnapshot = tuple[tuple[Piece | None, ...], ...]


class Board:
    """Mutable 8x8 grid holding at most one piece per square."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq[0]][sq[1]] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq[0]][sq[1]] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row by row."""
        for sq in ALL_SQUARES:
            piece = self._grid[sq.row][sq.col]
            if piece is not None:
                yield sq, piece

    def pieces(self, owner: Player) -> list[tuple[Square, Piece]]:
        """Squares and pieces belonging to *owner*."""
        return [(sq, p) for sq, p in self.occupied() if p.owner == owner]

    def king_square(self, owner: Player) -> Square | None:
        """Square of *owner*'s king, or ``None`` when it is not on the board."""
        for sq, piece in self.occupied():
            if piece.owner == owner and piece.piece_type == PieceType.KING:
                return sq
        return None

    def snapshot(self) -> BoardSnapshot:
        """Immutable copy of the occupancy grid for renderers."""
        return tuple(tuple(row) for row in self._grid)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Independent copy of the occupancy grid (pieces are immutable)."""
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(BACK_RANK):
            for player in Player:
                b[Square(player.back_row, col)] = Piece(pt, player)
                b[Square(player.pawn_row, col)] = Piece(PieceType.PAWN, player)
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight text rows, row 0 first.

        Uppercase letters are white pieces, lowercase black, ``.`` is empty.
        Spaces inside a row and blank lines are ignored. Every piece starts
        with ``has_moved=False``.
        """
        rows = [line.replace(" ", "") for line in diagram.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board diagram must be 8 rows of 8 squares: {diagram!r}")

        b = cls()
        for row_idx, row in enumerate(rows):
            for col_idx, char in enumerate(row):
                if char != ".":
                    b[Square(row_idx, col_idx)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{row_idx} {' '.join(cells)}")
        rows.append("  " + " ".join(str(col) for col in range(BOARD_SIZE)))
        return "\n".join(rows)
