"""Move execution with the special rules applied in board order."""

from __future__ import annotations

from chesschannel.core.board import Board
from chesschannel.core.enums import PieceType
from chesschannel.core.move import LastMove
from chesschannel.core.move_generator import (
    KINGSIDE_ROOK_COL,
    QUEENSIDE_ROOK_COL,
)
from chesschannel.core.types import Square

_PROMOTION_ROWS = (0, 7)


def apply_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    *,
    last_move: LastMove | None = None,
    strict_en_passant: bool = False,
) -> LastMove:
    """Move the piece on *from_sq* to *to_sq* and return the move record.

    The caller is responsible for legality. Special rules are inferred from
    geometry alone:

    * a pawn moving diagonally onto an empty square captures the pawn beside
      it (with *strict_en_passant* only when *last_move* was that pawn's
      double step);
    * a king moving two columns brings the rook of that side along;
    * a pawn reaching row 0 or row 7 becomes a queen.
    """
    from_sq = Square(*from_sq)
    to_sq = Square(*to_sq)
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {tuple(from_sq)}")

    d_row = to_sq.row - from_sq.row
    d_col = to_sq.col - from_sq.col

    if (
        piece.piece_type == PieceType.PAWN
        and abs(d_row) == 1
        and abs(d_col) == 1
        and board.is_empty(to_sq)
    ):
        bypassed_sq = Square(from_sq.row, to_sq.col)
        if not strict_en_passant or (
            last_move is not None
            and last_move.is_double_pawn_step
            and last_move.to_sq == bypassed_sq
        ):
            board[bypassed_sq] = None

    if piece.piece_type == PieceType.KING and abs(d_col) == 2:
        if d_col > 0:
            rook_from = Square(from_sq.row, KINGSIDE_ROOK_COL)
            rook_to = Square(from_sq.row, KINGSIDE_ROOK_COL - 2)
        else:
            rook_from = Square(from_sq.row, QUEENSIDE_ROOK_COL)
            rook_to = Square(from_sq.row, QUEENSIDE_ROOK_COL + 3)
        rook = board[rook_from]
        if rook is not None and rook.piece_type == PieceType.ROOK:
            board[rook_to] = rook.moved()
            board[rook_from] = None

    board[to_sq] = piece.moved()
    board[from_sq] = None
    record = LastMove(from_sq, to_sq, piece)

    if piece.piece_type == PieceType.PAWN and to_sq.row in _PROMOTION_ROWS:
        board[to_sq] = piece.moved().promoted(PieceType.QUEEN)

    return record
