"""Pseudo-legal and legal move generation + check detection."""

from __future__ import annotations

from chesschannel.core.board import Board
from chesschannel.core.enums import Player, PieceType
from chesschannel.core.move import LastMove
from chesschannel.core.piece import Piece
from chesschannel.core.types import ALL_SQUARES, Square, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

KING_HOME_COL = 4
KINGSIDE_ROOK_COL = 7
QUEENSIDE_ROOK_COL = 0


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        targets[sq] = tuple(
            Square(sq.row + dr, sq.col + dc)
            for dr, dc in offsets
            if is_on_board(sq.row + dr, sq.col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r = sq.row + dr
            c = sq.col + dc
            ray: list[Square] = []
            while is_on_board(r, c):
                ray.append(Square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_SLIDING_RAYS: dict[PieceType, dict[Square, tuple[tuple[Square, ...], ...]]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


class MoveGenerator:
    """Generates destinations for single pieces on a :class:`Board`.

    Legality is decided by replaying the move on a scratch copy of the grid,
    so the board handed in is never modified.
    """

    __slots__ = ("_board", "_last_move", "_allow_castling")

    def __init__(
        self,
        board: Board,
        last_move: LastMove | None = None,
        *,
        allow_castling: bool = True,
    ) -> None:
        self._board = board
        self._last_move = last_move
        self._allow_castling = allow_castling

    # -- Public API ---------------------------------------------------------

    def possible_moves(self, piece: Piece, at: Square) -> list[Square]:
        """Pseudo-legal destinations (may leave own king in check)."""
        at = Square(*at)
        moves: list[Square] = []
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            self._gen_pawn(piece, at, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_stepping(piece, _KNIGHT_TARGETS[at], moves)
        elif ptype == PieceType.KING:
            self._gen_stepping(piece, _KING_TARGETS[at], moves)
        else:
            self._gen_sliding(piece, _SLIDING_RAYS[ptype][at], moves)
        return moves

    def legal_moves(self, piece: Piece, at: Square) -> list[Square]:
        """Destinations that do not leave *piece*'s own king in check.

        Besides the pseudo-legal set this includes castling for an unmoved
        king and the en passant capture made possible by the last move.
        """
        at = Square(*at)
        candidates = self.possible_moves(piece, at)
        if piece.piece_type == PieceType.KING:
            candidates.extend(self._castling_moves(piece, at))
        elif piece.piece_type == PieceType.PAWN:
            candidates.extend(self._en_passant_moves(piece, at))

        return [
            to_sq
            for to_sq in candidates
            if not self._leaves_king_in_check(piece, at, to_sq)
        ]

    def has_legal_moves(self, player: Player) -> bool:
        """Whether any piece of *player* can move."""
        return any(self.legal_moves(p, sq) for sq, p in self._board.pieces(player))

    # -- Check detection ----------------------------------------------------

    def is_in_check(self, player: Player) -> bool:
        """Is *player*'s king attacked? A missing king is never in check."""
        king_sq = self._board.king_square(player)
        if king_sq is None:
            return False
        return any(
            king_sq in self.possible_moves(p, sq)
            for sq, p in self._board.pieces(player.opposite)
        )

    def is_checkmate(self, player: Player) -> bool:
        return self.is_in_check(player) and not self.has_legal_moves(player)

    # -- Simulation ---------------------------------------------------------

    def _leaves_king_in_check(
        self, piece: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        scratch = self._board.copy()
        scratch[to_sq] = piece
        scratch[from_sq] = None
        return MoveGenerator(scratch).is_in_check(piece.owner)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, at: Square, moves: list[Square]) -> None:
        board = self._board
        forward = piece.owner.forward

        one_step = at.offset(forward, 0)
        if one_step.is_valid and board.is_empty(one_step):
            moves.append(one_step)
            if at.row == piece.owner.pawn_row:
                two_step = one_step.offset(forward, 0)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = at.offset(forward, d_col)
            if not cap_sq.is_valid:
                continue
            target = board[cap_sq]
            if target is not None and target.owner != piece.owner:
                moves.append(cap_sq)

    def _gen_stepping(
        self, piece: Piece, targets: tuple[Square, ...], moves: list[Square]
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.owner != piece.owner:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.owner != piece.owner:
                    moves.append(to_sq)
                break

    # -- Special destinations (legal layer only) ----------------------------

    def _castling_moves(self, king: Piece, at: Square) -> list[Square]:
        if (
            not self._allow_castling
            or king.has_moved
            or at != Square(king.owner.back_row, KING_HOME_COL)
            or self.is_in_check(king.owner)
        ):
            return []

        board = self._board
        moves: list[Square] = []
        for rook_col, step in ((KINGSIDE_ROOK_COL, 1), (QUEENSIDE_ROOK_COL, -1)):
            rook = board[Square(at.row, rook_col)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.owner != king.owner
                or rook.has_moved
            ):
                continue

            lo, hi = sorted((at.col, rook_col))
            if any(not board.is_empty(Square(at.row, c)) for c in range(lo + 1, hi)):
                continue

            # The king may not pass over an attacked square.
            if self._leaves_king_in_check(king, at, at.offset(0, step)):
                continue
            moves.append(at.offset(0, 2 * step))
        return moves

    def _en_passant_moves(self, pawn: Piece, at: Square) -> list[Square]:
        last = self._last_move
        if last is None or not last.is_double_pawn_step:
            return []
        if last.piece.owner == pawn.owner:
            return []
        if last.to_sq.row != at.row or abs(last.to_sq.col - at.col) != 1:
            return []

        bypassed = self._board[last.to_sq]
        if (
            bypassed is None
            or bypassed.piece_type != PieceType.PAWN
            or bypassed.owner == pawn.owner
        ):
            return []

        target = Square(at.row + pawn.owner.forward, last.to_sq.col)
        if not target.is_valid or not self._board.is_empty(target):
            return []
        return [target]
