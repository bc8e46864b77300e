"""High-level chess rules: check, checkmate and the resulting status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesschannel.core.enums import GameStatus, Player
from chesschannel.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesschannel.core.board import Board
    from chesschannel.core.move import LastMove


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy: no draw detection. A side without legal moves that is
    # not in check simply reports IN_PROGRESS.

    @staticmethod
    def is_in_check(board: Board, player: Player) -> bool:
        return MoveGenerator(board).is_in_check(player)

    @staticmethod
    def has_legal_moves(
        board: Board, player: Player, last_move: LastMove | None = None
    ) -> bool:
        return MoveGenerator(board, last_move).has_legal_moves(player)

    @staticmethod
    def is_checkmate(
        board: Board, player: Player, last_move: LastMove | None = None
    ) -> bool:
        return MoveGenerator(board, last_move).is_checkmate(player)

    @staticmethod
    def status(
        board: Board,
        player: Player,
        last_move: LastMove | None = None,
        *,
        allow_castling: bool = True,
    ) -> GameStatus:
        """Status for *player*, the side about to move."""
        gen = MoveGenerator(board, last_move, allow_castling=allow_castling)
        if not gen.is_in_check(player):
            return GameStatus.IN_PROGRESS
        if gen.has_legal_moves(player):
            return GameStatus.CHECK
        return GameStatus.CHECKMATE
