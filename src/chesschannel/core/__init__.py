"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chesschannel.core import Board, MoveGenerator, Square

    board = Board.initial()
    gen = MoveGenerator(board)
    pawn = board[Square(6, 4)]
    print(gen.legal_moves(pawn, Square(6, 4)))
"""

from chesschannel.core.board import BACK_RANK, Board, BoardSnapshot
from chesschannel.core.enums import GameStatus, PieceType, Player
from chesschannel.core.execution import apply_move
from chesschannel.core.move import LastMove
from chesschannel.core.move_generator import MoveGenerator
from chesschannel.core.piece import Piece
from chesschannel.core.rules import Rules
from chesschannel.core.types import ALL_SQUARES, BOARD_SIZE, Square, is_on_board

__all__ = [
    # Enums
    "GameStatus",
    "PieceType",
    "Player",
    # Types / helpers
    "ALL_SQUARES",
    "BOARD_SIZE",
    "Square",
    "is_on_board",
    # Domain objects
    "BACK_RANK",
    "Board",
    "BoardSnapshot",
    "LastMove",
    "MoveGenerator",
    "Piece",
    "Rules",
    "apply_move",
]
