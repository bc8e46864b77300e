"""Tests for Rules: check, checkmate and status."""

from chesschannel.core.board import Board
from chesschannel.core.enums import GameStatus, Player
from chesschannel.core.rules import Rules

# After the fool's mate sequence, white to move.
FOOLS_MATE = """
rnb.kbnr
pppp.ppp
........
....p...
......Pq
.....P..
PPPPP..P
RNBQKBNR
"""

BACK_RANK_MATE = """
R.....k.
.....ppp
........
........
........
........
........
......K.
"""


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(Board.initial(), Player.WHITE)

    def test_fools_mate_in_check(self) -> None:
        assert Rules.is_in_check(Board.from_diagram(FOOLS_MATE), Player.WHITE)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = Board.from_diagram(FOOLS_MATE)
        assert Rules.is_checkmate(board, Player.WHITE)
        assert not Rules.has_legal_moves(board, Player.WHITE)
        assert Rules.status(board, Player.WHITE) == GameStatus.CHECKMATE

    def test_back_rank_mate(self) -> None:
        board = Board.from_diagram(BACK_RANK_MATE)
        assert Rules.is_checkmate(board, Player.BLACK)

    def test_not_checkmate_when_can_escape(self) -> None:
        board = Board.from_diagram(BACK_RANK_MATE)
        board[(1, 7)] = None
        assert Rules.is_in_check(board, Player.BLACK)
        assert not Rules.is_checkmate(board, Player.BLACK)
        assert Rules.status(board, Player.BLACK) == GameStatus.CHECK

    def test_checkmate_implies_check(self) -> None:
        # No legal moves without check is not checkmate (stalemate is not
        # detected at all).
        board = Board.from_diagram(
            """
            .......k
            ........
            .....KQ.
            ........
            ........
            ........
            ........
            ........
            """
        )
        assert not Rules.has_legal_moves(board, Player.BLACK)
        assert not Rules.is_in_check(board, Player.BLACK)
        assert not Rules.is_checkmate(board, Player.BLACK)
        assert Rules.status(board, Player.BLACK) == GameStatus.IN_PROGRESS


class TestStatus:
    def test_in_progress_at_start(self) -> None:
        assert Rules.status(Board.initial(), Player.WHITE) == GameStatus.IN_PROGRESS
