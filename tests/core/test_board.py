"""Tests for Board and Piece."""

from dataclasses import FrozenInstanceError

import pytest

from chesschannel.core.board import BACK_RANK, Board
from chesschannel.core.enums import PieceType, Player
from chesschannel.core.piece import Piece
from chesschannel.core.types import ALL_SQUARES, Square


class TestBoardInitial:
    def test_thirty_two_pieces(self) -> None:
        board = Board.initial()
        assert len(list(board.occupied())) == 32
        assert len(board.pieces(Player.WHITE)) == 16
        assert len(board.pieces(Player.BLACK)) == 16

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        for col, pt in enumerate(BACK_RANK):
            assert board[Square(7, col)] == Piece(pt, Player.WHITE), f"col {col}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        for col, pt in enumerate(BACK_RANK):
            assert board[Square(0, col)] == Piece(pt, Player.BLACK), f"col {col}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[Square(6, col)] == Piece(PieceType.PAWN, Player.WHITE)
            assert board[Square(1, col)] == Piece(PieceType.PAWN, Player.BLACK)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in ALL_SQUARES:
            if 2 <= sq.row <= 5:
                assert board[sq] is None

    def test_one_king_each(self) -> None:
        board = Board.initial()
        assert board.king_square(Player.WHITE) == Square(7, 4)
        assert board.king_square(Player.BLACK) == Square(0, 4)

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert not any(p.has_moved for _, p in board.occupied())


class TestBoardAccess:
    def test_set_and_get(self) -> None:
        board = Board()
        knight = Piece(PieceType.KNIGHT, Player.BLACK)
        board[Square(3, 3)] = knight
        assert board[Square(3, 3)] == knight
        assert not board.is_empty(Square(3, 3))
        board[Square(3, 3)] = None
        assert board.is_empty(Square(3, 3))

    def test_plain_tuple_index(self) -> None:
        board = Board.initial()
        assert board[(7, 4)] == Piece(PieceType.KING, Player.WHITE)

    def test_missing_king_is_none(self) -> None:
        board = Board()
        board[Square(4, 4)] = Piece(PieceType.ROOK, Player.WHITE)
        assert board.king_square(Player.WHITE) is None


class TestBoardCopy:
    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        copy = board.copy()
        copy[Square(6, 4)] = None
        assert board[Square(6, 4)] is not None
        assert board != copy

    def test_copy_equal(self) -> None:
        board = Board.initial()
        assert board.copy() == board

    def test_snapshot_is_immutable_view(self) -> None:
        board = Board.initial()
        snap = board.snapshot()
        assert len(snap) == 8 and all(len(row) == 8 for row in snap)
        assert snap[7][4] == Piece(PieceType.KING, Player.WHITE)
        board[Square(7, 4)] = None
        assert snap[7][4] is not None
        with pytest.raises(TypeError):
            snap[0][0] = None  # type: ignore[index]


class TestBoardDiagram:
    def test_from_diagram(self) -> None:
        board = Board.from_diagram(
            """
            r . . . k . . r
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            R . . . K . . R
            """
        )
        assert board[Square(0, 0)] == Piece(PieceType.ROOK, Player.BLACK)
        assert board[Square(7, 4)] == Piece(PieceType.KING, Player.WHITE)
        assert len(list(board.occupied())) == 6

    def test_initial_matches_diagram(self) -> None:
        board = Board.from_diagram(
            """
            rnbqkbnr
            pppppppp
            ........
            ........
            ........
            ........
            PPPPPPPP
            RNBQKBNR
            """
        )
        assert board == Board.initial()

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("........\n........")

    def test_unknown_piece(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("\n".join(["x......."] + ["........"] * 7))

    def test_repr_lists_rows(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "0 r n b q k b n r"
        assert text.splitlines()[7] == "7 R N B Q K B N R"


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(PieceType.KNIGHT, Player.WHITE)
        assert Piece.from_char("q") == Piece(PieceType.QUEEN, Player.BLACK)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("z")

    def test_str(self) -> None:
        assert str(Piece(PieceType.KING, Player.WHITE)) == "K"
        assert str(Piece(PieceType.PAWN, Player.BLACK)) == "p"

    def test_moved_returns_new_piece(self) -> None:
        pawn = Piece(PieceType.PAWN, Player.WHITE)
        moved = pawn.moved()
        assert moved.has_moved
        assert not pawn.has_moved
        assert moved.moved() is moved

    def test_promoted_keeps_owner(self) -> None:
        queen = Piece(PieceType.PAWN, Player.BLACK).promoted()
        assert queen.piece_type == PieceType.QUEEN
        assert queen.owner == Player.BLACK

    def test_frozen(self) -> None:
        pawn = Piece(PieceType.PAWN, Player.WHITE)
        with pytest.raises(FrozenInstanceError):
            pawn.has_moved = True  # type: ignore[misc]


class TestPlayer:
    def test_opposite(self) -> None:
        assert Player.WHITE.opposite == Player.BLACK
        assert Player.BLACK.opposite == Player.WHITE

    def test_directions(self) -> None:
        assert Player.WHITE.forward == -1
        assert Player.BLACK.forward == 1
        assert Player.WHITE.promotion_row == 0
        assert Player.BLACK.promotion_row == 7

    def test_str(self) -> None:
        assert str(Player.WHITE) == "white"
