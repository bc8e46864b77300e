"""ChessEngine: board, turn and selection state driven by square clicks.

The engine is the only owner of its state. Renderers read it through the
query properties and mutate it only through
:meth:`ChessEngine.select_or_move` and :meth:`ChessEngine.reset_board`.
"""

from __future__ import annotations

import logging
import operator

from chesschannel.core.board import Board, BoardSnapshot
from chesschannel.core.enums import GameStatus, Player
from chesschannel.core.execution import apply_move
from chesschannel.core.move import LastMove
from chesschannel.core.move_generator import MoveGenerator
from chesschannel.core.piece import Piece
from chesschannel.core.rules import Rules
from chesschannel.core.types import Square, is_on_board
from chesschannel.game.config import EngineConfig

_LOGGER = logging.getLogger(__name__)


def _to_square(row: object, col: object) -> Square | None:
    """On-board square for integer coordinates, else ``None``."""
    try:
        r, c = operator.index(row), operator.index(col)
    except TypeError:
        return None
    return Square(r, c) if is_on_board(r, c) else None


class ChessEngine:
    """Single-threaded chess state machine.

    Invalid input is never an error: clicks off the board, on empty squares
    or on squares outside the highlighted set simply clear the selection.
    """

    __slots__ = (
        "_config",
        "_board",
        "_current_turn",
        "_selected",
        "_highlighted",
        "_last_move",
        "_status",
    )

    def __init__(
        self,
        board: Board | None = None,
        current_turn: Player = Player.WHITE,
        *,
        config: EngineConfig | None = None,
    ) -> None:
        self._config = config if config is not None else EngineConfig()
        self._selected: Square | None = None
        self._highlighted: frozenset[Square] = frozenset()
        self._last_move: LastMove | None = None
        if board is None:
            self.reset_board()
            return

        # Custom setups are accepted as-is; only the status is derived.
        self._board = board.copy()
        self._current_turn = current_turn
        self._status = self._compute_status()

    # ── Commands ─────────────────────────────────────────────────────────

    def reset_board(self) -> None:
        """Restore the starting position with white to move."""
        self._board = Board.initial()
        self._current_turn = Player.WHITE
        self._selected = None
        self._highlighted = frozenset()
        self._last_move = None
        self._status = GameStatus.IN_PROGRESS
        _LOGGER.debug("Board reset")

    def select_or_move(self, row: int, col: int) -> LastMove | None:
        """Handle a click on ``(row, col)``.

        Returns the executed move, or ``None`` when the click only changed
        (or cleared) the selection.
        """
        sq = _to_square(row, col)
        if sq is None:
            self._clear_selection()
            return None

        if sq in self._highlighted and self._selected is not None:
            return self._execute(self._selected, sq)

        piece = self._board[sq]
        if sq == self._selected or piece is None or piece.owner != self._current_turn:
            self._clear_selection()
            return None

        self._selected = sq
        self._highlighted = frozenset(self._generator().legal_moves(piece, sq))
        return None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def board(self) -> BoardSnapshot:
        """Read-only 8x8 grid, row 0 first."""
        return self._board.snapshot()

    @property
    def current_turn(self) -> Player:
        return self._current_turn

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def highlighted(self) -> frozenset[Square]:
        return self._highlighted

    @property
    def last_move(self) -> LastMove | None:
        return self._last_move

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Player | None:
        """The side that delivered checkmate, if any."""
        if self._status == GameStatus.CHECKMATE:
            return self._current_turn.opposite
        return None

    @property
    def is_game_over(self) -> bool:
        return self._status == GameStatus.CHECKMATE

    @property
    def status_text(self) -> str:
        """Human-readable status line: empty, check or checkmate."""
        if self._status == GameStatus.CHECKMATE:
            return f"Checkmate, {str(self._current_turn.opposite).capitalize()} wins"
        if self._status == GameStatus.CHECK:
            return f"{str(self._current_turn).capitalize()} is in check"
        return ""

    def piece_at(self, row: int, col: int) -> Piece | None:
        sq = _to_square(row, col)
        return None if sq is None else self._board[sq]

    def king_square(self, player: Player) -> Square | None:
        return self._board.king_square(player)

    def legal_moves_for(self, row: int, col: int) -> frozenset[Square]:
        """Legal destinations of the piece on ``(row, col)``, whoever owns it."""
        sq = _to_square(row, col)
        piece = None if sq is None else self._board[sq]
        if piece is None:
            return frozenset()
        return frozenset(self._generator().legal_moves(piece, sq))

    def is_in_check(self, player: Player) -> bool:
        return Rules.is_in_check(self._board, player)

    def is_checkmate(self, player: Player) -> bool:
        return self._generator().is_checkmate(player)

    # ── Internal ─────────────────────────────────────────────────────────

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(
            self._board,
            self._last_move,
            allow_castling=self._config.allow_castling,
        )

    def _clear_selection(self) -> None:
        self._selected = None
        self._highlighted = frozenset()

    def _execute(self, from_sq: Square, to_sq: Square) -> LastMove:
        record = apply_move(
            self._board,
            from_sq,
            to_sq,
            last_move=self._last_move,
            strict_en_passant=self._config.strict_en_passant,
        )
        self._last_move = record
        self._clear_selection()
        self._current_turn = self._current_turn.opposite
        self._status = self._compute_status()

        _LOGGER.debug("Move %s, %s to move", record, self._current_turn)
        if self._status != GameStatus.IN_PROGRESS:
            _LOGGER.info("%s", self.status_text)
        return record

    def _compute_status(self) -> GameStatus:
        return Rules.status(
            self._board,
            self._current_turn,
            self._last_move,
            allow_castling=self._config.allow_castling,
        )
