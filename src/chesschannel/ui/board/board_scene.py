"""BoardScene: QGraphicsScene that draws the engine state and forwards clicks."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesschannel.core.enums import Player
from chesschannel.core.move import LastMove
from chesschannel.core.types import ALL_SQUARES, BOARD_SIZE, Square
from chesschannel.game.engine import ChessEngine
from chesschannel.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, highlights and pieces of a :class:`ChessEngine`.

    The scene holds no game state of its own: every click goes to
    :meth:`ChessEngine.select_or_move` and the scene redraws from the
    engine afterwards.

    Signals:
        state_changed(): Emitted after every click handled by the engine.
        move_made(object): Emitted with the :class:`LastMove` when a click
            completed a move.
    """

    state_changed = pyqtSignal()
    move_made = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, engine: ChessEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._theme = BoardTheme.default()
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._overlay_items: list[QGraphicsItem] = []
        self._legal_dot_items: list[QGraphicsEllipseItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def engine(self) -> ChessEngine:
        return self._engine

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click handling."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide row/column labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        self.refresh()

    def handle_click(self, row: int, col: int) -> LastMove | None:
        """Forward a click to the engine and redraw."""
        move = self._engine.select_or_move(row, col)
        self.refresh()
        self.state_changed.emit()
        if move is not None:
            self.move_made.emit(move)
        return move

    def refresh(self) -> None:
        """Redraw pieces and highlights from the engine state."""
        self._sync_pieces()
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in ALL_SQUARES:
            is_dark = (sq.row + sq.col) % 2 == 1
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            label_color = self._theme.coord_dark if is_dark else self._theme.coord_light

            # Rank numbers (left edge)
            if sq.col == 0:
                pos = QPointF(2, sq.row * t + 1)
                self._add_coord(str(BOARD_SIZE - sq.row), font, label_color, pos)

            # File letters (bottom edge)
            if sq.row == BOARD_SIZE - 1:
                pos = QPointF(sq.col * t + t - 12, sq.row * t + t - 16)
                self._add_coord(chr(ord("a") + sq.col), font, label_color, pos)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, text: str, font: QFont, color: QColor, pos: QPointF) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(pos)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the engine board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for row_idx, row in enumerate(self._engine.board):
            for col_idx, piece in enumerate(row):
                if piece is None:
                    continue
                item = QGraphicsSimpleTextItem(piece.symbol)
                item.setFont(font)
                if piece.owner == Player.WHITE:
                    fill, outline = self._theme.white_piece, self._theme.black_piece
                else:
                    fill, outline = self._theme.black_piece, self._theme.white_piece
                item.setBrush(QBrush(fill))
                item.setPen(QPen(outline, 1))
                bounds = item.boundingRect()
                item.setPos(
                    col_idx * t + (t - bounds.width()) / 2,
                    row_idx * t + (t - bounds.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[Square(row_idx, col_idx)] = item

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._overlay_items)
        self._clear_items(self._legal_dot_items)
        engine = self._engine

        last = engine.last_move
        if last is not None:
            for sq in (last.from_sq, last.to_sq):
                self._add_overlay(sq, self._theme.last_move)

        king_sq = engine.king_square(engine.current_turn)
        if king_sq is not None and engine.is_in_check(engine.current_turn):
            self._add_overlay(king_sq, self._theme.highlight_check)

        selected = engine.selected_square
        if selected is not None:
            t = self.TILE
            outline = QGraphicsRectItem(selected.col * t, selected.row * t, t, t)
            outline.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            outline.setPen(QPen(self._theme.selected_outline, 3))
            outline.setZValue(0.7)
            self.addItem(outline)
            self._overlay_items.append(outline)

        if self._show_legal_moves:
            for sq in engine.highlighted:
                self._legal_dot_items.append(self._make_dot(sq))

    def _add_overlay(self, sq: Square, color: QColor) -> None:
        t = self.TILE
        rect = QGraphicsRectItem(sq.col * t, sq.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        self._overlay_items.append(rect)

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        t = self.TILE
        size = t * 0.3
        dot = QGraphicsEllipseItem(
            sq.col * t + (t - size) / 2, sq.row * t + (t - size) / 2, size, size
        )
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(1.5)
        self.addItem(dot)
        return dot

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            # Off-board clicks deselect, same as any other invalid click.
            self.handle_click(-1, -1)
        else:
            self.handle_click(sq.row, sq.col)
        event.accept()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Square(row, col)
