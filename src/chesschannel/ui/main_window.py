"""MainWindow: board, reset button, turn and status lines."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesschannel.game.engine import ChessEngine
from chesschannel.ui.board.board_view import BoardView
from chesschannel.ui.settings import AppSettings
from chesschannel.ui.styles.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window: a single board driven by one engine."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        engine: ChessEngine | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        self._engine = (
            engine if engine is not None else ChessEngine(config=self._settings.engine)
        )

        self.setWindowTitle(self._settings.window_title)
        self.setMinimumSize(480, 600)
        self.resize(640, 760)

        self._setup_ui()
        self._apply_settings()
        self._refresh_labels()

    # ── UI construction ──────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self._title_label = QLabel(self._settings.window_title)
        self._title_label.setObjectName("titleLabel")
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title_label)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status_label)

        self._board_view = BoardView(self._engine, central)
        self._board_view.state_changed.connect(self._refresh_labels)
        layout.addWidget(self._board_view, stretch=1)

        bottom = QHBoxLayout()
        self._reset_button = QPushButton("Reset")
        self._reset_button.clicked.connect(self._on_reset)
        bottom.addWidget(self._reset_button)
        self._turn_label = QLabel()
        bottom.addWidget(self._turn_label)
        bottom.addStretch(1)
        layout.addLayout(bottom)

        self.setCentralWidget(central)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_reset(self) -> None:
        self._engine.reset_board()
        self._board_view.board_scene.refresh()
        self._refresh_labels()

    def _refresh_labels(self) -> None:
        self._board_view.board_scene.set_interactive(not self._engine.is_game_over)
        turn = str(self._engine.current_turn).capitalize()
        self._turn_label.setText(f"Turn: {turn}")
        self._status_label.setText(self._engine.status_text)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def engine(self) -> ChessEngine:
        return self._engine

    @property
    def board_view(self) -> BoardView:
        return self._board_view
