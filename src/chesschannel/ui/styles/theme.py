"""Visual theme constants and QSS styles for Chess Channel."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected_outline: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    last_move: QColor
    white_piece: QColor
    black_piece: QColor
    coord_light: QColor  # coordinate text on light squares
    coord_dark: QColor  # coordinate text on dark squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 230, 179),
            dark_square=QColor(153, 102, 51),
            selected_outline=QColor(220, 20, 20),
            highlight_to=QColor(0, 0, 0, 60),  # dark dot overlay
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            last_move=QColor(155, 199, 0, 105),  # green
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(153, 102, 51),
            coord_dark=QColor(255, 230, 179),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected_outline=QColor(255, 215, 0),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            selected_outline=QColor(255, 215, 0),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names fall back to the default."""
        factories = {
            "Wood": cls.default,
            "Classic": cls.classic,
            "Slate": cls.slate,
        }
        return factories.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Wood", "Classic", "Slate")


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#titleLabel {
    font-size: 24px;
    font-weight: bold;
}

QLabel#statusLabel {
    color: #ff8a80;
    font-size: 15px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
"""
