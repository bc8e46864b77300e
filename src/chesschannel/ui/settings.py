"""Application settings for the board window."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesschannel.game.config import EngineConfig


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Window
    window_title: str = "Chess Channel"

    # Board
    board_theme: str = "Wood"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Rules
    engine: EngineConfig = field(default_factory=EngineConfig)
