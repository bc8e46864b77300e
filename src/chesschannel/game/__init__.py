"""Game management layer: the click-driven chess engine.

Quick start::

    from chesschannel.game import ChessEngine

    engine = ChessEngine()
    engine.select_or_move(6, 4)   # select the e-pawn
    engine.select_or_move(4, 4)   # push it two squares
"""

from chesschannel.game.config import EngineConfig
from chesschannel.game.engine import ChessEngine

__all__ = [
    "ChessEngine",
    "EngineConfig",
]
