"""PyQt6 front end: renders a :class:`~chesschannel.game.ChessEngine`."""
