"""Building blocks for the game logic of a vertical space shooter."""

__version__ = "0.1.0"