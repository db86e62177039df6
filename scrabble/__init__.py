"""Rules engine for Scrabble: tiles, bag, board scoring, word lists, players and games."""

__version__ = "0.1.0"
__all__ = ["bag", "board", "dictionary", "game", "player", "preferences", "square", "tile"]