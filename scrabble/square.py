"""Board squares."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scrabble.tile import Tile


@dataclass
class Square:
    """A square of the board.

    ``symbol`` is one of ``***`` (start), ``...`` (normal), ``2L``/``3L``
    (letter bonus) or ``2W``/``3W`` (word bonus). ``multiplier`` is ``1``,
    ``2``, ``3`` for letter multipliers and ``2n``, ``3n`` for word ones.
    """

    row: int = 0
    col: int = 0
    symbol: str = ""
    multiplier: str = ""
    tile: Optional[Tile] = None

    def place_tile(self, tile: Tile) -> None:
        self.tile = tile

    def is_occupied(self) -> bool:
        return self.tile is not None

    def value(self) -> str:
        """The letter on the square, or its symbol when empty."""
        if self.tile is None:
            return self.symbol
        if self.tile.is_blank():
            return self.tile.use
        return self.tile.letter

    def value_in_board(self) -> str:
        """The three-character cell used when printing the board."""
        if self.tile is None:
            return self.symbol
        if self.tile.is_blank():
            return f"{self.tile.use}0 "
        text = f"{self.tile.letter}{self.tile.points}"
        if text == "Z10":
            return text
        return text + " "

    def tile_points(self) -> int:
        return self.tile.points if self.tile is not None else 0