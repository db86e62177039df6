"""Letter tiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BLANK = "?"


@dataclass
class Tile:
    """A tile with a letter and a point value.

    ``use`` is the letter a blank tile stands for; for other tiles it is the
    tile's own letter.
    """

    letter: str = ""
    points: int = 0
    use: Optional[str] = None

    def __post_init__(self) -> None:
        if self.use is None:
            self.use = self.letter

    def is_blank(self) -> bool:
        return self.letter == BLANK

    def use_as(self, use: str) -> None:
        """Set the letter this tile stands for."""
        self.use = use

    def describe(self) -> str:
        """Return the tile as letter followed by points and a space."""
        return f"{self.letter}{self.points} "