"""The bag of tiles players draw from."""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from scrabble.tile import Tile

logger = logging.getLogger(__name__)

MAX_DRAW = 7

# <letter> <points> <letter count>
_DEFAULT_DISTRIBUTION = """\
? 0 2
a 1 9
b 3 2
c 3 2
d 2 4
e 1 12
f 4 2
g 2 3
h 4 2
i 1 9
j 8 1
k 5 1
l 1 4
m 3 2
n 1 6
o 1 8
p 3 2
q 10 1
r 1 6
s 1 4
t 1 6
u 1 4
v 4 2
w 4 2
x 8 1
y 4 2
z 10 1"""


def _parse_distribution(text: str) -> tuple:
    entries = []
    for line in text.splitlines():
        letter, points, count = line.split()
        entries.append((letter.upper(), int(points), int(count)))
    return tuple(entries)


DISTRIBUTION = _parse_distribution(_DEFAULT_DISTRIBUTION)


class InvalidDrawError(ValueError):
    """Raised when asking to draw a number of tiles outside 0..MAX_DRAW."""


class Bag:
    """A shuffled bag of tiles; tiles are drawn from its end."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._tiles: List[Tile] = [
            Tile(letter, points)
            for letter, points, count in DISTRIBUTION
            for _ in range(count)
        ]
        self.shuffle()
        logger.info("[Bag] Bag initialized")

    def add_tile(self, tile: Tile) -> None:
        self._tiles.append(tile)

    def add_tiles(self, tiles: Iterable[Tile]) -> None:
        self._tiles.extend(tiles)

    def draw_tiles(self, count: int) -> List[Tile]:
        """Take up to ``count`` tiles from the end of the bag."""
        if count > MAX_DRAW or count < 0:
            raise InvalidDrawError(
                f"Invalid tiles draw. You must only draw from 0 to {MAX_DRAW} tiles."
            )
        drawn = []
        while len(drawn) < count and self._tiles:
            drawn.append(self._tiles.pop())
        return drawn

    def shuffle(self) -> None:
        self._rng.shuffle(self._tiles)

    def describe(self) -> str:
        """Return the bag's content and remaining tile count as text."""
        content = "".join(tile.describe() for tile in self._tiles)
        return f"Bag content: \n{content}\nTiles remaining: {len(self)}\n"

    def __len__(self) -> int:
        return len(self._tiles)