"""The 15x15 board and the scoring of plays."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from scrabble.square import Square
from scrabble.tile import Tile

WIDTH = 15
HEIGHT = 15
START_ROW = 7
START_COL = 7

_LAYOUT = """\
t..2...t...2..t
.d...3...3...d.
..d...2.2...d..
...d.......d...
....d.....d....
.3...3...3...3.
..2...2.2...2..
t.............t
..2...2.2...2..
.3...3...3...3.
....d.....d....
...d.......d...
..d...2.2...d..
.d...3...3...d.
t..2...t...2..t"""

_SQUARE_KINDS = {
    ".": ("...", "1"),
    "2": ("2L ", "2"),
    "3": ("3L ", "3"),
    "d": ("2W ", "2n"),
    "t": ("3W ", "3n"),
}
_START_SQUARE = ("***", "2n")


def _face(tile: Tile) -> str:
    return tile.use if tile.is_blank() else tile.letter


def _build_grid() -> List[List[Square]]:
    grid = []
    for i, line in enumerate(_LAYOUT.splitlines()):
        row = []
        for j, char in enumerate(line):
            if (i, j) == (START_ROW, START_COL):
                symbol, multiplier = _START_SQUARE
            else:
                try:
                    symbol, multiplier = _SQUARE_KINDS[char]
                except KeyError:
                    raise ValueError(
                        f"Invalid character in board declaration: {char!r}"
                    ) from None
            row.append(Square(i, j, symbol, multiplier))
        grid.append(row)
    return grid


class Board:
    """The board grid. ``is_first_move`` is true until a play is made."""

    def __init__(self) -> None:
        self._grid = _build_grid()
        self.is_first_move = True

    def _square(self, row: int, col: int) -> Square:
        if not (0 <= row < HEIGHT and 0 <= col < WIDTH):
            raise IndexError(f"square ({row}, {col}) is off the board")
        return self._grid[row][col]

    def _column_run(self, row: int, col: int, step: int) -> Iterator[Square]:
        row += step
        while 0 <= row < HEIGHT and self._square(row, col).is_occupied():
            yield self._square(row, col)
            row += step

    def _row_run(self, row: int, col: int, step: int) -> Iterator[Square]:
        col += step
        while 0 <= col < WIDTH and self._square(row, col).is_occupied():
            yield self._square(row, col)
            col += step

    def vertical_word(self, tile: Tile, row: int, col: int) -> Tuple[str, int]:
        """The vertical word ``tile`` would form at (row, col), with its points."""
        above = list(self._column_run(row, col, -1))
        below = list(self._column_run(row, col, 1))
        word = (
            "".join(sq.value() for sq in reversed(above))
            + _face(tile)
            + "".join(sq.value() for sq in below)
        )
        points = tile.points + sum(sq.tile_points() for sq in above + below)
        return word, points

    def horizontal_word(self, tile: Tile, row: int, col: int) -> Tuple[str, int]:
        """The horizontal word ``tile`` would form at (row, col), with its points."""
        left = list(self._row_run(row, col, -1))
        right = list(self._row_run(row, col, 1))
        word = (
            "".join(sq.value() for sq in reversed(left))
            + _face(tile)
            + "".join(sq.value() for sq in right)
        )
        points = tile.points + sum(sq.tile_points() for sq in left + right)
        return word, points

    @staticmethod
    def _score_tile(
        square: Square, tile: Tile, multiplier: int, secondary: int
    ) -> Tuple[int, int, int]:
        kind = square.multiplier
        if kind == "3n":
            multiplier *= 3
            secondary *= 3
            gain = tile.points * multiplier
        elif kind == "2n":
            multiplier *= 2
            secondary *= 2
            gain = tile.points * multiplier
        elif kind == "3":
            gain = 3 * tile.points * multiplier
        elif kind == "2":
            gain = 2 * tile.points * multiplier
        else:
            gain = tile.points * multiplier
        return gain, multiplier, secondary

    def all_words(
        self, row: int, col: int, horizontal: bool, tiles: Sequence[Tile]
    ) -> Tuple[List[str], int]:
        """Find and score the words formed by placing ``tiles``.

        ``row`` and ``col`` are 1-based and give the square of the first tile.
        Returns the words (cross words first, main word last) and the score.
        When the move touches no tile on the main line and it is not the first
        move, the main word is left out.
        """
        if not tiles:
            raise ValueError("at least one tile must be placed")
        words: List[str] = []
        score = 0
        multiplier = 1
        secondary = 1
        connected = False
        first = tiles[0]
        rest = iter(tiles[1:])
        main = _face(first)

        kind = self._square(row - 1, col - 1).multiplier
        if kind == "3n":
            multiplier *= 3
            score += 3 * first.points
        elif kind == "2n":
            multiplier *= 2
            score += 2 * first.points
        elif kind == "3":
            score += 3 * first.points
        elif kind == "2":
            score += 2 * first.points
        else:
            score += first.points * multiplier

        if horizontal:
            r = row - 1
            cross, points = self.vertical_word(first, r, col - 1)
            if len(cross) != 1:
                score += points * multiplier
                words.append(cross)
            left = 0 if col - 2 == -1 else col - 2
            right = col
            while left >= 0 and right < HEIGHT:
                square = self._square(r, left)
                if square.is_occupied():
                    connected = True
                    main = square.value() + main
                    score += square.tile_points() * multiplier
                    if left != 0:
                        left -= 1
                        continue
                square = self._square(r, right)
                if square.is_occupied():
                    connected = True
                    main += square.value()
                    score += square.tile_points() * multiplier
                    if right != HEIGHT - 1:
                        right += 1
                        continue
                    break
                tile = next(rest, None)
                if tile is None:
                    break
                main += _face(tile)
                gain, multiplier, secondary = self._score_tile(
                    square, tile, multiplier, secondary
                )
                score += gain
                cross, points = self.vertical_word(tile, r, right)
                if len(cross) != 1:
                    score += points * secondary
                    words.append(cross)
                right += 1
        else:
            c = col - 1
            cross, points = self.horizontal_word(first, row - 1, c)
            if len(cross) != 1:
                score += points * multiplier
                words.append(cross)
            up = 0 if row - 2 == -1 else row - 2
            down = row
            while up >= 0 and down < WIDTH:
                square = self._square(up, c)
                if square.is_occupied():
                    connected = True
                    main = square.value() + main
                    score += square.tile_points() * multiplier
                    up -= 1
                    continue
                square = self._square(down, c)
                if square.is_occupied():
                    connected = True
                    main += square.value()
                    score += square.tile_points() * multiplier
                    down += 1
                    continue
                tile = next(rest, None)
                if tile is None:
                    break
                main += _face(tile)
                gain, multiplier, secondary = self._score_tile(
                    square, tile, multiplier, secondary
                )
                score += gain
                cross, points = self.horizontal_word(tile, down, c)
                if len(cross) != 1:
                    score += points * secondary
                    words.append(cross)
                down += 1

        if not connected and not self.is_first_move:
            return words, score
        words.append(main)
        return words, score

    def place_tile(self, tile: Tile, row: int, col: int) -> None:
        """Put ``tile`` on the 0-based square (row, col)."""
        self._square(row, col).place_tile(tile)

    def is_occupied_at(self, row: int, col: int) -> bool:
        return self._square(row, col).is_occupied()