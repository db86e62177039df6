"""Players, their hands and the moves they make."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from scrabble.bag import Bag
from scrabble.board import Board, HEIGHT, WIDTH
from scrabble.dictionary import Dictionary
from scrabble.tile import Tile

logger = logging.getLogger(__name__)

BONUS_SCORE = 50


@dataclass
class Player:
    """A player with a name, a score and a hand of tiles.

    ``hand_size`` is the number of tiles a full hand holds; playing all of
    them in one move earns the bonus.
    """

    name: str
    score: int = 0
    hand_size: int = 7
    tiles: List[Tile] = field(default_factory=list)

    def put_tiles_in_hand(self, tiles: Iterable[Tile]) -> None:
        self.tiles.extend(tiles)

    def use_tile(self, index: int) -> None:
        """Remove the tile at ``index`` from the hand.

        Raises IndexError when the hand holds no tile at ``index``.
        """
        if not 0 <= index < len(self.tiles):
            raise IndexError(f"no tile at index {index} in hand")
        removed = self.tiles.pop(index)
        logger.debug("Player %s used tile %s", self.name, removed.describe())

    def take_tile(self, index: int) -> Tile:
        """Remove the tile at ``index`` from the hand and return it."""
        return self.tiles.pop(index)

    def add_score(self, score: int) -> None:
        self.score += score

    def subtract_score(self, score: int) -> None:
        self.score -= score

    def hand_score(self) -> int:
        """The sum of the points of the tiles in hand."""
        return sum(tile.points for tile in self.tiles)

    def _check_indices(self, indices: Sequence[int]) -> None:
        if len(set(indices)) != len(indices):
            raise ValueError(f"tile indices must be distinct: {list(indices)}")
        for index in indices:
            if not 0 <= index < len(self.tiles):
                raise IndexError(f"no tile at index {index} in hand")

    def _remove_indices(self, indices: Iterable[int]) -> None:
        for index in sorted(indices, reverse=True):
            del self.tiles[index]

    def _select_for_play(self, tile_indices: Sequence[int]) -> List[int]:
        # A blank tile takes the place of the index that follows it.
        self._check_indices(tile_indices)
        chosen = []
        remaining = iter(tile_indices)
        for index in remaining:
            chosen.append(index)
            if self.tiles[index].is_blank():
                next(remaining, None)
        return chosen

    def execute_place_move(
        self,
        bag: Bag,
        dictionary: Dictionary,
        board: Board,
        horizontal: bool,
        row: int,
        col: int,
        tile_indices: Sequence[int],
    ) -> Tuple[List[str], int]:
        """Play the tiles at ``tile_indices`` from the 1-based square (row, col).

        Returns the lower-case words formed and the score of the turn. Raises
        ValueError when the move forms no word or a word not in the dictionary;
        the hand, the board and the bag are then left as they were.
        """
        chosen = self._select_for_play(tile_indices)
        used = [self.tiles[index] for index in chosen]
        if not used:
            raise ValueError("at least one tile must be placed")

        words, turn_score = board.all_words(row, col, horizontal, used)
        words = [word.lower() for word in words]
        if not words:
            logger.error(
                "At least one tile must be adjacent to other tiles on the board."
            )
            raise ValueError(
                "At least one tile must be adjacent to other tiles on the board."
            )
        for word in words:
            if word not in dictionary:
                logger.error("Invalid words: %s", word)
                raise ValueError(f"Invalid words: {word}")

        if len(used) == self.hand_size:
            turn_score += BONUS_SCORE

        placements = []
        r, c = row - 1, col - 1
        for tile in used:
            while 0 <= r < HEIGHT and 0 <= c < WIDTH and board.is_occupied_at(r, c):
                r, c = (r, c + 1) if horizontal else (r + 1, c)
            if not (0 <= r < HEIGHT and 0 <= c < WIDTH):
                raise ValueError("the move runs off the board")
            placements.append((tile, r, c))
            r, c = (r, c + 1) if horizontal else (r + 1, c)

        for tile, r, c in placements:
            board.place_tile(tile, r, c)
        self._remove_indices(chosen)
        self.add_score(turn_score)
        logger.info("Score of this turn: %d", turn_score)

        self.put_tiles_in_hand(bag.draw_tiles(min(len(used), len(bag))))
        board.is_first_move = False
        return words, turn_score

    def perform_swap(self, bag: Bag, indices: Sequence[int]) -> None:
        """Return the tiles at ``indices`` to the bag and draw as many.

        Raises ValueError when the bag holds fewer tiles than are swapped.
        """
        if len(indices) > len(bag):
            raise ValueError(
                f"cannot swap {len(indices)} tiles, "
                f"only {len(bag)} left in the bag"
            )
        self._check_indices(indices)
        returned = [self.tiles[index] for index in indices]
        self._remove_indices(indices)
        bag.add_tiles(returned)
        self.put_tiles_in_hand(bag.draw_tiles(len(returned)))

    def describe_hand(self) -> str:
        """The player's name and the tiles in hand as text."""
        tiles = "".join(tile.describe() for tile in self.tiles)
        return f"Player: {self.name}, tiles: {tiles}"