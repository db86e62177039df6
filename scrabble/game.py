"""A game: players taking turns on one board with one bag."""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from scrabble.bag import Bag
from scrabble.board import Board
from scrabble.dictionary import Dictionary, DictionaryType
from scrabble.player import Player

logger = logging.getLogger(__name__)

HAND_SIZE = 7


@dataclass
class Move:
    """A record of one turn."""

    player_name: str
    move_type: str
    words: List[str] = field(default_factory=list)
    row: int = 0
    col: int = 0
    horizontal: bool = False
    score: int = 0
    tile_indices: List[int] = field(default_factory=list)
    is_pass: bool = False


class Game:
    """Players, a bag, a board and a dictionary, with turn bookkeeping."""

    def __init__(
        self,
        num_players: int,
        dictionary: Union[Dictionary, DictionaryType, str, os.PathLike],
        custom_names: Sequence[str] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        self._bag = Bag(rng)
        self._board = Board()
        self._dictionary = (
            dictionary if isinstance(dictionary, Dictionary) else Dictionary(dictionary)
        )
        self._history: List[Move] = []
        self._current = 0
        self._consecutive_passes = 0
        self._game_over = False
        self._players: List[Player] = []
        for i in range(num_players):
            given = custom_names[i] if i < len(custom_names) else ""
            player = Player(given or f"Player{i + 1}", 0, HAND_SIZE)
            player.put_tiles_in_hand(self._bag.draw_tiles(HAND_SIZE))
            self._players.append(player)

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    def is_game_over(self) -> bool:
        if len(self._bag) == 0:
            if any(not player.tiles for player in self._players):
                return True
            if self._consecutive_passes >= 2 * len(self._players):
                return True
        return self._game_over

    def _advance(self) -> None:
        self._current = (self._current + 1) % len(self._players)
        logger.info(
            "[Game] Turn switched to player: %s", self._players[self._current].name
        )

    def next_turn(self) -> None:
        """Hand the turn to the next player and reset the pass count."""
        self._advance()
        self._consecutive_passes = 0

    def winner(self) -> Player:
        """The player with the highest score; the earliest one on a tie."""
        return max(self._players, key=lambda player: player.score)

    def current_player(self) -> Player:
        return self._players[self._current]

    def bag_size(self) -> int:
        return len(self._bag)

    def end_game(self) -> None:
        """Take each player's remaining tile points off their score."""
        for player in self._players:
            penalty = player.hand_score()
            player.subtract_score(penalty)
            logger.info(
                "[Game] Player %s final score adjusted by -%d: %d",
                player.name,
                penalty,
                player.score,
            )
        self._game_over = True
        logger.info("[Game] Game ended. Winner: %s", self.winner().name)

    def move_history(self) -> List[Move]:
        return list(self._history)

    def _tile_indices(self, word: str) -> List[int]:
        player = self.current_player()
        indices: List[int] = []
        for char in word.upper():
            index = next(
                (
                    i
                    for i, tile in enumerate(player.tiles)
                    if (tile.letter == char or tile.is_blank()) and i not in indices
                ),
                None,
            )
            if index is None:
                logger.error(
                    "[Game] Player %s does not have required tiles for: %s",
                    player.name,
                    word,
                )
                raise ValueError(
                    f"Player {player.name} does not have required tiles for: {word}"
                )
            indices.append(index)
        return indices

    def _pass(self) -> Move:
        move = Move(
            player_name=self.current_player().name, move_type="pass", is_pass=True
        )
        self._history.append(move)
        self._consecutive_passes += 1
        logger.info("[Game] Player %s passed their turn", move.player_name)
        self._advance()
        return move

    def _swap(self, move_type: str, word: str) -> Move:
        player = self.current_player()
        indices = self._tile_indices(word)
        player.perform_swap(self._bag, indices)
        move = Move(
            player_name=player.name,
            move_type=move_type,
            words=[word],
            tile_indices=indices,
        )
        self._history.append(move)
        self.next_turn()
        logger.info("[Game] Player %s swapped tiles: %s", move.player_name, word)
        return move

    def _place(
        self, move_type: str, word: str, direction: str, row: int, col: int
    ) -> Move:
        player = self.current_player()
        horizontal = direction in ("H", "h")
        indices = self._tile_indices(word)
        words, score = player.execute_place_move(
            self._bag, self._dictionary, self._board, horizontal, row, col, indices
        )
        move = Move(
            player_name=player.name,
            move_type=move_type,
            words=words,
            row=row,
            col=col,
            horizontal=horizontal,
            score=score,
            tile_indices=indices,
        )
        self._history.append(move)
        self.next_turn()
        logger.info(
            "[Game] Player %s placed word: %s at (%d, %d), score: %d",
            move.player_name,
            word,
            row,
            col,
            score,
        )
        return move

    def execute_move(
        self,
        move_type: str,
        word: str = "",
        direction: str = "H",
        row: int = 0,
        col: int = 0,
    ) -> Move:
        """Carry out a ``pass``, ``place`` or ``swap`` move for the current player.

        Returns the recorded move. Raises ValueError for an unknown move type or
        a move that cannot be made.
        """
        kind = move_type.lower()
        if kind == "pass":
            return self._pass()
        if kind == "place":
            return self._place(move_type, word, direction, row, col)
        if kind == "swap":
            return self._swap(move_type, word)
        logger.error("[Game] Invalid move type: %s", move_type)
        raise ValueError(f"Invalid move type: {move_type}")