# scrabble

The rules engine of a Scrabble game. It provides the tile bag, the 15×15
premium-square board with word finding and scoring, word lists, players, and a
turn-based game that keeps a move history. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

The tests need pytest:

```
pip install ".[test]"
pytest
```

## Word lists

`scrabble.dictionary.Dictionary` is a set of lower-case words read from a file with
one word per line. Two built-in types exist, `DictionaryType.CSW` (the default) and
`DictionaryType.TWL`. They are read from `assets/dictionaries/csw6.dict` and
`assets/dictionaries/twl6.dict`, relative to the working directory. These files are
not part of the package. If a file cannot be opened, `OSError` is raised.

```python
from scrabble.dictionary import Dictionary, DictionaryType

words = Dictionary("my_words.txt")    # a path
"cat" in words                        # membership is exact, so use lower case
len(words)
words.change(DictionaryType.TWL)      # switch to a built-in list
words.load("other_words.txt")         # replace the list with another file
```

## Playing a game

```python
import random

from scrabble.dictionary import Dictionary
from scrabble.game import Game

game = Game(2, Dictionary("my_words.txt"), ["Alice", "Bob"], rng=random.Random(1))
print(game.current_player().name)
print(game.current_player().describe_hand())

# Place a word from the current player's rack. Rows and columns count from 1.
# "H" or "h" means across; any other direction means down.
move = game.execute_move("place", "cat", "H", 8, 8)
print(move.words, move.score)

# Swap tiles back into the bag, or pass.
game.execute_move("swap", "qz")
game.execute_move("pass")

if game.is_game_over():
    game.end_game()
    print(game.winner().name)

for move in game.move_history():
    print(move.player_name, move.move_type, move.words, move.score)
```

`Game` takes the dictionary as a `Dictionary`, a `DictionaryType` or a path to a
word file. An optional `random.Random` makes the bag's shuffle repeatable. A player
without a name, or with an empty one, is called `Player1`, `Player2` and so on.
Each player starts with 7 tiles.

`execute_move` carries out a `"pass"`, `"place"` or `"swap"` move for the current
player. The move type is not case-sensitive. It returns the recorded `Move`, and
play then passes to the next player. In these cases it raises `ValueError` and the
turn does not change:

- the move type is unknown;
- the rack lacks the letters of the word (a blank `?` tile stands in for any letter);
- the placement forms no word;
- a word it forms is not in the dictionary;
- the placement runs off the board;
- a swap asks for more tiles than the bag holds.

After the first move, a placement must also touch tiles already on the board.
Playing a full rack of seven tiles earns a 50-point bonus.

The game is over when the bag is empty and either some player has an empty rack or
there have been at least twice as many consecutive passes as players. It is also over
once `end_game()` has been called. `end_game()` takes the points of the tiles left in
each rack off that player's score. `winner()` returns the highest scorer; on a tie it
is the earliest player. `bag_size()` gives the number of tiles left, and `players`
lists the players.

## Building blocks

- `scrabble.tile.Tile` is a letter and its points. `"?"` is a blank, and
  `use_as(letter)` sets the letter it stands for.
- `scrabble.square.Square` is one board square. It has a symbol (`***`, `...`,
  `2L`, `3L`, `2W`, `3W`), a multiplier and an optional tile.
- `scrabble.bag.Bag` holds the standard 100-tile distribution, shuffled. Tiles are
  drawn from its end. `draw_tiles(n)` takes up to `n` tiles, with `n` from 0 to 7,
  and raises `InvalidDrawError` for any other count. `len(bag)` is the number of
  tiles left, and `describe()` lists the bag's content as text.
- `scrabble.board.Board` is the premium-square layout. `all_words(row, col,
  horizontal, tiles)` takes the square of the first tile, counting from 1. It returns
  the words a placement would form, cross words first and the main word last,
  together with their score. `vertical_word` and `horizontal_word` find a single
  cross word and its points. `place_tile` and `is_occupied_at` take squares counted
  from 0.
- `scrabble.player.Player` holds a name, a score and a rack. `execute_place_move`
  plays tiles by rack index and returns the words and the turn score.
  `perform_swap` returns tiles to the bag and draws as many. `hand_score()` sums the
  points in the rack.
- `scrabble.preferences.Preferences` holds the dictionary type, sound volume (100),
  resolution (1280×720) and vsync setting, with these defaults.

## What this package does not do

It is the rules alone. There is no command to run, no screen or window to play on,
and no saving of games or preferences. Word lists are not included; you supply the
files yourself.