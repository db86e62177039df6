import random

import pytest

from scrabble.bag import Bag
from scrabble.dictionary import Dictionary
from scrabble.game import Game
from scrabble.tile import Tile


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "words.dict"
    path.write_text("cab\n", encoding="utf-8")
    return Dictionary(path)


@pytest.fixture
def game(dictionary):
    return Game(2, dictionary, rng=random.Random(3))


def test_default_names_and_hands(game):
    assert [p.name for p in game.players] == ["Player1", "Player2"]
    assert all(len(p.tiles) == 7 for p in game.players)
    assert game.bag_size() == len(Bag()) - 14


def test_custom_names(dictionary):
    g = Game(3, dictionary, ["Ann", ""], rng=random.Random(1))
    assert [p.name for p in g.players] == ["Ann", "Player2", "Player3"]


def test_next_turn_wraps(game):
    first = game.current_player()
    game.next_turn()
    assert game.current_player() is not first
    game.next_turn()
    assert game.current_player() is first


def test_pass_move(game):
    name = game.current_player().name
    move = game.execute_move("PASS")
    assert move.is_pass is True
    assert move.move_type == "pass"
    assert move.player_name == name
    assert game.move_history() == [move]
    assert game.current_player().name != name


def test_invalid_move_type(game):
    with pytest.raises(ValueError):
        game.execute_move("jump", "cab", "H", 8, 8)
    assert game.move_history() == []


def test_swap_move(game):
    player = game.current_player()
    word = "".join(t.letter for t in player.tiles[:2])
    bag_before = game.bag_size()
    move = game.execute_move("swap", word)
    assert move.words == [word]
    assert move.move_type == "swap"
    assert len(player.tiles) == 7
    assert game.bag_size() == bag_before
    assert game.current_player() is not player


def test_swap_without_tiles_fails(game):
    player = game.current_player()
    with pytest.raises(ValueError):
        game.execute_move("swap", "AAAAAAAA")
    assert game.current_player() is player
    assert game.move_history() == []


def test_place_move(game):
    player = game.current_player()
    player.tiles[:] = [Tile("C", 3), Tile("A", 1), Tile("B", 3), Tile("E", 1)]
    bag_before = game.bag_size()
    move = game.execute_move("place", "cab", "h", 8, 8)
    assert move.words == ["cab"]
    assert move.horizontal is True
    assert move.tile_indices == [0, 1, 2]
    assert move.score == player.score
    assert player.score > 0
    assert game.bag_size() == bag_before - 3
    assert len(player.tiles) == 4
    assert game.current_player() is not player
    assert game.move_history() == [move]


def test_end_game_subtracts_hand(game):
    first, second = game.players
    first.add_score(30)
    expected = [first.score - first.hand_score(), second.score - second.hand_score()]
    assert game.is_game_over() is False
    game.end_game()
    assert [first.score, second.score] == expected
    assert game.is_game_over() is True


def test_winner_prefers_highest_then_first(game):
    first, second = game.players
    assert game.winner() is first
    second.add_score(5)
    assert game.winner() is second