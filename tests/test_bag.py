import random
from collections import Counter

import pytest

from scrabble.bag import DISTRIBUTION, MAX_DRAW, Bag, InvalidDrawError
from scrabble.tile import Tile


def drain(bag):
    tiles = []
    while len(bag):
        tiles.extend(bag.draw_tiles(MAX_DRAW))
    return tiles


def test_bag_holds_full_distribution():
    bag = Bag(random.Random(3))
    assert len(bag) == sum(count for _, _, count in DISTRIBUTION)


def test_contents_match_distribution():
    tiles = drain(Bag(random.Random(5)))
    counts = Counter((t.letter, t.points) for t in tiles)
    expected = Counter({(l, p): c for l, p, c in DISTRIBUTION})
    assert counts == expected


def test_letters_are_uppercase():
    tiles = drain(Bag(random.Random(7)))
    assert all(t.letter == t.letter.upper() for t in tiles)


def test_blank_tiles_in_distribution():
    tiles = drain(Bag(random.Random(9)))
    blanks = [t for t in tiles if t.is_blank()]
    assert len(blanks) == 2
    assert all(t.points == 0 for t in blanks)


def test_draw_reduces_size():
    bag = Bag(random.Random(1))
    before = len(bag)
    drawn = bag.draw_tiles(7)
    assert len(drawn) == 7
    assert len(bag) == before - 7


def test_draw_zero_returns_nothing():
    bag = Bag(random.Random(1))
    before = len(bag)
    assert bag.draw_tiles(0) == []
    assert len(bag) == before


@pytest.mark.parametrize("count", [8, -1])
def test_invalid_draw_raises(count):
    bag = Bag(random.Random(1))
    before = len(bag)
    with pytest.raises(InvalidDrawError):
        bag.draw_tiles(count)
    assert len(bag) == before


def test_draw_stops_when_empty():
    bag = Bag(random.Random(2))
    drain(bag)
    bag.add_tiles([Tile("A", 1), Tile("B", 3)])
    drawn = bag.draw_tiles(7)
    assert len(drawn) == 2
    assert len(bag) == 0


def test_draw_takes_from_end():
    bag = Bag(random.Random(2))
    tile = Tile("Q", 10)
    bag.add_tile(tile)
    assert bag.draw_tiles(1) == [tile]


def test_seeded_bags_draw_the_same():
    first = Bag(random.Random(42)).draw_tiles(7)
    second = Bag(random.Random(42)).draw_tiles(7)
    assert first == second


def test_shuffle_keeps_tiles():
    bag = Bag(random.Random(11))
    bag.shuffle()
    tiles = drain(bag)
    assert len(tiles) == sum(count for _, _, count in DISTRIBUTION)


def test_describe_reports_remaining():
    bag = Bag(random.Random(4))
    drain(bag)
    bag.add_tile(Tile("A", 1))
    assert bag.describe() == "Bag content: \nA1 \nTiles remaining: 1\n"