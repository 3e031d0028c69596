"""
Parser tests for tile records.
"""

import sys
import os

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tile_mosaic.parser import parse_tiles, parse_tile, tile_from_rows, load_tiles
from tile_mosaic.core.types import render_grid

EXAMPLE = os.path.join(os.path.dirname(__file__), '..', 'data', 'example.txt')

SMALL = """\
Tile 7:
#..
.#.
..#

Tile 8:
###
#.#
.##
"""


def test_parse_example():
    tiles = load_tiles(EXAMPLE)
    assert len(tiles) == 9
    assert [t.id for t in tiles][:3] == [2311, 1951, 1171]

    t = tiles[0]
    assert t.id == 2311
    assert t.size == 10
    assert t.top == 0x0D2
    assert t.bottom == 0x0E7
    assert t.left == 0x1F2
    assert t.right == 0x059
    assert t.content.shape == (8, 8)
    assert render_grid(t.content)[0] == "#..#...."


def test_content_is_read_only():
    t = parse_tile("Tile 7:\n#..\n.#.\n..#")
    with pytest.raises(ValueError):
        t.content[0, 0] = 0


def test_parse_small():
    tiles = parse_tiles(SMALL)
    assert [t.id for t in tiles] == [7, 8]
    assert (tiles[0].top, tiles[0].left, tiles[0].right, tiles[0].bottom) == (0b100, 0b100, 0b001, 0b001)
    assert (tiles[1].top, tiles[1].left, tiles[1].right, tiles[1].bottom) == (0b111, 0b110, 0b111, 0b011)
    assert render_grid(tiles[1].content) == ["."]


def test_tiles_compare_by_id():
    a = parse_tile("Tile 7:\n#..\n.#.\n..#")
    b = parse_tile("Tile 7:\n###\n###\n###")
    assert a == b
    assert len({a, b}) == 1


def test_blank_lines_with_whitespace():
    text = SMALL.replace("\n\nTile 8", "\n   \n\nTile 8")
    assert len(parse_tiles(text)) == 2
    assert parse_tiles("") == []


@pytest.mark.parametrize("text", [
    "Tile x:\n#..\n.#.\n..#",        # bad id
    "Tile 7\n#..\n.#.\n..#",         # missing colon
    "Tile 7:\n#..\n.#\n..#",         # ragged
    "Tile 7:\n#..\n.#.",             # not square
    "Tile 7:\n#a.\n.#.\n..#",        # invalid cell
    "Tile 7:\n#.\n.#",               # too small to trim
    "Tile 7:",                       # no rows
])
def test_malformed_records(text):
    with pytest.raises(ValueError):
        parse_tile(text)


def test_duplicate_ids():
    with pytest.raises(ValueError, match="Duplicate"):
        parse_tiles(SMALL.replace("Tile 8", "Tile 7"))


def test_mixed_sizes():
    with pytest.raises(ValueError, match="mixed sizes"):
        parse_tiles(SMALL + "\nTile 9:\n#...\n....\n....\n...#\n")


def test_tile_from_rows():
    t = tile_from_rows(3, ["##.", "...", ".##"])
    assert t.top == 0b110
    assert t.bottom == 0b011
    assert t.left == 0b100
    assert t.right == 0b001
