"""
Image tests: assembly, the orientation lens, and the monster search.
"""

import sys
import os

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tile_mosaic.arrangement import arrange_tiles
from tile_mosaic.core.types import Pos, EMPTY, FILLED, MONSTER, G
from tile_mosaic.core.orientation import Orientation
from tile_mosaic.image import Image, SEA_MONSTER, find_monsters
from tile_mosaic.parser import load_tiles

EXAMPLE = os.path.join(os.path.dirname(__file__), '..', 'data', 'example.txt')

# First row of the stitched example when 1951 sits flipped in the top-left corner
EXAMPLE_FIRST_ROW = ".#.#..#.##...#.##..#####"


def example_image() -> Image:
    return arrange_tiles(3, 3, load_tiles(EXAMPLE)).image()


def test_sea_monster_shape():
    assert (SEA_MONSTER.width, SEA_MONSTER.height) == (20, 3)
    assert SEA_MONSTER.count(FILLED) == 15


def test_sea_monster_is_read_only():
    with pytest.raises(ValueError):
        SEA_MONSTER.grid[0, 0] = FILLED


def test_default_monster_ignores_shared_constant(monkeypatch):
    """Re-orienting SEA_MONSTER does not change the default search."""
    monkeypatch.setattr(SEA_MONSTER, "orientation", Orientation.R90)
    _, matches, roughness = find_monsters(example_image())
    assert matches == 2
    assert roughness == 273


def test_example_image_size():
    image = example_image()
    assert (image.width, image.height) == (24, 24)
    assert image.count(FILLED) == 303


def test_example_image_content():
    """The stitched image is the worked example up to symmetry."""
    image = example_image()
    rows = set()
    for o in Orientation:
        image.orientation = o
        rows.add(image.render().split('\n')[0])
    assert EXAMPLE_FIRST_ROW in rows


def test_get_matches_view():
    """Coordinate lens and numpy view agree under every orientation."""
    image = Image(np.arange(12).reshape(3, 4))
    for o in Orientation:
        image.orientation = o
        v = image.view()
        assert v.shape == (image.height, image.width)
        for pos in image.positions():
            assert image.get(pos) == v[pos.y, pos.x], f"{o.name} at {pos}"


def test_set_through_orientation():
    image = Image(np.zeros((2, 3), dtype=int), Orientation.R90)
    image.set(Pos(0, 0), FILLED)
    # R90 shows the right-hand column along the top
    assert image.grid[0, 2] == FILLED
    with pytest.raises(IndexError):
        image.get(Pos(2, 0))


def test_find_monsters_example():
    """Two monsters in the example, leaving 273 rough cells."""
    image = example_image()
    orientation, matches, roughness = find_monsters(image)

    assert orientation is not None
    assert matches == 2, f"Expected 2 monsters, got {matches}"
    assert roughness == 273, f"Expected roughness 273, got {roughness}"
    assert image.count(MONSTER) == 30
    assert image.orientation is orientation


def test_find_monsters_first_orientation_only():
    """Search stops at the first orientation holding a monster."""
    monster = Image.from_str("##\n# ")
    image = Image(G(["##..", "#...", "...."]))
    orientation, matches, roughness = find_monsters(image, monster)
    assert orientation is Orientation.R0
    assert matches == 1
    assert roughness == 0


def test_find_monsters_rotated():
    monster = Image.from_str("###\n#  ")
    # the monster rotated a quarter turn clockwise
    image = Image(G(["##.", ".#.", ".#.", "..."]))
    orientation, matches, roughness = find_monsters(image, monster)
    assert orientation is not None
    assert matches == 1
    assert roughness == 0


def test_overlapping_matches_are_independent():
    """Overlapping monsters both match and marking is idempotent."""
    monster = Image.from_str("##")
    image = Image(G(["###", "..."]))
    assert image.find_monsters(monster) == 2
    assert image.count(MONSTER) == 3
    assert image.count(FILLED) == 0


def test_dont_care_cells():
    """Blank monster cells match anything, and offsets reach the far edge."""
    monster = Image.from_str("# #")
    image = Image(G(["....#.#", "......."]))
    assert image.find_monsters(monster) == 1
    assert image.get(Pos(4, 0)) == MONSTER
    assert image.get(Pos(5, 0)) == EMPTY
    assert image.get(Pos(6, 0)) == MONSTER


def test_no_monsters():
    image = Image(G(["#.#", "...", "#.#"]))
    orientation, matches, roughness = find_monsters(image, Image.from_str("##"))
    assert orientation is None
    assert matches == 0
    assert roughness == 4
    assert image.orientation is Orientation.R0


def test_render_roundtrip():
    text = "#.O\n..#"
    assert Image.from_str(text).render() == text
