#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tile Mosaic - Type Definitions
===============================

Core types used throughout the mosaic solver:
- Grid: 2D integer array of cells (EMPTY / FILLED / MONSTER)
- Tile: parsed puzzle piece with four canonical edges and a trimmed interior
- OrientedTile: (tile id, orientation) pair used as search-state key
- Pos: grid position of a tile slot or an image cell
- Relationship: where a neighbour sits relative to a placed tile
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .orientation import Orientation

# =============================================================================
# Core Types
# =============================================================================

Grid = np.ndarray          # dtype=int, shape (H, W)
TileID = int
EdgePattern = int          # `size` bits, first cell most significant

# Cell values
EMPTY = 0
FILLED = 1
MONSTER = 2

CELL_CHARS = {EMPTY: '.', FILLED: '#', MONSTER: 'O'}
CHAR_CELLS = {'.': EMPTY, '#': FILLED, 'O': MONSTER, ' ': EMPTY}


class Pos(NamedTuple):
    """Column/row position; y grows downwards."""
    x: int
    y: int

    def up(self) -> 'Pos':
        return Pos(self.x, self.y - 1)

    def down(self) -> 'Pos':
        return Pos(self.x, self.y + 1)

    def left(self) -> 'Pos':
        return Pos(self.x - 1, self.y)

    def right(self) -> 'Pos':
        return Pos(self.x + 1, self.y)

    def neighbours(self) -> Iterator['Pos']:
        yield self.up()
        yield self.down()
        yield self.left()
        yield self.right()


class Relationship(Enum):
    """Position of a candidate tile relative to an already placed tile."""
    ABOVE = "above"
    BELOW = "below"
    LEFT_OF = "left_of"
    RIGHT_OF = "right_of"

    @property
    def opposite(self) -> 'Relationship':
        return _OPPOSITE[self]


_OPPOSITE = {
    Relationship.ABOVE: Relationship.BELOW,
    Relationship.BELOW: Relationship.ABOVE,
    Relationship.LEFT_OF: Relationship.RIGHT_OF,
    Relationship.RIGHT_OF: Relationship.LEFT_OF,
}


@dataclass(frozen=True, eq=False)
class Tile:
    """
    A square puzzle piece.

    Edges are stored unrotated and read in canonical direction: top and
    bottom left to right, left and right top to bottom. `content` is the
    interior with the one-cell border trimmed.
    """
    id: TileID
    size: int
    top: EdgePattern
    left: EdgePattern
    right: EdgePattern
    bottom: EdgePattern
    content: Grid

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (f"Tile(id={self.id}, top={self.top:#05x}, left={self.left:#05x}, "
                f"right={self.right:#05x}, bottom={self.bottom:#05x})")

    def edge(self, side: str, orientation: 'Orientation') -> EdgePattern:
        """Edge shown on `side` ('top', 'bottom', 'left', 'right') under orientation."""
        return orientation.edge_of(self, side)

    def top_edge(self, orientation: 'Orientation') -> EdgePattern:
        return orientation.edge_of(self, 'top')

    def bottom_edge(self, orientation: 'Orientation') -> EdgePattern:
        return orientation.edge_of(self, 'bottom')

    def left_edge(self, orientation: 'Orientation') -> EdgePattern:
        return orientation.edge_of(self, 'left')

    def right_edge(self, orientation: 'Orientation') -> EdgePattern:
        return orientation.edge_of(self, 'right')


class OrientedTile(NamedTuple):
    """A tile id paired with the orientation it would be placed in."""
    tile_id: TileID
    orientation: 'Orientation'

    def sort_key(self):
        return (self.tile_id, self.orientation.value)


# =============================================================================
# Type Utilities
# =============================================================================

def G(rows) -> Grid:
    """Helper to build a cell grid from text rows ('#', '.', 'O', ' ')."""
    if isinstance(rows, str):
        rows = rows.split('\n')
    try:
        return np.array([[CHAR_CELLS[ch] for ch in row] for row in rows], dtype=int)
    except KeyError as exc:
        raise ValueError(f"Unknown cell character {exc.args[0]!r}") from None


def render_grid(g: Grid) -> List[str]:
    """Render a cell grid back to text rows."""
    return [''.join(CELL_CHARS[int(v)] for v in row) for row in g]


def assert_grid(g: Grid):
    """Validate that g is a proper cell Grid."""
    assert isinstance(g, np.ndarray) and g.ndim == 2 and np.issubdtype(g.dtype, np.integer), \
        "Grid must be 2D int ndarray."
