"""Tile Mosaic - Core Types"""

from .types import (
    Grid, TileID, EdgePattern, EMPTY, FILLED, MONSTER,
    Pos, Relationship, Tile, OrientedTile, G, render_grid, assert_grid,
)
from .edges import EDGE_WIDTH, decode_cells, reverse_edge, format_edge
from .orientation import Orientation, EDGE_TABLE, SIDES

__all__ = [
    # Types
    'Grid', 'TileID', 'EdgePattern', 'EMPTY', 'FILLED', 'MONSTER',
    'Pos', 'Relationship', 'Tile', 'OrientedTile', 'G', 'render_grid', 'assert_grid',
    # Edges
    'EDGE_WIDTH', 'decode_cells', 'reverse_edge', 'format_edge',
    # Orientation
    'Orientation', 'EDGE_TABLE', 'SIDES',
]
