"""
Tile Mosaic - Edge-Matching Tile Arrangement

Reassembles a square mosaic from tiles with bit-pattern edges using a
backtracking search over a precomputed compatibility index, then hunts for
sea monsters in the stitched image.
"""

from .core import (
    Grid, TileID, EdgePattern, EMPTY, FILLED, MONSTER,
    Pos, Relationship, Tile, OrientedTile, G, render_grid,
    EDGE_WIDTH, decode_cells, reverse_edge,
    Orientation, EDGE_TABLE,
)
from .compat import AllowedOrientedTiles
from .arrangement import (
    Arrangement, Placement, Conflict, SearchStats, UnsolvableError,
    arrange_tiles, DEFAULT_BACKJUMP
)
from .image import Image, SEA_MONSTER, find_monsters
from .parser import parse_tiles, parse_tile, tile_from_rows, load_tiles
from .utils import puzzle_sha, arrangement_sha, log_receipt
from .solver import (
    SolveResult, grid_side, corner_product, water_roughness, solve_puzzle
)

__all__ = [
    # Types
    'Grid', 'TileID', 'EdgePattern', 'EMPTY', 'FILLED', 'MONSTER',
    'Pos', 'Relationship', 'Tile', 'OrientedTile', 'G', 'render_grid',
    'EDGE_WIDTH', 'decode_cells', 'reverse_edge',
    'Orientation', 'EDGE_TABLE',

    # Compatibility index
    'AllowedOrientedTiles',

    # Search
    'Arrangement', 'Placement', 'Conflict', 'SearchStats', 'UnsolvableError',
    'arrange_tiles', 'DEFAULT_BACKJUMP',

    # Image
    'Image', 'SEA_MONSTER', 'find_monsters',

    # Parser
    'parse_tiles', 'parse_tile', 'tile_from_rows', 'load_tiles',

    # Utils
    'puzzle_sha', 'arrangement_sha', 'log_receipt',

    # Solver
    'SolveResult', 'grid_side', 'corner_product', 'water_roughness', 'solve_puzzle',
]
