"""
Parser for tile records.

Input is a sequence of records separated by blank lines:

    Tile 2311:
    ..##.#..#.
    ##..#.....
    ...

Each record becomes a Tile with its four canonical edges decoded and its
border trimmed from the content.
"""

import re
import numpy as np
from pathlib import Path
from typing import List, Sequence

from .core.types import Tile, TileID, Grid, G
from .core.edges import decode_cells

_HEADER_RE = re.compile(r"^Tile\s+(\d+):$")
_ROW_RE = re.compile(r"^[#.]+$")


def trim_edges(g: Grid) -> Grid:
    """Drop the one-cell border of a tile grid."""
    return g[1:-1, 1:-1]


def tile_from_grid(tile_id: TileID, g: Grid) -> Tile:
    """Decode the edges of a full square tile grid."""
    H, W = g.shape
    if H != W or H < 3:
        raise ValueError(f"Tile {tile_id}: expected a square grid of side >= 3, got {H}x{W}")
    content = np.array(trim_edges(g), dtype=int)
    content.setflags(write=False)
    return Tile(
        id=tile_id,
        size=H,
        top=decode_cells(g[0, :]),
        left=decode_cells(g[:, 0]),
        right=decode_cells(g[:, -1]),
        bottom=decode_cells(g[-1, :]),
        content=content,
    )


def tile_from_rows(tile_id: TileID, rows: Sequence[str]) -> Tile:
    """Build a Tile from its text rows."""
    if not rows:
        raise ValueError(f"Tile {tile_id}: no rows")
    for i, row in enumerate(rows):
        if not _ROW_RE.match(row):
            raise ValueError(f"Tile {tile_id}: row {i} has invalid cells: {row!r}")
    if len({len(row) for row in rows}) != 1:
        raise ValueError(f"Tile {tile_id}: rows have differing lengths")
    return tile_from_grid(tile_id, G(rows))


def parse_tile(block: str) -> Tile:
    """Parse a single 'Tile N:' record."""
    lines = [line.strip() for line in block.strip().splitlines()]
    if not lines:
        raise ValueError("Empty tile record")
    m = _HEADER_RE.match(lines[0])
    if m is None:
        raise ValueError(f"Bad tile header: {lines[0]!r}")
    return tile_from_rows(int(m.group(1)), lines[1:])


def parse_tiles(text: str) -> List[Tile]:
    """
    Parse every tile record in `text`.

    Raises:
        ValueError: on malformed records, duplicate ids, or tiles of mixed sizes
    """
    blocks = [b for b in re.split(r"\n\s*\n", text.strip()) if b.strip()]
    tiles = [parse_tile(b) for b in blocks]

    seen = set()
    for t in tiles:
        if t.id in seen:
            raise ValueError(f"Duplicate tile id {t.id}")
        seen.add(t.id)

    sizes = {t.size for t in tiles}
    if len(sizes) > 1:
        raise ValueError(f"Tiles have mixed sizes: {sorted(sizes)}")
    return tiles


def load_tiles(path) -> List[Tile]:
    """Read and parse a tile file."""
    return parse_tiles(Path(path).read_text())
