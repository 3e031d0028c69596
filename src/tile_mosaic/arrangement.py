"""
Arrangement grid and backtracking search for Tile Mosaic.

The search fills the grid outwards from an anchor tile at the origin. Each
step picks a frontier slot, intersects the compatibility sets of its placed
neighbours, and tries the surviving oriented tiles depth-first. A failed
branch reports which tile it blames; with backjumping enabled a frame whose
own tile is not the blamed one returns at once instead of trying its other
candidates.
"""

import sys
import numpy as np
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Set, Union

from .core.types import Tile, TileID, OrientedTile, Pos, Relationship
from .core.orientation import Orientation
from .compat import AllowedOrientedTiles
from .image import Image

DEFAULT_BACKJUMP = True


class Placement(NamedTuple):
    tile: Tile
    orientation: Orientation


@dataclass(frozen=True)
class Conflict:
    """
    A failed search branch.

    `blamed` is the id of the placed tile held responsible, or None when a
    slot simply ran out of candidates.
    """
    blamed: Optional[TileID]


class UnsolvableError(RuntimeError):
    """No anchor leads to a complete arrangement of the given tiles."""


@dataclass
class SearchStats:
    """Counters accumulated over every anchor attempt."""
    anchors: int = 0
    placements: int = 0
    removals: int = 0
    conflicts: int = 0
    backjumps: int = 0

    def merge(self, counters: Dict[str, int]):
        for k, v in counters.items():
            setattr(self, k, getattr(self, k) + v)

    def as_dict(self) -> Dict[str, int]:
        return {
            "anchors": self.anchors,
            "placements": self.placements,
            "removals": self.removals,
            "conflicts": self.conflicts,
            "backjumps": self.backjumps,
        }


# Position of the slot being filled relative to a placed neighbour in each
# direction: a tile to our left sees us RIGHT_OF it, and so on.
_NEIGHBOUR_RELATIONS = (
    (Pos.left, Relationship.RIGHT_OF),
    (Pos.up, Relationship.BELOW),
    (Pos.right, Relationship.LEFT_OF),
    (Pos.down, Relationship.ABOVE),
)


class Arrangement:
    """Fixed-size grid of tile slots, the pool of unplaced tiles, and the frontier."""

    def __init__(self, width: int, height: int, tiles: Iterable[Tile]):
        self.width = width
        self.height = height
        self.slots: List[List[Optional[Placement]]] = [[None] * width for _ in range(height)]
        self.available: Dict[TileID, Tile] = {t.id: t for t in tiles}
        self.frontier: Set[Pos] = set()
        self.stats = {"placements": 0, "removals": 0, "conflicts": 0, "backjumps": 0}

    # -------------------------------------------------------------------------
    # Slot access
    # -------------------------------------------------------------------------

    def valid(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile_at(self, pos: Pos) -> Optional[Placement]:
        if not self.valid(pos):
            return None
        return self.slots[pos.y][pos.x]

    def tile_id_at(self, pos: Pos) -> Optional[TileID]:
        placed = self.tile_at(pos)
        return placed.tile.id if placed is not None else None

    def positions(self) -> Iterable[Pos]:
        for y in range(self.height):
            for x in range(self.width):
                yield Pos(x, y)

    def corners(self) -> List[Pos]:
        w, h = self.width - 1, self.height - 1
        return [Pos(0, 0), Pos(w, 0), Pos(0, h), Pos(w, h)]

    def is_complete(self) -> bool:
        return not self.available and all(self.tile_at(p) is not None for p in self.positions())

    def _has_placed_neighbour(self, pos: Pos) -> bool:
        return any(self.tile_at(n) is not None for n in pos.neighbours())

    # -------------------------------------------------------------------------
    # Place / remove (exact undo pair)
    # -------------------------------------------------------------------------

    def place(self, pos: Pos, orientation: Orientation, tile_id: TileID):
        if tile_id not in self.available:
            raise ValueError(f"Tile {tile_id} is not available for placement")
        if not self.valid(pos):
            raise ValueError(f"Position {pos} is outside the {self.width}x{self.height} grid")
        if self.slots[pos.y][pos.x] is not None:
            raise ValueError(f"Position {pos} is already occupied")

        tile = self.available.pop(tile_id)
        self.slots[pos.y][pos.x] = Placement(tile, orientation)
        self.frontier.discard(pos)
        for n in pos.neighbours():
            if self.valid(n) and self.slots[n.y][n.x] is None:
                self.frontier.add(n)
        self.stats["placements"] += 1

    def remove(self, pos: Pos):
        placed = self.tile_at(pos)
        if placed is None:
            raise ValueError(f"No tile placed at {pos}")

        self.slots[pos.y][pos.x] = None
        self.available[placed.tile.id] = placed.tile
        # Neighbours that were only on the frontier because of this tile leave it
        for n in pos.neighbours():
            if n in self.frontier and not self._has_placed_neighbour(n):
                self.frontier.discard(n)
        if self._has_placed_neighbour(pos):
            self.frontier.add(pos)
        self.stats["removals"] += 1

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def possible_orientations(self, pos: Pos,
                              allowed: AllowedOrientedTiles) -> Union[Set[OrientedTile], Conflict]:
        """
        Oriented tiles that fit at `pos` next to every placed neighbour.

        Returns a Conflict blaming the neighbour whose constraint emptied the
        candidate set.
        """
        possible: Optional[Set[OrientedTile]] = None
        for step, rel in _NEIGHBOUR_RELATIONS:
            placed = self.tile_at(step(pos))
            if placed is None:
                continue
            fits = allowed.get(placed.tile.id, placed.orientation, rel)
            possible = set(fits) if possible is None else possible & fits
            if not possible:
                return Conflict(placed.tile.id)

        if possible is None:
            raise RuntimeError(f"Tried to fill {pos}, which has no placed neighbours")
        return possible

    def next_position(self) -> Optional[Pos]:
        """Top-most, then left-most frontier slot."""
        if not self.frontier:
            return None
        return min(self.frontier, key=lambda p: (p.y, p.x))

    def try_arrange(self, allowed: AllowedOrientedTiles,
                    backjump: bool = DEFAULT_BACKJUMP) -> Optional[Conflict]:
        """
        Fill the rest of the grid depth-first.

        Returns None once every slot is filled, otherwise the Conflict that
        ended this branch. On failure the arrangement is left exactly as it
        was on entry.
        """
        pos = self.next_position()
        if pos is None:
            return None

        candidates = self.possible_orientations(pos, allowed)
        if isinstance(candidates, Conflict):
            self.stats["conflicts"] += 1
            return candidates

        for cand in sorted(candidates, key=OrientedTile.sort_key):
            if cand.tile_id not in self.available:
                continue
            self.place(pos, cand.orientation, cand.tile_id)
            failure = self.try_arrange(allowed, backjump)
            if failure is None:
                return None
            self.remove(pos)
            if backjump and failure.blamed != cand.tile_id:
                # The conflict was caused further up; skip our other candidates
                self.stats["backjumps"] += 1
                return failure

        return Conflict(None)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def image(self) -> Image:
        """Stitch the oriented tile interiors into one grid, row-major."""
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                placed = self.slots[y][x]
                if placed is None:
                    raise RuntimeError("Can't build an image until every tile is arranged")
                row.append(placed.orientation.apply(placed.tile.content))
            rows.append(np.hstack(row))
        return Image(np.array(np.vstack(rows), dtype=int))

    def render(self) -> str:
        lines = []
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                tid = self.tile_id_at(Pos(x, y))
                cells.append("----" if tid is None else f"{tid:4}")
            lines.append(' '.join(cells))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Arrangement({self.width}x{self.height}, {len(self.available)} unplaced)\n{self.render()}"


def arrange_tiles(width: int, height: int, tiles: List[Tile],
                  backjump: bool = DEFAULT_BACKJUMP,
                  stats: Optional[SearchStats] = None) -> Optional[Arrangement]:
    """
    Find an arrangement of `tiles` filling a width x height grid.

    Every tile in every orientation is tried as the anchor at the origin;
    the first anchor whose search succeeds wins.

    Returns:
        The completed Arrangement, or None if no anchor leads to a solution
    """
    if width * height != len(tiles):
        raise ValueError(f"{len(tiles)} tiles cannot fill a {width}x{height} grid")

    allowed = AllowedOrientedTiles.build(tiles)

    # Each filled slot costs one frame
    needed = width * height + 100
    old_limit = sys.getrecursionlimit()
    if old_limit < needed:
        sys.setrecursionlimit(needed)

    try:
        for tile in tiles:
            for orientation in Orientation:
                arrangement = Arrangement(width, height, tiles)
                arrangement.place(Pos(0, 0), orientation, tile.id)
                failure = arrangement.try_arrange(allowed, backjump)
                if stats is not None:
                    stats.anchors += 1
                    stats.merge(arrangement.stats)
                if failure is None:
                    return arrangement
        return None
    finally:
        if old_limit < needed:
            sys.setrecursionlimit(old_limit)
