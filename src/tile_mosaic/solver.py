#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tile Mosaic - Main Solver Harness"""

import math
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .core.types import Tile
from .core.orientation import Orientation
from .arrangement import Arrangement, SearchStats, UnsolvableError, arrange_tiles, DEFAULT_BACKJUMP
from .image import Image, find_monsters
from .utils import puzzle_sha, arrangement_sha


@dataclass
class SolveResult:
    """Result of solving a tile puzzle."""
    name: str
    arrangement: Arrangement
    corner_product: int
    monster_orientation: Optional[Orientation]
    monsters: int
    roughness: int
    stats: SearchStats = field(default_factory=SearchStats)
    timing_ms: Dict[str, int] = field(default_factory=dict)

    def receipt(self, tiles: List[Tile]) -> Dict:
        """JSON-serialisable record for `log_receipt`."""
        return {
            "puzzle": self.name,
            "status": "solved",
            "grid": [self.arrangement.width, self.arrangement.height],
            "corner_product": self.corner_product,
            "monsters": self.monsters,
            "monster_orientation": self.monster_orientation.name if self.monster_orientation else None,
            "roughness": self.roughness,
            "search": self.stats.as_dict(),
            "timing_ms": self.timing_ms,
            "hashes": {
                "puzzle_sha": puzzle_sha(tiles),
                "arrangement_sha": arrangement_sha(self.arrangement),
            },
        }


def grid_side(n_tiles: int) -> int:
    """Side of the square grid holding `n_tiles` tiles."""
    side = math.isqrt(n_tiles)
    if side * side != n_tiles or side == 0:
        raise ValueError(f"{n_tiles} tiles do not form a square grid")
    return side


def corner_product(arrangement: Arrangement) -> int:
    """Product of the ids of the four corner tiles."""
    product = 1
    for pos in arrangement.corners():
        tid = arrangement.tile_id_at(pos)
        if tid is None:
            raise RuntimeError(f"Corner {pos} is empty")
        product *= tid
    return product


def water_roughness(arrangement: Arrangement, monster: Optional[Image] = None) -> int:
    """Filled image cells left over once every monster is marked."""
    _, _, roughness = find_monsters(arrangement.image(), monster)
    return roughness


def solve_puzzle(tiles: List[Tile], name: str = "puzzle",
                 backjump: bool = DEFAULT_BACKJUMP) -> SolveResult:
    """
    Arrange `tiles` into a square and run the monster search on the image.

    Raises:
        UnsolvableError: if no arrangement exists
    """
    t_start = time.time()
    side = grid_side(len(tiles))
    stats = SearchStats()

    t_search_start = time.time()
    arrangement = arrange_tiles(side, side, tiles, backjump=backjump, stats=stats)
    t_search_end = time.time()
    if arrangement is None:
        raise UnsolvableError(f"[{name}] no arrangement of {len(tiles)} tiles exists")

    image = arrangement.image()
    orientation, monsters, roughness = find_monsters(image)
    t_end = time.time()

    timing_ms = {
        "search": int((t_search_end - t_search_start) * 1000),
        "total": int((t_end - t_start) * 1000),
    }
    return SolveResult(
        name=name,
        arrangement=arrangement,
        corner_product=corner_product(arrangement),
        monster_orientation=orientation,
        monsters=monsters,
        roughness=roughness,
        stats=stats,
        timing_ms=timing_ms,
    )
