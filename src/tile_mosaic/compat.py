"""
Compatibility index for the arrangement search.

For every (tile, orientation, relationship) the index holds the oriented
tiles that may sit in that relationship to the tile, i.e. whose facing edge
equals the tile's edge on that side.
"""

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .core.types import Tile, TileID, OrientedTile, Relationship, EdgePattern
from .core.orientation import Orientation, SIDES

Key = Tuple[TileID, Orientation, Relationship]

# relationship -> (side of the placed tile, facing side of the candidate)
FACING_SIDES = {
    Relationship.ABOVE: ('top', 'bottom'),
    Relationship.BELOW: ('bottom', 'top'),
    Relationship.LEFT_OF: ('left', 'right'),
    Relationship.RIGHT_OF: ('right', 'left'),
}

_EMPTY: FrozenSet[OrientedTile] = frozenset()


class AllowedOrientedTiles:
    """
    Immutable (tile id, orientation, relationship) -> {OrientedTile} mapping.

    Built once per puzzle before any search starts; `get` is total and
    returns an empty set for unknown keys.
    """

    def __init__(self, neighbours: Dict[Key, FrozenSet[OrientedTile]]):
        self._neighbours = dict(neighbours)

    @classmethod
    def build(cls, tiles: Iterable[Tile]) -> 'AllowedOrientedTiles':
        """
        Index all compatible oriented pairs of distinct tiles.

        Oriented edges are bucketed by value, so each lookup only meets
        tiles whose facing edge is already known to match. The result is
        the same as comparing every pair of tiles in every pair of
        orientations on every side.
        """
        tiles = list(tiles)
        # side -> edge value -> oriented tiles showing that edge on that side
        by_edge: Dict[str, Dict[EdgePattern, List[OrientedTile]]] = defaultdict(lambda: defaultdict(list))
        for tile in tiles:
            for orientation in Orientation:
                for side in SIDES:
                    by_edge[side][tile.edge(side, orientation)].append(OrientedTile(tile.id, orientation))

        neighbours: Dict[Key, FrozenSet[OrientedTile]] = {}
        for tile in tiles:
            for orientation in Orientation:
                for rel, (own_side, facing_side) in FACING_SIDES.items():
                    edge = tile.edge(own_side, orientation)
                    neighbours[(tile.id, orientation, rel)] = frozenset(
                        ot for ot in by_edge[facing_side].get(edge, ()) if ot.tile_id != tile.id
                    )
        return cls(neighbours)

    def get(self, tile_id: TileID, orientation: Orientation,
            relationship: Relationship) -> FrozenSet[OrientedTile]:
        return self._neighbours.get((tile_id, orientation, relationship), _EMPTY)

    def __len__(self) -> int:
        return len(self._neighbours)

    def __contains__(self, key: Key) -> bool:
        return key in self._neighbours

    def pair_count(self) -> int:
        """Total number of recorded (tile, neighbour) compatibilities."""
        return sum(len(v) for v in self._neighbours.values())
