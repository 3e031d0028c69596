"""
Assembled image and sea-monster search.

An Image owns its cell grid and carries an orientation that acts as a lens:
every read and write goes through the orientation's coordinate transform (or
the equivalent numpy view), so re-orienting never copies the grid and marks
made under one orientation land on the shared storage.
"""

import numpy as np
from typing import Iterable, Optional, Tuple

from .core.types import Grid, Pos, EMPTY, FILLED, MONSTER, G, render_grid, assert_grid
from .core.orientation import Orientation

SEA_MONSTER_TEXT = (
    "                  # \n"
    "#    ##    ##    ###\n"
    " #  #  #  #  #  #   "
)


class Image:
    """2D cell grid viewed through an orientation; mutable in place."""

    def __init__(self, grid: Grid, orientation: Orientation = Orientation.R0):
        assert_grid(grid)
        self.grid = grid
        self.orientation = orientation

    @classmethod
    def from_str(cls, text: str) -> 'Image':
        """Build an image from text rows; '#' filled, '.' or ' ' empty."""
        return cls(G(text.strip('\n').split('\n')))

    @property
    def width(self) -> int:
        return self.orientation.dims(self.grid.shape[1], self.grid.shape[0])[0]

    @property
    def height(self) -> int:
        return self.orientation.dims(self.grid.shape[1], self.grid.shape[0])[1]

    def _storage(self, pos: Pos) -> Tuple[int, int]:
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            raise IndexError(f"{pos} outside {self.width}x{self.height} image")
        return self.orientation.transform(pos.x, pos.y, self.grid.shape[1], self.grid.shape[0])

    def get(self, pos: Pos) -> int:
        sx, sy = self._storage(pos)
        return int(self.grid[sy, sx])

    def set(self, pos: Pos, cell: int):
        sx, sy = self._storage(pos)
        self.grid[sy, sx] = cell

    def positions(self) -> Iterable[Pos]:
        for y in range(self.height):
            for x in range(self.width):
                yield Pos(x, y)

    def view(self) -> Grid:
        """numpy view of the grid under the current orientation."""
        return self.orientation.apply(self.grid)

    def count(self, cell: int = FILLED) -> int:
        return int((self.grid == cell).sum())

    def render(self) -> str:
        return '\n'.join(render_grid(self.view()))

    def __repr__(self) -> str:
        return f"Image({self.orientation.name}, {self.width}x{self.height})\n{self.render()}"

    # -------------------------------------------------------------------------
    # Monster search
    # -------------------------------------------------------------------------

    def has_monster_at(self, origin: Pos, monster: 'Image') -> bool:
        """Every filled monster cell lies over a marked (non-empty) image cell."""
        mask = monster.view() == FILLED
        h, w = mask.shape
        window = self.view()[origin.y:origin.y + h, origin.x:origin.x + w]
        return bool(np.all(window[mask] != EMPTY))

    def overwrite_monster(self, origin: Pos, monster: 'Image'):
        mask = monster.view() == FILLED
        h, w = mask.shape
        window = self.view()[origin.y:origin.y + h, origin.x:origin.x + w]
        window[mask] = MONSTER

    def find_monsters(self, monster: 'Image') -> int:
        """
        Mark every occurrence of `monster` at the current orientation.

        Matches may overlap; each is marked independently.

        Returns:
            Number of matches
        """
        count = 0
        for y in range(self.height - monster.height + 1):
            for x in range(self.width - monster.width + 1):
                origin = Pos(x, y)
                if self.has_monster_at(origin, monster):
                    self.overwrite_monster(origin, monster)
                    count += 1
        return count


SEA_MONSTER = Image.from_str(SEA_MONSTER_TEXT)
SEA_MONSTER.grid.flags.writeable = False


def find_monsters(image: Image, monster: Optional[Image] = None) -> Tuple[Optional[Orientation], int, int]:
    """
    Search `image` under each orientation until one holds monsters.

    `monster` defaults to a fresh sea monster at R0.

    Returns:
        (orientation, matches, roughness)
        - orientation: the orientation with matches, or None
        - matches: number of monsters found there
        - roughness: filled cells not covered by any monster
    """
    if monster is None:
        monster = Image.from_str(SEA_MONSTER_TEXT)
    for orientation in Orientation:
        image.orientation = orientation
        matches = image.find_monsters(monster)
        if matches > 0:
            return orientation, matches, image.count(FILLED)
    image.orientation = Orientation.R0
    return None, 0, image.count(FILLED)
