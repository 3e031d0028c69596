#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tile Mosaic - Orientations
===========================

The 8 symmetries of a square (4 counter-clockwise rotations, each optionally
reflected). An orientation acts three ways, which must agree with each other:

- on tile edges: which canonical edge, possibly reversed, shows on each side
- on coordinates: logical (oriented) coordinate -> storage coordinate
- on grids: a numpy view of the grid seen under the orientation (no copy)
"""

import numpy as np
from enum import Enum
from typing import Dict, Tuple

from .types import Grid, Tile, EdgePattern
from .edges import reverse_edge

SIDES = ('top', 'bottom', 'left', 'right')


class Orientation(Enum):
    R0 = 0
    R90 = 1
    R180 = 2
    R270 = 3
    R0_FLIP_H = 4
    R0_FLIP_V = 5
    R90_FLIP_H = 6
    R90_FLIP_V = 7

    @property
    def transposed(self) -> bool:
        """True if the orientation swaps width and height."""
        return self in _TRANSPOSED

    @property
    def inverse(self) -> 'Orientation':
        return _INVERSE.get(self, self)

    def dims(self, width: int, height: int) -> Tuple[int, int]:
        """Oriented (width, height) of a grid stored as width x height."""
        return (height, width) if self.transposed else (width, height)

    def edge_of(self, tile: Tile, side: str) -> EdgePattern:
        """Edge of `tile` shown on `side` once this orientation is applied."""
        canonical, reverse = EDGE_TABLE[self][side]
        pattern = getattr(tile, canonical)
        return reverse_edge(pattern, tile.size) if reverse else pattern

    def transform(self, x: int, y: int, width: int, height: int) -> Tuple[int, int]:
        """
        Map logical (x, y) under this orientation to storage (x, y).

        Args:
            x, y: Coordinate in the oriented view
            width, height: Storage dimensions

        Returns:
            (sx, sy) such that view[y][x] == storage[sy][sx]
        """
        w, h = self.dims(width, height)
        rx = w - 1 - x
        ry = h - 1 - y
        if self is Orientation.R0:
            return x, y
        if self is Orientation.R90:
            return ry, x
        if self is Orientation.R180:
            return rx, ry
        if self is Orientation.R270:
            return y, rx
        if self is Orientation.R0_FLIP_H:
            return rx, y
        if self is Orientation.R0_FLIP_V:
            return x, ry
        if self is Orientation.R90_FLIP_H:
            return ry, rx
        return y, x

    def apply(self, g: Grid) -> Grid:
        """View of grid `g` under this orientation; writes go through to `g`."""
        return _VIEWS[self](g)


_TRANSPOSED = frozenset({
    Orientation.R90, Orientation.R270, Orientation.R90_FLIP_H, Orientation.R90_FLIP_V,
})

_INVERSE = {
    Orientation.R90: Orientation.R270,
    Orientation.R270: Orientation.R90,
}

# side -> (canonical edge, reversed?)
EDGE_TABLE: Dict[Orientation, Dict[str, Tuple[str, bool]]] = {
    Orientation.R0: {
        'top': ('top', False), 'bottom': ('bottom', False),
        'left': ('left', False), 'right': ('right', False),
    },
    Orientation.R90: {
        'top': ('right', False), 'bottom': ('left', False),
        'left': ('top', True), 'right': ('bottom', True),
    },
    Orientation.R180: {
        'top': ('bottom', True), 'bottom': ('top', True),
        'left': ('right', True), 'right': ('left', True),
    },
    Orientation.R270: {
        'top': ('left', True), 'bottom': ('right', True),
        'left': ('bottom', False), 'right': ('top', False),
    },
    Orientation.R0_FLIP_H: {
        'top': ('top', True), 'bottom': ('bottom', True),
        'left': ('right', False), 'right': ('left', False),
    },
    Orientation.R0_FLIP_V: {
        'top': ('bottom', False), 'bottom': ('top', False),
        'left': ('left', True), 'right': ('right', True),
    },
    Orientation.R90_FLIP_H: {
        'top': ('right', True), 'bottom': ('left', True),
        'left': ('bottom', True), 'right': ('top', True),
    },
    Orientation.R90_FLIP_V: {
        'top': ('left', False), 'bottom': ('right', False),
        'left': ('top', False), 'right': ('bottom', False),
    },
}

# numpy views; rot90 is counter-clockwise
_VIEWS = {
    Orientation.R0: lambda z: z[:, :],
    Orientation.R90: lambda z: np.rot90(z, k=1),
    Orientation.R180: lambda z: np.rot90(z, k=2),
    Orientation.R270: lambda z: np.rot90(z, k=3),
    Orientation.R0_FLIP_H: np.fliplr,
    Orientation.R0_FLIP_V: np.flipud,
    Orientation.R90_FLIP_H: lambda z: np.fliplr(np.rot90(z, k=1)),
    Orientation.R90_FLIP_V: lambda z: np.flipud(np.rot90(z, k=1)),
}

