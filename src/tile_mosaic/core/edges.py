#!/usr/bin/env python3
"""Tile Mosaic - Edge Patterns"""

from typing import Iterable

from .types import EdgePattern, FILLED

# Standard tiles are 10x10, so edges carry 10 bits.
EDGE_WIDTH = 10


def decode_cells(cells: Iterable[int]) -> EdgePattern:
    """Fold a run of cells into an edge pattern, first cell most significant."""
    pattern = 0
    for cell in cells:
        pattern = (pattern << 1) | (1 if int(cell) == FILLED else 0)
    return pattern


def reverse_edge(pattern: EdgePattern, width: int = EDGE_WIDTH) -> EdgePattern:
    """
    Reverse the bit order of a `width`-bit edge pattern.

    This is the same edge read from the other end, e.g. after a tile is
    flipped. Reversing twice returns the original pattern.
    """
    if pattern < 0 or pattern >> width:
        raise ValueError(f"Edge pattern {pattern:#x} does not fit in {width} bits")
    rev = 0
    for bit in range(width):
        if pattern & (1 << bit):
            rev |= 1 << (width - 1 - bit)
    return rev


def format_edge(pattern: EdgePattern, width: int = EDGE_WIDTH) -> str:
    """Render an edge pattern as '#'/'.' cells."""
    return ''.join('#' if pattern & (1 << (width - 1 - i)) else '.' for i in range(width))
