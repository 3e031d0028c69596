"""
Edge pattern tests: decoding, bit reversal, formatting.
"""

import sys
import os

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tile_mosaic.core.edges import EDGE_WIDTH, decode_cells, reverse_edge, format_edge
from tile_mosaic.core.types import G


def test_reverse_is_involution():
    """Reversing any 10-bit pattern twice returns it."""
    for pattern in range(1 << EDGE_WIDTH):
        assert reverse_edge(reverse_edge(pattern)) == pattern, f"Involution broken for {pattern:#x}"


def test_reverse_known_values():
    """Single bits swap ends; palindromes are fixed points."""
    assert reverse_edge(0b0000000001) == 0b1000000000
    assert reverse_edge(0x2F9) == 0x27D
    assert reverse_edge(0x077) == 0x3B8
    assert reverse_edge(0b1000000001) == 0b1000000001
    assert reverse_edge(0b110, width=3) == 0b011


def test_reverse_rejects_wide_patterns():
    """Patterns with bits above the width are programming errors."""
    with pytest.raises(ValueError):
        reverse_edge(1 << EDGE_WIDTH)
    with pytest.raises(ValueError):
        reverse_edge(-1)


def test_decode_cells():
    """First cell is the most significant bit."""
    row = G(["..##.#..#."])[0]
    assert decode_cells(row) == 0x0D2
    assert decode_cells([]) == 0
    assert format_edge(0x0D2) == "..##.#..#."
