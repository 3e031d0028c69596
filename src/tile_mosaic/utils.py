"""
Utility functions for Tile Mosaic: hashes and receipt logging.
"""

import json
import hashlib
from pathlib import Path
from datetime import datetime
from typing import Dict, List

from .core.types import Tile


# ==============================================================================
# Hash functions for receipts
# ==============================================================================

def puzzle_sha(tiles: List[Tile]) -> str:
    """
    Compute SHA-256 hash of a tile set, independent of input order.

    Args:
        tiles: Parsed tiles

    Returns:
        Hex string of SHA-256 hash
    """
    payload = [
        {"id": t.id, "edges": [t.top, t.left, t.right, t.bottom], "content": t.content.tolist()}
        for t in sorted(tiles, key=lambda t: t.id)
    ]
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()


def arrangement_sha(arrangement) -> str:
    """
    Compute SHA-256 hash of a (complete or partial) arrangement.

    Empty slots hash as null.
    """
    payload = []
    for pos in arrangement.positions():
        placed = arrangement.tile_at(pos)
        payload.append(None if placed is None else [placed.tile.id, placed.orientation.name])
    return hashlib.sha256(json.dumps(payload).encode()).hexdigest()


# ==============================================================================
# Receipt logging
# ==============================================================================

def log_receipt(record: Dict, out_dir: str = None) -> Path:
    """
    Append receipt record to a JSONL file.

    Args:
        record: Dictionary with receipt data
        out_dir: Output directory (default: runs/YYYY-MM-DD)

    Returns:
        Path of the receipts file
    """
    if out_dir is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        out_dir = f"runs/{date_str}"

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    receipt_path = Path(out_dir) / "receipts.jsonl"

    with open(receipt_path, "a") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")
    return receipt_path
