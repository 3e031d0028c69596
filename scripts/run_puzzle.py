#!/usr/bin/env python3
"""
Arrange a tile puzzle and report both answers.

Produces:
- the corner-tile product and the water roughness on stdout
- receipts.jsonl (for debugging and analysis)

Usage:
    python scripts/run_puzzle.py --input=data/example.txt
    python scripts/run_puzzle.py --input=data/input.txt --output=runs/day20 --no-backjump
"""

import sys
import argparse
from pathlib import Path
from datetime import datetime

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from tile_mosaic import load_tiles, solve_puzzle, log_receipt, puzzle_sha, UnsolvableError


def run_puzzle(input_path: str, output_dir: str, backjump: bool = True, verbose: bool = True) -> bool:
    """
    Solve one puzzle file and append its receipt.

    Args:
        input_path: Path to the tile records
        output_dir: Output directory for receipts
        backjump: Use conflict-directed backjumping (False = exhaustive backtracking)
        verbose: Print progress messages

    Returns:
        True if the puzzle was solved
    """
    tiles = load_tiles(input_path)
    name = Path(input_path).stem

    if verbose:
        print("=" * 70)
        print("Tile Mosaic Solver")
        print(f"Input: {input_path}")
        print(f"Tiles: {len(tiles)}")
        print(f"Backjumping: {'on' if backjump else 'off'}")
        print("=" * 70)

    try:
        result = solve_puzzle(tiles, name=name, backjump=backjump)
    except UnsolvableError as exc:
        log_receipt({
            "puzzle": name,
            "status": "failed",
            "reason": str(exc),
            "hashes": {"puzzle_sha": puzzle_sha(tiles)},
        }, out_dir=output_dir)
        print(f"FAILED: {exc}")
        return False

    receipt_path = log_receipt(result.receipt(tiles), out_dir=output_dir)

    if verbose:
        print(result.arrangement.render())
        print("-" * 70)
        print(f"Search: {result.stats.as_dict()} in {result.timing_ms['search']} ms")
        orientation = result.monster_orientation.name if result.monster_orientation else "none"
        print(f"Monsters: {result.monsters} (orientation {orientation})")
        print(f"Receipts: {receipt_path}")
        print("=" * 70)

    print(f"corner product {result.corner_product}")
    print(f"water roughness {result.roughness}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Arrange edge-matching tiles and find sea monsters")
    parser.add_argument(
        "--input",
        type=str,
        default="data/example.txt",
        help="Path to tile records"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory (default: runs/YYYY-MM-DD)"
    )
    parser.add_argument(
        "--no-backjump",
        action="store_true",
        help="Use plain exhaustive backtracking"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress messages"
    )

    args = parser.parse_args()

    # Default output directory
    if args.output is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        output_dir = f"runs/{date_str}"
    else:
        output_dir = args.output

    solved = run_puzzle(args.input, output_dir, backjump=not args.no_backjump, verbose=not args.quiet)

    # Exit code: 0 if solved, 1 otherwise
    sys.exit(0 if solved else 1)


if __name__ == "__main__":
    main()
