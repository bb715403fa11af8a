"""
Demonstration scripts for the Truchet grid generator.
"""

import logging
import sys

from ascii_render import render_path_ids, render_tiles, summarize
from random_source import SeededRandom
from tile_types import Orientation, Side, TruchetParams
from truchet import TruchetGrid

PRESETS: dict[str, TruchetParams] = {
    "small": TruchetParams(width=6, height=4),
    "default": TruchetParams(),
    "crossing": TruchetParams(width=16, height=8, allow_cross=True),
    "wide": TruchetParams(width=36, height=12),
}


def demo(params: TruchetParams, seed: str) -> None:
    """Build one grid and print both views."""
    grid = TruchetGrid(params, SeededRandom(seed))
    print(f"seed={seed!r} allow_cross={params.allow_cross}")
    print(render_tiles(grid))
    print(summarize(grid))
    print()
    if grid.width <= 8:
        print(render_path_ids(grid))
        print()


def loop_demo() -> None:
    """A 2x2 grid whose inner arcs close into one loop."""
    LD, LU = Orientation.LEFT_DOWN, Orientation.LEFT_UP
    grid = TruchetGrid.from_orientations([[LU, LD], [LD, LU]])

    (loop_id,) = grid.closed_paths()
    print("Closed loop demo")
    print(render_path_ids(grid, highlight_path=loop_id))
    print(f"loop id {loop_id} touches:")
    for segment in grid.paths()[loop_id]:
        print(f"  tile ({segment.x}, {segment.y}) slot {segment.slot}")
    print(f"right side of (0, 0) belongs to path {grid.path_of(0, 0, Side.RIGHT)}")
    print()


def trace_log_demo() -> None:
    """Show which trace origins found new paths and which abandoned their id."""
    grid = TruchetGrid(PRESETS["small"], SeededRandom("trace log"))
    print("Trace log (first column)")
    for record in grid.traces:
        if record.x > 0:
            break
        outcome = (
            f"abandoned {record.path_id}, slot holds {record.assigned_id}"
            if record.abandoned
            else f"labeled {record.labeled} segments with {record.path_id}"
            f" ({record.termination_reason.value})"
        )
        print(f"  ({record.x}, {record.y}) {record.entry.name:<6} {outcome}")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    preset = sys.argv[1] if len(sys.argv) > 1 else "small"
    seed = sys.argv[2] if len(sys.argv) > 2 else "truchet tiles"
    if preset not in PRESETS:
        print(f"Unknown preset {preset!r}; choose from {', '.join(PRESETS)}")
        sys.exit(1)

    demo(PRESETS[preset], seed)
    loop_demo()
    trace_log_demo()
