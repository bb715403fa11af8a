"""
ASCII rendering for Truchet grids.

Provides two views of a labeled grid:
1. Tile view - one glyph per tile, coloured by the tile's left-hand path
2. Path id view - both path ids of every tile, laid out as the grid
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from tile_types import Orientation, TilePosition
from truchet import TruchetGrid

logger = logging.getLogger(__name__)

Colorizer = Callable[[str], str]

# Screen y grows downwards, so Left-Bottom and Top-Right arcs both lean like "\"
TILE_GLYPHS: dict[Orientation, str] = {
    Orientation.LEFT_DOWN: "╲",
    Orientation.LEFT_UP: "╱",
    Orientation.LEFT_RIGHT: "┼",
}

PALETTE: list[Colorizer] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def path_color(path_id: int) -> Colorizer:
    """Colour for a path. Keyed off the raw id, so ids must never be compacted."""
    return PALETTE[path_id % len(PALETTE)]


def _no_color(s: str) -> str:
    return s


def _boxed(lines: list[str], inner_width: int, title: str) -> list[str]:
    """Wrap lines in a border with a centred title."""
    title = f" {title} "
    if len(title) <= inner_width:
        left = (inner_width - len(title)) // 2
        top = "┌" + "─" * left + title + "─" * (inner_width - left - len(title)) + "┐"
    else:
        top = "┌" + "─" * inner_width + "┐"
    return [top] + ["│" + line + "│" for line in lines] + ["└" + "─" * inner_width + "┘"]


# =============================================================================
# Tile View
# =============================================================================


def render_tiles(
    grid: TruchetGrid,
    cell_width: int = 2,
    color: bool = True,
    highlight_pos: TilePosition | None = None,
) -> str:
    """
    Render a grid as one glyph per tile.

    Args:
        grid: The labeled grid to render
        cell_width: Characters per tile (default 2, which keeps tiles roughly square)
        color: Colour each glyph by the id of its slot-0 path
        highlight_pos: Optional tile to highlight

    Returns:
        Rendered string, with ANSI colour codes when color is True
    """
    if grid.width == 0:
        return "(empty grid)"

    lines: list[str] = []
    for y in range(grid.height):
        parts: list[str] = []
        for x in range(grid.width):
            tile = grid.tiles[x][y]
            content = TILE_GLYPHS[tile.orientation] * cell_width

            if highlight_pos is not None and (highlight_pos.x, highlight_pos.y) == (x, y):
                content = chalk.bgWhite.black(content)
            elif color:
                content = path_color(tile.path[0])(content)
            parts.append(content)
        lines.append("".join(parts))

    title = f"{grid.width}x{grid.height}"
    return "\n".join(_boxed(lines, grid.width * cell_width, title))


# =============================================================================
# Path Id View
# =============================================================================


def render_path_ids(
    grid: TruchetGrid,
    color: bool = True,
    highlight_path: int | None = None,
) -> str:
    """
    Render both path ids of every tile as "first/second".

    Cells are padded to the widest label so columns line up.
    """
    if grid.width == 0:
        return "(empty grid)"

    labels = {(t.x, t.y): f"{t.path[0]}/{t.path[1]}" for t in grid}
    cell_width = max(len(label) for label in labels.values()) + 2
    logger.debug("render_path_ids: cell_width=%d", cell_width)

    def paint(path_id: int) -> Colorizer:
        if highlight_path is not None and path_id == highlight_path:
            return chalk.bgWhite.black
        return path_color(path_id) if color else _no_color

    lines: list[str] = []
    for y in range(grid.height):
        parts: list[str] = []
        for x in range(grid.width):
            first, second = grid.tiles[x][y].path
            padding = cell_width - len(labels[(x, y)])
            left_pad = padding // 2
            parts.append(
                " " * left_pad
                + paint(first)(str(first))
                + "/"
                + paint(second)(str(second))
                + " " * (padding - left_pad)
            )
        lines.append("".join(parts))

    return "\n".join(_boxed(lines, grid.width * cell_width, "path ids"))


def summarize(grid: TruchetGrid) -> str:
    """One-line description of a grid's paths."""
    paths = grid.paths()
    loops = grid.closed_paths()
    longest = max((len(segments) for segments in paths.values()), default=0)
    return (
        f"{grid.width}x{grid.height} tiles, {len(paths)} paths "
        f"({len(loops)} closed), longest spans {longest} segments"
    )
