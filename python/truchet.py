"""
Truchet tile grid with connected-path labeling.
Two-phase construction: draw orientations -> label paths.

Each tile carries two paths. Every connected run of paths across the grid
(edge-to-edge, or a closed loop) gets one positive integer id. Ids come from
a counter bumped once per trace origin, so they are unique but not
contiguous; callers key colours off the raw values.
https://en.wikipedia.org/wiki/Truchet_tiles
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from geometry import coordinate_delta, next_entry_side, opposite, path_index_for, side_delta
from random_source import RandomSource, SeededRandom
from tile_types import (
    Orientation,
    PathSegment,
    Side,
    TerminationReason,
    Tile,
    TruchetParams,
)

logger = logging.getLogger(__name__)

_ORIENTATIONS = (Orientation.LEFT_DOWN, Orientation.LEFT_UP, Orientation.LEFT_RIGHT)


def random_orientation(rng: RandomSource, allow_cross: bool) -> Orientation:
    """Draw an orientation. LEFT_RIGHT is only a candidate when crosses are allowed."""
    choices = _ORIENTATIONS if allow_cross else _ORIENTATIONS[:2]
    return choices[rng.integer(0, len(choices) - 1)]


# =============================================================================
# Tracing
# =============================================================================


class PathRecord:
    """Working path slots for one tile while labeling runs. None = unassigned."""

    __slots__ = ("orientation", "path")

    def __init__(self, orientation: Orientation) -> None:
        self.orientation = orientation
        self.path: list[int | None] = [None, None]


@dataclass(frozen=True)
class TraceStep:
    """A slot written by a trace."""

    x: int
    y: int
    entry: Side
    slot: int


@dataclass(frozen=True)
class TraceRecord:
    """
    Outcome of one trace origin during labeling.

    path_id is the counter value allocated for the origin; assigned_id is the
    id that ended up in the origin's slot. They differ when the origin was
    already labeled and path_id was abandoned.
    """

    x: int
    y: int
    entry: Side
    path_id: int
    assigned_id: int
    labeled: int  # Slots written by this origin
    termination_reason: TerminationReason

    @property
    def abandoned(self) -> bool:
        return self.labeled == 0

    @property
    def closed_loop(self) -> bool:
        return (
            self.labeled > 0
            and self.termination_reason is TerminationReason.ALREADY_LABELED
        )


class TraceResult:
    """
    Iterator wrapper for trace_path() that tracks why the trace stopped.

    Usage:
        result = trace_path(records, 0, 0, Side.LEFT, path_id=1)
        for step in result:
            print(step)
        print(result.termination_reason, result.path_id)
    """

    def __init__(self, generator: Iterator[TraceStep], path_id: int) -> None:
        self._iterator = generator
        self.path_id = path_id  # Replaced by the existing id on ALREADY_LABELED
        self.termination_reason: TerminationReason | None = None

    def __iter__(self) -> Iterator[TraceStep]:
        return self

    def __next__(self) -> TraceStep:
        return next(self._iterator)


def trace_path(
    records: Sequence[Sequence[PathRecord]],
    x: int,
    y: int,
    entry: Side,
    path_id: int,
    max_steps: int | None = None,
) -> TraceResult:
    """
    Follow a path through the grid, writing path_id into every unassigned slot.

    The trace is lazy: slots are written as steps are consumed.

    Args:
        records: Working tiles indexed [x][y]
        x, y: Starting tile (must be inside the grid)
        entry: Side of the starting tile the path enters through
        path_id: Id to write
        max_steps: Maximum number of slots to write before giving up.
                   Defaults to 2 * width * height, which a path cannot exceed.

    Returns:
        TraceResult yielding a TraceStep per written slot
    """
    width = len(records)
    height = len(records[0]) if records else 0
    if max_steps is None:
        max_steps = 2 * width * height
    result = TraceResult(iter(()), path_id)
    result._iterator = _trace_generator(records, width, height, x, y, entry, max_steps, result)
    return result


def _trace_generator(
    records: Sequence[Sequence[PathRecord]],
    width: int,
    height: int,
    x: int,
    y: int,
    entry: Side,
    max_steps: int,
    result: TraceResult,
) -> Iterator[TraceStep]:
    """Internal generator for trace_path(). Do not call directly."""
    steps = 0
    while steps < max_steps:
        record = records[x][y]
        orientation = record.orientation
        slot = path_index_for(entry, orientation)

        existing = record.path[slot]
        if existing is not None:
            # Traced from the other end already, or a loop closed on itself
            result.path_id = existing
            result.termination_reason = TerminationReason.ALREADY_LABELED
            return

        record.path[slot] = result.path_id
        yield TraceStep(x, y, entry, slot)
        steps += 1

        dx, dy = coordinate_delta(entry, orientation)
        entry = next_entry_side(entry, orientation)
        x += dx
        y += dy

        if x < 0 or x >= width or y < 0 or y >= height:
            result.termination_reason = TerminationReason.EDGE_REACHED
            return

    logger.warning("trace_path: gave up after %d steps at (%d, %d)", max_steps, x, y)
    result.termination_reason = TerminationReason.MAX_STEPS_REACHED


def label_paths(
    records: Sequence[Sequence[PathRecord]],
    max_steps: int | None = None,
) -> list[TraceRecord]:
    """
    Assign a path id to both slots of every tile.

    Every (tile, side) pair is a trace origin, visited x outer, y inner, in
    Side order. Each origin takes the next counter value and traces forward.
    A path first reached in its middle also runs backward out through the
    entry side, so that leg is traced too with the same id. Origins that land
    on a labeled slot abandon their id.

    Returns:
        One TraceRecord per origin, in visiting order
    """
    width = len(records)
    height = len(records[0]) if records else 0
    counter = 0
    log: list[TraceRecord] = []

    for x in range(width):
        for y in range(height):
            for entry in Side:
                counter += 1
                forward = trace_path(records, x, y, entry, counter, max_steps)
                labeled = sum(1 for _ in forward)
                reason = forward.termination_reason
                assert reason is not None

                if labeled and reason is TerminationReason.EDGE_REACHED:
                    dx, dy = side_delta(entry)
                    bx, by = x + dx, y + dy
                    if 0 <= bx < width and 0 <= by < height:
                        backward = trace_path(records, bx, by, opposite(entry), counter, max_steps)
                        labeled += sum(1 for _ in backward)

                log.append(
                    TraceRecord(x, y, entry, counter, forward.path_id, labeled, reason)
                )

    logger.info(
        "label_paths: %dx%d, origins=%d, paths=%d, closed_loops=%d",
        width,
        height,
        len(log),
        sum(1 for r in log if not r.abandoned),
        sum(1 for r in log if r.closed_loop),
    )
    return log


# =============================================================================
# Grid
# =============================================================================


class TruchetGrid:
    """
    A fully labeled grid of Truchet tiles, indexed tiles[x][y].

    Orientation drawing and path labeling both happen in the constructor;
    the grid never changes afterwards.
    """

    def __init__(
        self,
        params: TruchetParams = TruchetParams(),
        rng: RandomSource | None = None,
    ) -> None:
        if rng is None:
            rng = SeededRandom("truchet tiles")

        width, height = params.width, params.height
        if width <= 0 or height <= 0:
            width = height = 0

        columns = [
            [random_orientation(rng, params.allow_cross) for _y in range(height)]
            for _x in range(width)
        ]
        self._build(columns, params.allow_cross)

    @classmethod
    def from_orientations(
        cls,
        columns: Sequence[Sequence[Orientation]],
        allow_cross: bool | None = None,
    ) -> TruchetGrid:
        """
        Build a grid from explicit orientations indexed [x][y].

        allow_cross defaults to whether any LEFT_RIGHT tile is present.
        """
        heights = {len(column) for column in columns}
        if len(heights) > 1:
            raise ValueError(
                f"Inconsistent column heights: {sorted(heights)}\n"
                f"  Orientations are indexed [x][y]; every column needs the same length"
            )
        present_cross = any(o is Orientation.LEFT_RIGHT for column in columns for o in column)
        if allow_cross is None:
            allow_cross = present_cross
        elif present_cross and not allow_cross:
            raise ValueError("LEFT_RIGHT tiles given with allow_cross=False")

        grid = cls.__new__(cls)
        if not columns or not columns[0]:
            columns = []
        grid._build([list(column) for column in columns], allow_cross)
        return grid

    def _build(self, columns: list[list[Orientation]], allow_cross: bool) -> None:
        self.width = len(columns)
        self.height = len(columns[0]) if columns else 0
        self.allow_cross = allow_cross

        records = [[PathRecord(o) for o in column] for column in columns]
        self.traces: tuple[TraceRecord, ...] = tuple(label_paths(records))

        tiles: list[tuple[Tile, ...]] = []
        for x, column in enumerate(records):
            row: list[Tile] = []
            for y, record in enumerate(column):
                first, second = record.path
                assert first is not None and second is not None, f"unlabeled tile at ({x}, {y})"
                row.append(Tile(x, y, record.orientation, (first, second)))
            tiles.append(tuple(row))
        self.tiles: tuple[tuple[Tile, ...], ...] = tuple(tiles)

    def __iter__(self) -> Iterator[Tile]:
        """Tiles column by column."""
        for column in self.tiles:
            yield from column

    def __repr__(self) -> str:
        return (
            f"TruchetGrid(width={self.width}, height={self.height}, "
            f"allow_cross={self.allow_cross}, paths={len(self.path_ids())})"
        )

    def tile(self, x: int, y: int) -> Tile:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise IndexError(f"Tile ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.tiles[x][y]

    def path_of(self, x: int, y: int, side: Side) -> int:
        """Id of the path touching `side` of tile (x, y)."""
        tile = self.tile(x, y)
        return tile.path[path_index_for(side, tile.orientation)]

    def path_ids(self) -> list[int]:
        """All distinct path ids, ascending."""
        return sorted({pid for tile in self for pid in tile.path})

    def paths(self) -> dict[int, tuple[PathSegment, ...]]:
        """
        Segments grouped by path id.

        Keys are in order of first appearance (x outer, y inner); segments
        within a path are unordered.
        """
        grouped: dict[int, list[PathSegment]] = {}
        for tile in self:
            for slot, pid in enumerate(tile.path):
                grouped.setdefault(pid, []).append(PathSegment(tile.x, tile.y, slot))
        return {pid: tuple(segments) for pid, segments in grouped.items()}

    def closed_paths(self) -> list[int]:
        """Ids of paths that form loops entirely inside the grid."""
        closed = {r.assigned_id for r in self.traces if r.closed_loop}
        return sorted(closed)
