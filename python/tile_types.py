"""
Shared type definitions for the Truchet tile system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Edge of a square tile, used as a path entry/exit point."""

    LEFT = "L"  # x - 1
    TOP = "T"  # y - 1
    RIGHT = "R"  # x + 1
    BOTTOM = "B"  # y + 1


class Orientation(Enum):
    """
    How a tile's two paths connect its four sides.

    Named after where the path entering from the left goes.
    """

    LEFT_DOWN = "left_down"  # Left-Bottom, Top-Right
    LEFT_UP = "left_up"  # Left-Top, Right-Bottom
    LEFT_RIGHT = "left_right"  # Left-Right, Top-Bottom (crossing)


class TerminationReason(Enum):
    """Reason why a path trace stopped."""

    EDGE_REACHED = "edge_reached"  # Next tile is outside the grid
    ALREADY_LABELED = "already_labeled"  # Slot already carries a path id
    MAX_STEPS_REACHED = "max_steps_reached"  # Hit max_steps limit


# =============================================================================
# Grid Types
# =============================================================================


@dataclass(frozen=True)
class TilePosition:
    """A cell coordinate within a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Tile:
    """A labeled tile. Slot 0 is always the path touching the left side."""

    x: int
    y: int
    orientation: Orientation
    path: tuple[int, int]


@dataclass(frozen=True)
class PathSegment:
    """One of the two paths drawn on a tile."""

    x: int
    y: int
    slot: int


@dataclass(frozen=True)
class TruchetParams:
    """Parameters for building a grid."""

    width: int = 10
    height: int = 10
    allow_cross: bool = False  # Permit LEFT_RIGHT tiles
