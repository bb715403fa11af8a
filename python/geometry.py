"""
Tile connectivity tables.

Everything here is derived from EXIT_SIDE: the side a path leaves a tile
through when it enters at a given side. Grid coordinates count left to right
and top to bottom, so leaving through the top means y - 1.
"""

from __future__ import annotations

from tile_types import Orientation, Side

_L, _T, _R, _B = Side.LEFT, Side.TOP, Side.RIGHT, Side.BOTTOM

EXIT_SIDE: dict[tuple[Side, Orientation], Side] = {
    (_L, Orientation.LEFT_DOWN): _B,
    (_T, Orientation.LEFT_DOWN): _R,
    (_R, Orientation.LEFT_DOWN): _T,
    (_B, Orientation.LEFT_DOWN): _L,
    (_L, Orientation.LEFT_UP): _T,
    (_T, Orientation.LEFT_UP): _L,
    (_R, Orientation.LEFT_UP): _B,
    (_B, Orientation.LEFT_UP): _R,
    (_L, Orientation.LEFT_RIGHT): _R,
    (_T, Orientation.LEFT_RIGHT): _B,
    (_R, Orientation.LEFT_RIGHT): _L,
    (_B, Orientation.LEFT_RIGHT): _T,
}

_OPPOSITE = {_L: _R, _T: _B, _R: _L, _B: _T}

# Direction deltas: (dx, dy)
_SIDE_DELTA = {
    _L: (-1, 0),
    _T: (0, -1),
    _R: (1, 0),
    _B: (0, 1),
}


def opposite(side: Side) -> Side:
    """The side facing `side` across a shared edge."""
    return _OPPOSITE[side]


def side_delta(side: Side) -> tuple[int, int]:
    """Offset to the neighbouring tile across `side`."""
    return _SIDE_DELTA[side]


def exit_side(side: Side, orientation: Orientation) -> Side:
    """Side of this tile that a path entering at `side` leaves through."""
    return EXIT_SIDE[(side, orientation)]


def path_index_for(side: Side, orientation: Orientation) -> int:
    """
    Which of the tile's two path slots the given side belongs to.

    Slot 0 is the path touching the left side, slot 1 is the other one.
    """
    if side is Side.LEFT or exit_side(side, orientation) is Side.LEFT:
        return 0
    return 1


def next_entry_side(side: Side, orientation: Orientation) -> Side:
    """
    Side of the *next* tile that the path enters on.

    This is not the exit side of the current tile: leaving through the
    bottom means entering the neighbour below through its top.
    """
    return opposite(exit_side(side, orientation))


def coordinate_delta(side: Side, orientation: Orientation) -> tuple[int, int]:
    """Offset to the tile a path entering at `side` moves on to."""
    return side_delta(exit_side(side, orientation))


def connected_sides(orientation: Orientation) -> tuple[tuple[Side, Side], tuple[Side, Side]]:
    """The two side pairs joined by an orientation, ordered by slot."""
    left_partner = exit_side(Side.LEFT, orientation)
    rest = [s for s in Side if s not in (Side.LEFT, left_partner)]
    return ((Side.LEFT, left_partner), (rest[0], rest[1]))
