"""Tests for ascii_render module."""

from ascii_render import PALETTE, TILE_GLYPHS, path_color, render_path_ids, render_tiles, summarize
from tile_types import Orientation, TilePosition, TruchetParams
from truchet import TruchetGrid

LD = Orientation.LEFT_DOWN
LU = Orientation.LEFT_UP


def all_left_down() -> TruchetGrid:
    return TruchetGrid.from_orientations([[LD] * 3 for _ in range(3)])


class TestRenderTiles:
    """Tests for the tile view."""

    def test_plain_layout(self) -> None:
        """One glyph per tile, rows top to bottom, inside a titled box."""
        lines = render_tiles(all_left_down(), color=False).split("\n")

        assert len(lines) == 5
        assert "3x3" in lines[0]
        assert lines[1:4] == ["│" + "╲" * 6 + "│"] * 3
        assert lines[4] == "└" + "─" * 6 + "┘"

    def test_rows_follow_y(self) -> None:
        """Row y of the output shows tiles[x][y] for every x."""
        grid = TruchetGrid.from_orientations([[LD, LU], [LU, LU]])
        lines = render_tiles(grid, cell_width=1, color=False).split("\n")
        assert lines[1] == "│╲╱│"
        assert lines[2] == "│╱╱│"

    def test_every_orientation_has_a_glyph(self) -> None:
        assert set(TILE_GLYPHS) == set(Orientation)

    def test_highlight_keeps_glyph(self) -> None:
        """The highlighted tile still shows its glyph."""
        output = render_tiles(all_left_down(), color=False, highlight_pos=TilePosition(1, 1))
        assert "╲╲" in output.split("\n")[2]

    def test_empty_grid(self) -> None:
        grid = TruchetGrid(TruchetParams(0, 4))
        assert render_tiles(grid) == "(empty grid)"


class TestRenderPathIds:
    """Tests for the path id view."""

    def test_labels_present(self) -> None:
        """Each tile shows its two ids."""
        output = render_path_ids(all_left_down(), color=False)
        for label in ("1/2", "5/1", "9/5", "2/14", "14/26"):
            assert label in output

    def test_columns_align(self) -> None:
        """Every row has the same width."""
        lines = render_path_ids(all_left_down(), color=False).split("\n")
        assert len({len(line) for line in lines}) == 1

    def test_empty_grid(self) -> None:
        assert render_path_ids(TruchetGrid(TruchetParams(-1, -1))) == "(empty grid)"


class TestHelpers:
    """Tests for colour and summary helpers."""

    def test_path_color_cycles(self) -> None:
        """Colours are keyed off the raw id modulo the palette size."""
        assert path_color(3) is path_color(3 + len(PALETTE))

    def test_summarize(self) -> None:
        grid = TruchetGrid.from_orientations([[LU, LD], [LD, LU]])
        assert summarize(grid) == "2x2 tiles, 5 paths (1 closed), longest spans 4 segments"
