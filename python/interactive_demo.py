"""
Interactive viewer for Truchet grids.
Regenerate, resize and inspect paths with keyboard commands.
"""

import logging
import sys
from dataclasses import replace

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_tiles, summarize
from geometry import side_delta
from random_source import SeededRandom
from tile_types import Side, TilePosition, TruchetParams
from truchet import TruchetGrid

MIN_SIZE = 1
MAX_SIZE = 40


class InteractiveDemo:
    """Interactive grid viewer with a movable cursor."""

    def __init__(self, params: TruchetParams, seed: int = 0) -> None:
        self.params = params
        self.seed = seed
        self.cursor = TilePosition(0, 0)
        self.console = Console()
        self.status_message = "Ready"
        self.grid = self.build()

    def build(self) -> TruchetGrid:
        return TruchetGrid(self.params, SeededRandom(self.seed))

    def regenerate(self, message: str) -> None:
        self.grid = self.build()
        self.cursor = TilePosition(
            min(self.cursor.x, self.grid.width - 1),
            min(self.cursor.y, self.grid.height - 1),
        )
        self.status_message = message

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        grid_text = render_tiles(self.grid, highlight_pos=self.cursor)

        status = Text()
        status.append("Seed: ", style="bold")
        status.append(f"{self.seed}   ")
        status.append("Cross: ", style="bold")
        status.append(f"{'on' if self.params.allow_cross else 'off'}\n")
        status.append(summarize(self.grid) + "\n\n")

        tile = self.grid.tiles[self.cursor.x][self.cursor.y]
        status.append("Tile: ", style="bold")
        status.append(f"({tile.x}, {tile.y}) {tile.orientation.name}  paths {tile.path[0]} / {tile.path[1]}\n\n")

        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  N/P     - Next/previous seed\n")
        status.append("  C       - Toggle crossing tiles\n")
        status.append("  +/-     - Grow/shrink grid\n")
        status.append("  Q       - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Truchet Tiles", border_style="green")

    def move_cursor(self, side: Side) -> None:
        dx, dy = side_delta(side)
        x = min(max(self.cursor.x + dx, 0), self.grid.width - 1)
        y = min(max(self.cursor.y + dy, 0), self.grid.height - 1)
        self.cursor = TilePosition(x, y)
        path_id = self.grid.path_of(x, y, side)
        self.status_message = f"Path on the {side.name.lower()} side: {path_id}"

    def resize(self, delta: int) -> None:
        width = min(max(self.params.width + delta, MIN_SIZE), MAX_SIZE)
        height = min(max(self.params.height + delta, MIN_SIZE), MAX_SIZE)
        self.params = replace(self.params, width=width, height=height)
        self.regenerate(f"Resized to {width}x{height}")

    def run(self) -> None:
        """Run the viewer until Q is pressed."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == "n":
                        self.seed += 1
                        self.regenerate(f"Seed {self.seed}")
                    elif key.lower() == "p":
                        self.seed -= 1
                        self.regenerate(f"Seed {self.seed}")
                    elif key.lower() == "c":
                        self.params = replace(self.params, allow_cross=not self.params.allow_cross)
                        self.regenerate("Crossing tiles " + ("on" if self.params.allow_cross else "off"))
                    elif key in ("+", "="):
                        self.resize(1)
                    elif key in ("-", "_"):
                        self.resize(-1)
                    elif key.lower() == "w":
                        self.move_cursor(Side.TOP)
                    elif key.lower() == "s":
                        self.move_cursor(Side.BOTTOM)
                    elif key.lower() == "a":
                        self.move_cursor(Side.LEFT)
                    elif key.lower() == "d":
                        self.move_cursor(Side.RIGHT)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "sublime":
        # Running from IDE - just render the initial state
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
        demo = InteractiveDemo(TruchetParams(width=20, height=10))
        print(render_tiles(demo.grid))
        print(summarize(demo.grid))
    else:
        seed = int(sys.argv[1]) if len(sys.argv) > 1 else 0
        InteractiveDemo(TruchetParams(width=20, height=10), seed).run()
