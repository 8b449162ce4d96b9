"""UI rendering utilities for the Wa-Tor viewer.

This module handles drawing the ocean grid and the stats strip beneath it.
It only reads cell kinds; it never touches the simulation rules.
"""

from typing import List, Optional, Sequence, Tuple

import pygame

from wator.cells import CellKind
from wator.config.display import (
    CELL_SIZE,
    FISH_COLOR,
    HUD_BACKGROUND_COLOR,
    HUD_HEIGHT,
    HUD_TEXT_COLOR,
    PAUSED_TEXT_COLOR,
    SHARK_COLOR,
    WATER_COLOR,
)
from wator.population_tracker import PopulationSample

Color = Tuple[int, int, int]

CELL_COLORS = {
    CellKind.EMPTY: WATER_COLOR,
    CellKind.FISH: FISH_COLOR,
    CellKind.SHARK: SHARK_COLOR,
}


def cell_color(kind: CellKind) -> Color:
    """Return the fill color for a cell kind."""
    return CELL_COLORS[kind]


def window_size(width: int, height: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Pixel size of a window showing a ``height x width`` grid plus the HUD."""
    return width * cell_size, height * cell_size + HUD_HEIGHT


def hud_text(sample: Optional[PopulationSample]) -> str:
    """Single-line population summary for the stats strip."""
    if sample is None:
        return "Tick 0"
    return f"Tick {sample.tick}   Fish {sample.fish}   Sharks {sample.sharks}"


class UIRenderer:
    """Renders the grid and HUD for the Wa-Tor viewer.

    Attributes:
        screen: Pygame surface to render to
        stats_font: Font for rendering statistics
        cell_size: Pixel size of one grid cell
    """

    def __init__(
        self,
        screen: pygame.Surface,
        stats_font: pygame.font.Font,
        cell_size: int = CELL_SIZE,
    ) -> None:
        """Initialize the UI renderer.

        Args:
            screen: Pygame surface to render to
            stats_font: Font for rendering statistics
            cell_size: Pixel size of one grid cell
        """
        self.screen = screen
        self.stats_font = stats_font
        self.cell_size = cell_size

    def draw_grid(self, kinds: Sequence[Sequence[CellKind]]) -> None:
        """Draw every cell.

        Args:
            kinds: Cell kinds indexed ``[row][col]``
        """
        self.screen.fill(WATER_COLOR)
        size = self.cell_size
        for row, cells in enumerate(kinds):
            for col, kind in enumerate(cells):
                if kind is CellKind.EMPTY:
                    continue
                pygame.draw.rect(
                    self.screen, cell_color(kind), (col * size, row * size, size, size)
                )

    def draw_stats_panel(
        self, sample: Optional[PopulationSample], grid_height: int, paused: bool
    ) -> None:
        """Draw the stats strip under the grid.

        Args:
            sample: Latest population sample
            grid_height: Number of grid rows (the strip sits below them)
            paused: Whether the simulation is paused
        """
        top = grid_height * self.cell_size
        width = self.screen.get_width()
        pygame.draw.rect(self.screen, HUD_BACKGROUND_COLOR, (0, top, width, HUD_HEIGHT))

        lines: List[Tuple[str, Color]] = [(hud_text(sample), HUD_TEXT_COLOR)]
        if paused:
            lines.append(("PAUSED", PAUSED_TEXT_COLOR))

        x_offset = 8
        for text, color in lines:
            text_surface = self.stats_font.render(text, True, color)
            self.screen.blit(text_surface, (x_offset, top + 6))
            x_offset += text_surface.get_width() + 24
