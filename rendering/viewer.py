"""Pygame window for watching a Wa-Tor ocean evolve.

Controls:
  q / ESC     quit
  p / SPACE   pause / resume
  s           single step while paused
  h           toggle the stats strip
"""

import logging
from typing import Optional

import pygame

from rendering.ui_renderer import UIRenderer, window_size
from wator.config.display import CELL_SIZE, FRAME_RATE, SEPARATOR_WIDTH
from wator.engine import WatorEngine

logger = logging.getLogger(__name__)


class WatorViewer:
    """Interactive viewer driving a :class:`WatorEngine`.

    Attributes:
        engine: Engine being displayed
        screen: Pygame display surface
        clock: Pygame clock for frame pacing
        paused: Whether the simulation is paused
        show_stats_hud: Whether the stats strip is drawn
    """

    def __init__(
        self,
        engine: WatorEngine,
        frame_rate: int = FRAME_RATE,
        cell_size: int = CELL_SIZE,
        max_ticks: Optional[int] = None,
    ) -> None:
        self.engine = engine
        self.frame_rate = frame_rate
        self.cell_size = cell_size
        self.max_ticks = max_ticks
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.ui_renderer: Optional[UIRenderer] = None
        self.paused: bool = False
        self.show_stats_hud: bool = True
        self._step_once: bool = False

    def setup(self) -> bool:
        """Open the window. Returns False if no display is available."""
        grid = self.engine.grid
        size = window_size(grid.width, grid.height, self.cell_size)
        try:
            self.screen = pygame.display.set_mode(size)
            pygame.display.set_caption("Wa-Tor")
        except pygame.error as e:
            logger.error(f"Couldn't set the display mode: {e}")
            return False

        self.ui_renderer = UIRenderer(
            self.screen, pygame.font.Font(None, 22), cell_size=self.cell_size
        )
        return True

    def handle_events(self) -> bool:
        """Handle user input. Returns False when the user asks to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            if event.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
            elif event.key in (pygame.K_p, pygame.K_SPACE):
                self.paused = not self.paused
            elif event.key == pygame.K_s and self.paused:
                self._step_once = True
            elif event.key == pygame.K_h:
                self.show_stats_hud = not self.show_stats_hud
        return True

    def update(self) -> None:
        """Advance the engine unless paused (a queued single step still runs)."""
        if self.max_ticks is not None and self.engine.tick >= self.max_ticks:
            return
        if self.paused and not self._step_once:
            return
        self._step_once = False
        self.engine.step()

    def render(self) -> None:
        """Draw the current ocean."""
        if self.ui_renderer is None:
            return
        self.ui_renderer.draw_grid(self.engine.snapshot())
        if self.show_stats_hud:
            self.ui_renderer.draw_stats_panel(
                self.engine.tracker.latest, self.engine.grid.height, self.paused
            )
        pygame.display.flip()

    def run(self) -> bool:
        """Run the viewer until the window is closed.

        Returns:
            False if the window could not be opened, True otherwise
        """
        if not self.setup():
            return False

        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("WA-TOR VIEWER")
        logger.info("Controls: q/ESC quit, p/SPACE pause, s step, h toggle HUD")
        logger.info("=" * SEPARATOR_WIDTH)

        while self.handle_events():
            self.update()
            self.render()
            self.clock.tick(self.frame_rate)

        self.engine.print_stats()
        return True


def run_viewer(engine: WatorEngine, **kwargs) -> bool:
    """Initialise pygame, run a viewer and always shut pygame down."""
    pygame.init()
    try:
        return WatorViewer(engine, **kwargs).run()
    finally:
        pygame.quit()
