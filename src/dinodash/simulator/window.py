"""
Desktop window for dinodash using pygame.

Translates keyboard and mouse input into bus events and drives the
simulation with one TICK per rendered frame.
"""

import pygame
import asyncio
import logging

from ..config.settings import DisplaySettings
from ..core.events import EventBus, EventType, Event, button_press_event, tick_event
from ..core.state import State
from ..game.loop import SimulationLoop
from ..graphics.renderer import GameRenderer, Theme
from .display import SimulatedScreen

logger = logging.getLogger(__name__)


class SimulatorWindow:
    """
    Main game window.

    Keyboard Mapping:
        SPACE / UP / mouse click: Start when idle, jump while running
        T: Toggle light/dark theme
        D: Toggle debug overlay
        L: Toggle log viewer
        ESC / Q: Exit
    """

    def __init__(
        self,
        loop: SimulationLoop,
        config: DisplaySettings | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or DisplaySettings()
        self.loop = loop
        self.event_bus = event_bus or loop.event_bus

        field = loop.settings
        self.screen_buffer = SimulatedScreen(field.width, field.height)
        self.renderer = GameRenderer(field, Theme(self.config.theme))

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False

        # Log viewer
        self._show_log = False
        self._log_buffer: list[str] = []
        self._max_log_lines = 12

        self._setup_log_capture()
        self.event_bus.subscribe(EventType.THEME_TOGGLE, self._on_theme_toggle)
        self.event_bus.subscribe(EventType.GAME_OVER, self._on_game_over)

        logger.info("SimulatorWindow created")

    def _setup_log_capture(self) -> None:
        """Setup log capturing for the log viewer."""
        class SimulatorLogHandler(logging.Handler):
            def __init__(self, window: 'SimulatorWindow'):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                # Keep buffer size limited
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        self._log_handler = SimulatorLogHandler(self)
        self._log_handler.setFormatter(logging.Formatter('%(levelname).1s %(name)s: %(message)s'))
        logging.getLogger().addHandler(self._log_handler)

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        size = (
            self.screen_buffer.width * self.config.scale,
            self.screen_buffer.height * self.config.scale,
        )
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("monospace", 12)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.event_bus.emit(button_press_event(source="mouse"))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key in (pygame.K_SPACE, pygame.K_UP):
            self.event_bus.emit(button_press_event(source="keyboard"))
        elif key == pygame.K_t:
            self.event_bus.emit(Event(EventType.THEME_TOGGLE, source="keyboard"))
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_l:
            self._show_log = not self._show_log

    def _on_theme_toggle(self, event: Event) -> None:
        self.renderer.toggle_theme()

    def _on_game_over(self, event: Event) -> None:
        pygame.display.set_caption(f"{self.config.title} - score {event.data['score']}")

    def _render(self) -> None:
        """Render the game and any panels."""
        if not self._screen:
            return

        final_score = self.loop.final_score if self.loop.phase == State.IDLE else None
        self.renderer.render(self.screen_buffer.buffer, self.loop.snapshot(), final_score)
        self._screen.blit(self.screen_buffer.render(self.config.scale), (0, 0))

        if self._show_debug:
            self._render_debug_panel()
        if self._show_log:
            self._render_log_panel()

        pygame.display.flip()

    def _render_text_lines(self, lines: list[str], x: int, y: int, color: tuple[int, int, int]) -> None:
        for line in lines:
            text_surface = self._font.render(line, True, color)
            self._screen.blit(text_surface, (x, y))
            y += 14

    def _render_debug_panel(self) -> None:
        """Render the debug information panel."""
        if not self._font:
            return

        state = self.loop.state
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {state.frame_count}",
            f"State: {self.loop.phase.name}",
            f"Speed: {state.speed:.1f}",
            f"Obstacles: {len(state.obstacles)}",
            f"Player y: {state.player.y:.1f} vy: {state.player.velocity_y:.1f}",
        ]
        width = self._screen.get_width()
        self._render_text_lines(lines, width - 240, 10, (255, 255, 0))

    def _render_log_panel(self) -> None:
        """Render the last captured log lines at the bottom."""
        if not self._font:
            return

        visible = [line[:90] for line in self._log_buffer[-6:]]
        height = self._screen.get_height()
        self._render_text_lines(visible, 10, height - 14 * len(visible) - 4, (255, 200, 100))

    async def run(self) -> None:
        """Main window loop: input, one tick, render, frame pacing."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            if self.loop.running:
                self.event_bus.emit(tick_event(self._frame_count))

            await self.event_bus.process_queue()

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources and detach the log viewer."""
        pygame.quit()
        logger.info("Simulator stopped")
        logging.getLogger().removeHandler(self._log_handler)

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
