"""Draws simulation snapshots into an RGB frame buffer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
import math

from dinodash.config.settings import FieldSettings
from dinodash.game.difficulty import DAY
from dinodash.game.spawner import ObstacleKind
from dinodash.game.world import FrameSnapshot
from dinodash.graphics.primitives import (
    Buffer, Color, blend_rect, draw_centered_text, draw_rect, draw_text, fill,
)

logger = logging.getLogger(__name__)


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Palette:
    """Colors for one theme."""

    player: Color
    ground_obstacle: Color
    flying_obstacle: Color
    ground: Color
    ground_detail: Color
    cloud: Color
    day_sky: Color
    night_sky: Color
    text: Color


PALETTES = {
    Theme.LIGHT: Palette(
        player=(56, 142, 60),
        ground_obstacle=(76, 175, 80),
        flying_obstacle=(211, 47, 47),
        ground=(121, 85, 72),
        ground_detail=(109, 76, 65),
        cloud=(255, 255, 255),
        day_sky=(135, 206, 235),
        night_sky=(26, 26, 46),
        text=(0, 0, 0),
    ),
    Theme.DARK: Palette(
        player=(76, 175, 80),
        ground_obstacle=(139, 195, 74),
        flying_obstacle=(255, 82, 82),
        ground=(93, 64, 55),
        ground_detail=(78, 52, 46),
        cloud=(200, 200, 200),
        day_sky=(26, 35, 126),
        night_sky=(13, 27, 61),
        text=(255, 255, 255),
    ),
}

STAR_COLOR = (255, 255, 255)
STAR_COUNT = 50
CLOUD_ALPHA = 0.7
OVERLAY_ALPHA = 0.55

HUD_SCALE = 3
TITLE_SCALE = 6


class GameRenderer:
    """Paints the sky, scenery, player, obstacles, HUD and overlay.

    Theme is purely cosmetic: toggling it never touches the simulation.
    """

    def __init__(self, field: FieldSettings, theme: Theme = Theme.LIGHT) -> None:
        self.field = field
        self.theme = theme

    @property
    def palette(self) -> Palette:
        return PALETTES[self.theme]

    def toggle_theme(self) -> Theme:
        self.theme = Theme.DARK if self.theme is Theme.LIGHT else Theme.LIGHT
        logger.info(f"Theme: {self.theme.value}")
        return self.theme

    def sky_color(self, day_cycle: int) -> Color:
        return self.palette.day_sky if day_cycle == DAY else self.palette.night_sky

    def render(
        self,
        buffer: Buffer,
        frame: FrameSnapshot,
        final_score: Optional[int] = None,
    ) -> None:
        """Draw one frame. ``final_score`` is shown on the idle overlay."""
        fill(buffer, self.sky_color(frame.day_cycle))
        if frame.day_cycle != DAY:
            self._draw_stars(buffer)

        for cloud in frame.clouds:
            blend_rect(buffer, cloud.x, cloud.y, cloud.width, cloud.height,
                       self.palette.cloud, CLOUD_ALPHA)

        self._draw_ground(buffer, frame.ground_x)
        self._draw_player(buffer, frame)

        for obstacle in frame.obstacles:
            color = (self.palette.flying_obstacle if obstacle.kind is ObstacleKind.FLYING
                     else self.palette.ground_obstacle)
            r = obstacle.rect
            draw_rect(buffer, r.x, r.y, r.width, r.height, color)

        cycle_text = "DAY" if frame.day_cycle == DAY else "NIGHT"
        draw_text(buffer, f"SCORE: {frame.score}  {cycle_text}", 20, 20,
                  self.palette.text, scale=HUD_SCALE)

        if not frame.running:
            self._draw_overlay(buffer, final_score)

    def _draw_stars(self, buffer: Buffer) -> None:
        width = self.field.width
        for i in range(STAR_COUNT):
            x = (i * 37) % width
            y = 20 + (i * 17) % 100
            draw_rect(buffer, x, y, 2, 2, STAR_COLOR)

    def _draw_ground(self, buffer: Buffer, offset: float) -> None:
        f = self.field
        draw_rect(buffer, 0, f.ground_y, f.width, f.height - f.ground_y, self.palette.ground)

        shift = math.fmod(offset, 100)
        for i in range(math.ceil(f.width / 100) + 1):
            draw_rect(buffer, i * 100 + shift, f.ground_y + 5, 20, 3, self.palette.ground_detail)

    def _draw_player(self, buffer: Buffer, frame: FrameSnapshot) -> None:
        color = self.palette.player
        x, y = frame.player.x, frame.player.y

        draw_rect(buffer, x + 10, y + 15, 35, 30, color)  # body
        draw_rect(buffer, x + 40, y + 10, 15, 15, color)  # head

        leg_offset = 0.0 if frame.is_jumping else math.sin(frame.leg_phase) * 3
        draw_rect(buffer, x + 15, y + 45, 8, 15 + leg_offset, color)
        draw_rect(buffer, x + 32, y + 45, 8, 15 - leg_offset, color)

        draw_rect(buffer, x, y + 25, 15, 8, color)  # tail

    def _draw_overlay(self, buffer: Buffer, final_score: Optional[int]) -> None:
        blend_rect(buffer, 0, 0, buffer.shape[1], buffer.shape[0], (0, 0, 0), OVERLAY_ALPHA)

        top = buffer.shape[0] // 4
        white = (255, 255, 255)
        if final_score is None:
            draw_centered_text(buffer, "DINO DASH", top, white, scale=TITLE_SCALE)
            draw_centered_text(buffer, "PRESS SPACE TO START", top + 60, white, scale=HUD_SCALE)
        else:
            draw_centered_text(buffer, "GAME OVER", top, white, scale=TITLE_SCALE)
            draw_centered_text(buffer, f"FINAL SCORE: {final_score}", top + 50, white, scale=HUD_SCALE)
            draw_centered_text(buffer, "PRESS SPACE TO PLAY", top + 80, white, scale=HUD_SCALE)
