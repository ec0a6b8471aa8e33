"""Graphics module for dinodash rendering."""

from dinodash.graphics.renderer import GameRenderer, Palette, PALETTES, Theme
from dinodash.graphics.primitives import (
    blend_rect,
    draw_centered_text,
    draw_rect,
    draw_text,
    fill,
    new_buffer,
)

__all__ = [
    # Renderer
    "GameRenderer",
    "Palette",
    "PALETTES",
    "Theme",
    # Primitives
    "blend_rect",
    "draw_centered_text",
    "draw_rect",
    "draw_text",
    "fill",
    "new_buffer",
]
