"""
Simulated screen for the desktop window.

Holds the frame buffer the renderer draws into and turns it into a
pygame surface.
"""

import pygame
import numpy as np
from numpy.typing import NDArray


class SimulatedScreen:
    """RGB frame buffer of the play field, rendered with pygame."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> NDArray[np.uint8]:
        """Live buffer; the renderer draws straight into it."""
        return self._buffer

    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self._buffer[:, :] = [r, g, b]

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()

    def render(self, scale: int = 1) -> pygame.Surface:
        """
        Render buffer to a pygame surface.

        Args:
            scale: Pixel scale factor

        Returns:
            pygame.Surface with rendered display
        """
        # surfarray is indexed (x, y)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if scale == 1:
            return surface
        return pygame.transform.scale(
            surface, (self._width * scale, self._height * scale)
        )
