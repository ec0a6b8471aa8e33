"""Drawing primitives for RGB numpy frame buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]

GLYPH_HEIGHT = 5


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black (height, width, 3) buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def _clip(buffer: Buffer, x: float, y: float, width: float, height: float) -> Tuple[int, int, int, int]:
    """Clamp a float rectangle to integer buffer bounds."""
    h, w = buffer.shape[:2]
    x1 = max(0, min(int(round(x)), w))
    y1 = max(0, min(int(round(y)), h))
    x2 = max(0, min(int(round(x + width)), w))
    y2 = max(0, min(int(round(y + height)), h))
    return x1, y1, x2, y2


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
) -> None:
    """Draw a filled rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    if x2 > x1 and y2 > y1:
        buffer[y1:y2, x1:x2] = color


def blend_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    alpha: float,
) -> None:
    """Draw a translucent filled rectangle over the existing pixels."""
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    if x2 <= x1 or y2 <= y1:
        return

    region = buffer[y1:y2, x1:x2].astype(np.float32)
    src = np.array(color, dtype=np.float32)
    buffer[y1:y2, x1:x2] = (src * alpha + region * (1 - alpha)).astype(np.uint8)


def text_width(text: str, scale: int = 1) -> int:
    """Width in pixels of ``text`` as drawn by ``draw_text``."""
    width = 0
    for char in text:
        glyph = _FONT.get(char.upper())
        width += (len(glyph[0]) + 1) * scale if glyph else 4 * scale
    return width


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    scale: int = 1,
) -> int:
    """Draw text with the built-in 3x5 bitmap font.

    Unknown characters render as '?', spaces advance by one cell.

    Returns:
        Width of the rendered text in pixels
    """
    h, w = buffer.shape[:2]
    cursor_x = x

    for char in text:
        if char == " ":
            cursor_x += 4 * scale
            continue

        glyph = _FONT.get(char.upper(), _FONT["?"])
        for row_idx, row in enumerate(glyph):
            for col_idx, pixel in enumerate(row):
                if pixel != "1":
                    continue
                px = cursor_x + col_idx * scale
                py = y + row_idx * scale
                if px >= w or py >= h or px + scale <= 0 or py + scale <= 0:
                    continue
                buffer[max(0, py):py + scale, max(0, px):px + scale] = color

        cursor_x += (len(glyph[0]) + 1) * scale

    return cursor_x - x


def draw_centered_text(buffer: Buffer, text: str, y: int, color: Color, scale: int = 1) -> None:
    """Draw text horizontally centered on the buffer."""
    x = (buffer.shape[1] - text_width(text, scale)) // 2
    draw_text(buffer, text, x, y, color, scale)


_FONT = {
    'A': ("010", "101", "111", "101", "101"),
    'B': ("110", "101", "110", "101", "110"),
    'C': ("011", "100", "100", "100", "011"),
    'D': ("110", "101", "101", "101", "110"),
    'E': ("111", "100", "110", "100", "111"),
    'F': ("111", "100", "110", "100", "100"),
    'G': ("011", "100", "101", "101", "011"),
    'H': ("101", "101", "111", "101", "101"),
    'I': ("111", "010", "010", "010", "111"),
    'J': ("001", "001", "001", "101", "010"),
    'K': ("101", "101", "110", "101", "101"),
    'L': ("100", "100", "100", "100", "111"),
    'M': ("101", "111", "101", "101", "101"),
    'N': ("101", "111", "111", "101", "101"),
    'O': ("010", "101", "101", "101", "010"),
    'P': ("110", "101", "110", "100", "100"),
    'Q': ("010", "101", "101", "111", "011"),
    'R': ("110", "101", "110", "101", "101"),
    'S': ("011", "100", "010", "001", "110"),
    'T': ("111", "010", "010", "010", "010"),
    'U': ("101", "101", "101", "101", "010"),
    'V': ("101", "101", "101", "010", "010"),
    'W': ("101", "101", "101", "111", "101"),
    'X': ("101", "101", "010", "101", "101"),
    'Y': ("101", "101", "010", "010", "010"),
    'Z': ("111", "001", "010", "100", "111"),
    '0': ("010", "101", "101", "101", "010"),
    '1': ("010", "110", "010", "010", "111"),
    '2': ("010", "101", "001", "010", "111"),
    '3': ("110", "001", "010", "001", "110"),
    '4': ("101", "101", "111", "001", "001"),
    '5': ("111", "100", "110", "001", "110"),
    '6': ("011", "100", "110", "101", "010"),
    '7': ("111", "001", "010", "010", "010"),
    '8': ("010", "101", "010", "101", "010"),
    '9': ("010", "101", "011", "001", "110"),
    '?': ("010", "101", "001", "000", "010"),
    '!': ("010", "010", "010", "000", "010"),
    '.': ("000", "000", "000", "000", "010"),
    ',': ("000", "000", "000", "010", "100"),
    ':': ("000", "010", "000", "010", "000"),
    '-': ("000", "000", "111", "000", "000"),
    '+': ("000", "010", "111", "010", "000"),
    '*': ("000", "101", "010", "101", "000"),
    '#': ("101", "111", "101", "111", "101"),
}
