"""A simple software renderer drawing into a 32-bit ARGB framebuffer."""

from __future__ import annotations

import logging

from rxserver.graphics.context import GraphicsContext
from rxserver.graphics.types import Color, Point, Rectangle

logger = logging.getLogger(__name__)

_BACKGROUND = Color.rgb(0x00, 0x40, 0x40)

# The 8x4 tile drawn across a fresh framebuffer: "B" black, "W" white.
_RX_TILE = (
    "BBBBBBBB",
    "BWWWBWBW",
    "BWBBBBWB",
    "BWBBBWBW",
)
_TILE_COLORS = {"B": Color.BLACK, "W": Color.WHITE}


class Renderer:
    """Draws primitives into a framebuffer of packed 0xAARRGGBB pixels."""

    def __init__(self, width: int, height: int, depth: int) -> None:
        self._width = width
        self._height = height
        self._depth = depth
        self._framebuffer = [0] * (width * height)
        self.draw_rx_pattern()

    def framebuffer(self) -> list[int]:
        """The live framebuffer, row by row."""
        return self._framebuffer

    def dimensions(self) -> tuple[int, int]:
        return self._width, self._height

    def depth(self) -> int:
        return self._depth

    def clear(self, color: Color) -> None:
        """Fill the whole framebuffer with *color*."""
        pixel = color.to_u32()
        self._framebuffer[:] = [pixel] * len(self._framebuffer)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _passes_clip(self, x: int, y: int, gc: GraphicsContext) -> bool:
        if not self._in_bounds(x, y):
            return False
        clip = gc.clip_region
        return clip is None or clip.contains(Point(x, y))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; points outside the framebuffer are ignored."""
        if self._in_bounds(x, y):
            self._framebuffer[y * self._width + x] = color.to_u32()

    def get_pixel(self, x: int, y: int) -> Color | None:
        """The pixel at (x, y), or None outside the framebuffer."""
        if not self._in_bounds(x, y):
            return None
        return Color.from_u32(self._framebuffer[y * self._width + x])

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, gc: GraphicsContext) -> None:
        """Draw a line with Bresenham's algorithm, both endpoints included."""
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        x, y = x0, y0
        while True:
            if self._passes_clip(x, y, gc):
                self.set_pixel(x, y, gc.foreground)
            if x == x1 and y == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x += sx
            if e2 <= dx:
                err += dx
                y += sy

    def draw_rectangle(self, rect: Rectangle, gc: GraphicsContext) -> None:
        """Draw the outline of *rect*."""
        left, top = rect.x, rect.y
        right = rect.x + rect.width - 1
        bottom = rect.y + rect.height - 1
        self.draw_line(left, top, right, top, gc)
        self.draw_line(left, bottom, right, bottom, gc)
        self.draw_line(left, top, left, bottom, gc)
        self.draw_line(right, top, right, bottom, gc)

    def fill_rectangle(self, rect: Rectangle, gc: GraphicsContext) -> None:
        """Fill *rect* with the foreground colour."""
        for y in range(rect.y, rect.y + rect.height):
            for x in range(rect.x, rect.x + rect.width):
                if self._passes_clip(x, y, gc):
                    self.set_pixel(x, y, gc.foreground)

    def copy_area(
        self,
        src_x: int,
        src_y: int,
        width: int,
        height: int,
        dst_x: int,
        dst_y: int,
        gc: GraphicsContext,
    ) -> None:
        """Copy a block of pixels; overlapping areas copy correctly.

        Source pixels outside the framebuffer are read as black.
        """
        block = [
            [self.get_pixel(src_x + dx, src_y + dy) or Color.BLACK for dx in range(width)]
            for dy in range(height)
        ]
        for dy, row in enumerate(block):
            for dx, color in enumerate(row):
                x, y = dst_x + dx, dst_y + dy
                if self._passes_clip(x, y, gc):
                    self.set_pixel(x, y, color)

    def draw_rx_pattern(self) -> None:
        """Fill the framebuffer with the repeating 8x4 "rx" tile."""
        self.clear(_BACKGROUND)
        tile_width, tile_height = len(_RX_TILE[0]), len(_RX_TILE)
        for start_y in range(0, self._height, tile_height):
            for start_x in range(0, self._width, tile_width):
                self._draw_tile(start_x, start_y)

    def _draw_tile(self, start_x: int, start_y: int) -> None:
        for dy, row in enumerate(_RX_TILE):
            for dx, code in enumerate(row):
                self.set_pixel(start_x + dx, start_y + dy, _TILE_COLORS[code])

    def resize(self, width: int, height: int) -> None:
        """Change the dimensions; the buffer is truncated or padded with zeros."""
        if width == 0 or height == 0:
            logger.warning(
                "Attempted to resize renderer with invalid dimensions: %dx%d", width, height
            )
            return
        self._width = width
        self._height = height
        size = width * height
        del self._framebuffer[size:]
        self._framebuffer.extend([0] * (size - len(self._framebuffer)))