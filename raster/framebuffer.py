import io
import logging
import os
import tempfile
from collections import namedtuple

from PIL import Image

logger = logging.getLogger(__name__)

Point = namedtuple("Point", ["x", "y"])
Color = namedtuple("Color", ["r", "g", "b"])

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)

UNKNOWN_GLYPH = "?"


class Framebuffer:
    def __init__(self, width, height, background=WHITE):
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        background = Color(*background)
        self.pixels = [[background for _ in range(self.width)] for _ in range(self.height)]

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self, color=WHITE):
        color = Color(*color)
        for y in range(self.height):
            row = self.pixels[y]
            for x in range(self.width):
                row[x] = color

    def set_pixel(self, x, y, color):
        if self.in_bounds(x, y):
            self.pixels[y][x] = Color(*color)

    def get_pixel(self, x, y):
        if self.in_bounds(x, y):
            return self.pixels[y][x]
        return None

    def get_row(self, y):
        if self.in_bounds(0, y):
            return list(self.pixels[y])
        return []

    def to_image(self):
        """Copy the grid into a Pillow RGB image (row-major, top row first)."""
        img = Image.new("RGB", (self.width, self.height))
        img.putdata([tuple(c) for row in self.pixels for c in row])
        return img

    def to_png_bytes(self):
        out = io.BytesIO()
        self.to_image().save(out, format="PNG")
        return out.getvalue()

    def save(self, path):
        """
        Write the grid as a PNG file.

        The image is encoded into a uniquely named temporary file beside
        `path` and renamed over it, so a failed save never leaves a truncated
        image behind. Raises OSError when the destination cannot be written.
        """
        path = os.fspath(path)
        img = self.to_image()
        fd, tmp_path = tempfile.mkstemp(
            dir=os.path.dirname(path) or ".",
            prefix=os.path.basename(path) + ".",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as f:
                img.save(f, format="PNG")
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        logger.debug("saved %dx%d framebuffer to %s", self.width, self.height, path)

    def to_text(self, glyphs, step=1):
        """Text preview: one glyph per sampled pixel, every `step`-th row/column."""
        step = max(1, int(step))
        lines = []
        for y in range(0, self.height, step):
            row = self.pixels[y]
            lines.append("".join(glyphs.get(row[x], UNKNOWN_GLYPH) for x in range(0, self.width, step)))
        return "\n".join(lines)
