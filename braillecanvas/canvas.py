from __future__ import annotations

import logging
import operator
from typing import Iterator

import numpy as np
import numpy.typing as npt
from rich import text

from .brail import DOT_COLS, DOT_ROWS, batched, brail_chr, brail_line, dot_bit, dots
from .errors import InvalidDimensions, OutOfRange


logger = logging.getLogger(__name__)


# Pixel (x, y) lives in cell (x // 2) * cell_width + y // 4. Drawing outside
# the nominal dimensions grows the canvas, but rows wrap once y // 4 reaches
# cell_width.
class Canvas:
    def __init__(self, width: int, height: int):
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError:
            raise InvalidDimensions(
                width, height, "dimensions must be integers"
            ) from None
        if width < DOT_COLS or height < DOT_ROWS:
            raise InvalidDimensions(
                width, height, f"need at least {DOT_COLS}x{DOT_ROWS} pixels"
            )
        self.cell_width = width // DOT_COLS
        self.cell_height = height // DOT_ROWS
        self.cells = bytearray()

    @classmethod
    def from_array(cls, frame: npt.ArrayLike) -> Canvas:
        # frame is indexed [y, x]; every truthy pixel is set
        pixels = np.asarray(frame)
        if pixels.ndim != 2:
            raise InvalidDimensions(
                None,
                None,
                f"expected a 2-D frame, got {pixels.ndim}-D",
                shape=pixels.shape,
            )
        height, width = pixels.shape
        # Wide enough that every y // 4 stays below cell_width, so no pixels alias
        canvas = cls(max(width, DOT_COLS * -(-height // DOT_ROWS)), height)
        for y, x in np.argwhere(pixels):
            canvas.set(int(x), int(y))
        return canvas

    def _index(self, x: int, y: int) -> int:
        index = (x // DOT_COLS) * self.cell_width + y // DOT_ROWS
        if x < 0 or y < 0:
            raise OutOfRange(x, y, index, len(self.cells))
        return index

    def _grow(self, index: int):
        if index >= len(self.cells):
            logger.debug(
                "Growing canvas from %d to %d cells", len(self.cells), index + 1
            )
            self.cells.extend(bytes(index + 1 - len(self.cells)))

    def clear(self):
        logger.debug("Clearing %d cells", len(self.cells))
        self.cells.clear()

    def set(self, x: int, y: int):
        index = self._index(x, y)
        self._grow(index)
        self.cells[index] |= dot_bit(x, y)

    def unset(self, x: int, y: int):
        index = self._index(x, y)
        # An unallocated cell is already blank
        if index < len(self.cells):
            self.cells[index] &= ~dot_bit(x, y) & 0xFF

    def toggle(self, x: int, y: int):
        index = self._index(x, y)
        self._grow(index)
        self.cells[index] ^= dot_bit(x, y)

    def get(self, x: int, y: int) -> bool:
        index = self._index(x, y)
        if index >= len(self.cells):
            raise OutOfRange(x, y, index, len(self.cells))
        return self.cells[index] & dot_bit(x, y) != 0

    def rows(self) -> list[str]:
        return [brail_line(row) for row in batched(self.cells, self.cell_width)]

    def render(self) -> str:
        # A newline precedes every row, including the first
        out = []
        for i, mask in enumerate(self.cells):
            if i % self.cell_width == 0:
                out.append("\n")
            out.append(brail_chr(mask))
        return "".join(out)

    def to_array(self) -> npt.NDArray[np.bool_]:
        rows = -(-len(self.cells) // self.cell_width)
        pixels = np.zeros((self.cell_width * DOT_ROWS, rows * DOT_COLS), dtype=bool)
        for x, y in self:
            pixels[y, x] = True
        return pixels

    def copy(self) -> Canvas:
        other = type(self).__new__(type(self))
        other.cell_width = self.cell_width
        other.cell_height = self.cell_height
        other.cells = bytearray(self.cells)
        return other

    def __iter__(self) -> Iterator[tuple[int, int]]:
        # Lit pixels as (x, y), in cell order
        for index, mask in enumerate(self.cells):
            row, col = divmod(index, self.cell_width)
            for dx, dy in dots(mask):
                yield row * DOT_COLS + dx, col * DOT_ROWS + dy

    def __len__(self):
        return len(self.cells)

    def __eq__(self, other: object):
        if not isinstance(other, Canvas):
            return NotImplemented
        return (self.cell_width, self.cell_height, self.cells) == (
            other.cell_width,
            other.cell_height,
            other.cells,
        )

    def __str__(self):
        return self.render()

    def __repr__(self):
        return (
            f"Canvas(cell_width={self.cell_width}, cell_height={self.cell_height}, "
            f"cells={len(self.cells)})"
        )

    def __rich__(self) -> text.Text:
        return text.Text("\n".join(self.rows()))
