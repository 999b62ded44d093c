from __future__ import annotations

from typing import Optional


class CanvasError(Exception):
    pass


# Raised for cells that are not allocated yet, and for negative coordinates
class OutOfRange(CanvasError, IndexError):
    def __init__(self, x: int, y: int, index: int, allocated: int):
        self.x = x
        self.y = y
        self.index = index
        self.allocated = allocated
        super().__init__(
            f"pixel ({x}, {y}) maps to cell {index}, "
            f"but only {allocated} cells are allocated"
        )


class InvalidDimensions(CanvasError, ValueError):
    def __init__(
        self,
        width: object,
        height: object,
        reason: str,
        shape: Optional[tuple[int, ...]] = None,
    ):
        self.width = width
        self.height = height
        # Shape of the rejected frame, for array input
        self.shape = shape
        dims = f"shape {shape}" if shape is not None else f"({width!r}, {height!r})"
        super().__init__(f"invalid canvas dimensions {dims}: {reason}")
