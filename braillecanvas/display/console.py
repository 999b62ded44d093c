from __future__ import annotations

from typing import Optional

from rich import console, text

from ..brail import ascii_chr, batched, brail_chr
from ..canvas import Canvas
from ..config import DisplayConfig


def render_text(canvas: Canvas, config: DisplayConfig = DisplayConfig()) -> text.Text:
    encode = brail_chr if config.use_braille else ascii_chr
    lines = (
        "".join(encode(mask) for mask in row)
        for row in batched(canvas.cells, canvas.cell_width)
    )
    return text.Text("\n".join(lines), style=config.style)


def show(
    canvas: Canvas,
    config: Optional[DisplayConfig] = None,
    out: Optional[console.Console] = None,
):
    config = config or DisplayConfig.detect_terminal()
    (out or console.Console()).print(render_text(canvas, config))
