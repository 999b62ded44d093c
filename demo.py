import logging
import math

import numpy as np

import braillecanvas


def sine_frame(width: int, height: int, periods: float = 2.0):
    xs = np.arange(width)
    ys = (height - 1) * (1 - np.sin(2 * math.pi * periods * xs / width)) / 2
    frame = np.zeros((height, width), dtype=bool)
    frame[ys.round().astype(int), xs] = True
    return frame


def main():
    # Index mapping stacks x bands as text lines, so the curve reads top to bottom
    canvas = braillecanvas.Canvas.from_array(sine_frame(40, 80))
    for y in range(0, 80, 8):
        canvas.toggle(0, y)
    braillecanvas.show(canvas)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
