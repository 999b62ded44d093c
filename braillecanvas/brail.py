import itertools
from typing import Final, Iterable, TypeVar

# Per https://en.wikipedia.org/wiki/Braille_Patterns
# the hex values of Brail unicode codes begin at 0x2800, and each
# of the 8 dots is present depending on the bit value of the final byte:
#
#   +-------------+
#   | 0x01 | 0x08 |
#   +-------------+
#   | 0x02 | 0x10 |
#   +-------------+
#   | 0x04 | 0x20 |
#   +-------------+
#   | 0x40 | 0x80 |
#   +-------------+

BRAILLE_OFFSET: Final[int] = 0x2800
DOT_COLS: Final[int] = 2
DOT_ROWS: Final[int] = 4

# Indexed as PIXEL_MAP[y % DOT_ROWS][x % DOT_COLS]
PIXEL_MAP: Final[tuple[tuple[int, int], ...]] = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

ASCII_RAMP: Final[str] = " .:-=+*#%@"


def dot_bit(x: int, y: int) -> int:
    return PIXEL_MAP[y % DOT_ROWS][x % DOT_COLS]


def dots(mask: int) -> Iterable[tuple[int, int]]:
    # Sub-cell (dx, dy) offsets of every lit dot, in PIXEL_MAP order
    for dy, row in enumerate(PIXEL_MAP):
        for dx, bit in enumerate(row):
            if mask & bit:
                yield dx, dy


def brail_chr(mask: int) -> str:
    if not 0 <= mask <= 0xFF:
        raise ValueError("Brail cell mask must be in range [0, 255]")
    return chr(BRAILLE_OFFSET + mask)


def ascii_chr(mask: int) -> str:
    # Density fallback for terminals without a Braille-capable font
    return ASCII_RAMP[min(bin(mask).count("1"), len(ASCII_RAMP) - 1)]


def brail_line(masks: Iterable[int]) -> str:
    return "".join(map(brail_chr, masks))


T = TypeVar("T")


def batched(it: Iterable[T], n: int):
    # Recipe taken from Python itertools, added in 3.12
    # batched('ABCDEFG', 3) → ABC DEF G
    it = iter(it)
    while batch := tuple(itertools.islice(it, n)):
        yield batch
