"""Compose a message into one 7-row pixel grid, one column per week."""

import warnings
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import UnsupportedCharacterWarning
from .glyphs import GLYPH_HEIGHT, lookup

DAY_NAMES = ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')


@dataclass(frozen=True)
class Grid:
    """
    Immutable 0/1 matrix indexed as grid[day][week].

    `skipped` keeps the characters that had no glyph, in message order.
    """

    rows: Tuple[Tuple[int, ...], ...]
    skipped: Tuple[str, ...] = ()

    def __getitem__(self, day):
        return self.rows[day]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def active_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (week, day) for every on cell, column by column."""
        for week in range(self.width):
            for day in range(self.height):
                if self.rows[day][week]:
                    yield week, day

    @property
    def active_count(self) -> int:
        return sum(sum(row) for row in self.rows)

    def render(self, on='█', off=' ') -> str:
        return '\n'.join(''.join(on if bit else off for bit in row) for row in self.rows)


def normalize(message: str) -> str:
    return message.upper()


def compose(message: str) -> Grid:
    """
    Lay out the glyphs of `message` left to right with a one-column gap
    between consecutive supported characters.

    Unsupported characters raise UnsupportedCharacterWarning and are left
    out entirely. An empty result is a zero-width grid; deciding whether that
    is acceptable is up to the caller.
    """
    glyphs = []
    skipped = []
    for char in normalize(message):
        glyph = lookup(char)
        if glyph is None:
            warnings.warn(UnsupportedCharacterWarning(char), stacklevel=2)
            skipped.append(char)
            continue
        glyphs.append(glyph)

    rows = [[] for _ in range(GLYPH_HEIGHT)]
    for i, glyph in enumerate(glyphs):
        for day in range(GLYPH_HEIGHT):
            rows[day].extend(glyph[day])
            if i < len(glyphs) - 1:
                rows[day].append(0)

    return Grid(rows=tuple(tuple(r) for r in rows), skipped=tuple(skipped))


def message_width(message: str) -> int:
    """Width in weeks `compose(message)` would produce, without warnings."""
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', UnsupportedCharacterWarning)
        return compose(message).width
