"""
Static glyph table: one 7-row pixel matrix per supported character.

Rows run top to bottom and map to weekdays Sunday..Saturday on the
contribution graph; columns map to weeks. Every glyph is written as seven
strings of '0'/'1' and parsed once at import time.
"""

from typing import Dict, Optional, Tuple

GLYPH_HEIGHT = 7

Matrix = Tuple[Tuple[int, ...], ...]

# ---------- raw patterns ----------

_LETTERS = {
    'A': ["01110",
          "10001",
          "10001",
          "11111",
          "10001",
          "10001",
          "10001"],
    'B': ["11110",
          "10001",
          "10001",
          "11110",
          "10001",
          "10001",
          "11110"],
    'C': ["01110",
          "10001",
          "10000",
          "10000",
          "10000",
          "10001",
          "01110"],
    'D': ["11110",
          "10001",
          "10001",
          "10001",
          "10001",
          "10001",
          "11110"],
    'E': ["11111",
          "10000",
          "10000",
          "11110",
          "10000",
          "10000",
          "11111"],
    'F': ["11111",
          "10000",
          "10000",
          "11110",
          "10000",
          "10000",
          "10000"],
    'G': ["01110",
          "10001",
          "10000",
          "10111",
          "10001",
          "10001",
          "01110"],
    'H': ["10001",
          "10001",
          "10001",
          "11111",
          "10001",
          "10001",
          "10001"],
    'I': ["11111",
          "00100",
          "00100",
          "00100",
          "00100",
          "00100",
          "11111"],
    'J': ["00111",
          "00010",
          "00010",
          "00010",
          "00010",
          "10010",
          "01100"],
    'K': ["10001",
          "10010",
          "10100",
          "11000",
          "10100",
          "10010",
          "10001"],
    'L': ["10000",
          "10000",
          "10000",
          "10000",
          "10000",
          "10000",
          "11111"],
    'M': ["10001",
          "11011",
          "10101",
          "10001",
          "10001",
          "10001",
          "10001"],
    'N': ["10001",
          "11001",
          "10101",
          "10011",
          "10001",
          "10001",
          "10001"],
    'O': ["01110",
          "10001",
          "10001",
          "10001",
          "10001",
          "10001",
          "01110"],
    'P': ["11110",
          "10001",
          "10001",
          "11110",
          "10000",
          "10000",
          "10000"],
    'Q': ["01110",
          "10001",
          "10001",
          "10001",
          "10101",
          "10010",
          "01101"],
    'R': ["11110",
          "10001",
          "10001",
          "11110",
          "10100",
          "10010",
          "10001"],
    'S': ["01111",
          "10000",
          "10000",
          "01110",
          "00001",
          "00001",
          "11110"],
    'T': ["11111",
          "00100",
          "00100",
          "00100",
          "00100",
          "00100",
          "00100"],
    'U': ["10001",
          "10001",
          "10001",
          "10001",
          "10001",
          "10001",
          "01110"],
    'V': ["10001",
          "10001",
          "10001",
          "10001",
          "10001",
          "01010",
          "00100"],
    'W': ["10001",
          "10001",
          "10001",
          "10001",
          "10101",
          "11011",
          "10001"],
    'X': ["10001",
          "10001",
          "01010",
          "00100",
          "01010",
          "10001",
          "10001"],
    'Y': ["10001",
          "01010",
          "00100",
          "00100",
          "00100",
          "00100",
          "00100"],
    'Z': ["11111",
          "00001",
          "00010",
          "00100",
          "01000",
          "10000",
          "11111"],
}

_DIGITS = {
    '0': ["01110",
          "10001",
          "10011",
          "10101",
          "11001",
          "10001",
          "01110"],
    '1': ["00100",
          "01100",
          "00100",
          "00100",
          "00100",
          "00100",
          "01110"],
    '2': ["01110",
          "10001",
          "00001",
          "00010",
          "00100",
          "01000",
          "11111"],
    '3': ["11110",
          "00001",
          "00001",
          "01110",
          "00001",
          "00001",
          "11110"],
    '4': ["00010",
          "00110",
          "01010",
          "10010",
          "11111",
          "00010",
          "00010"],
    '5': ["11111",
          "10000",
          "11110",
          "00001",
          "00001",
          "10001",
          "01110"],
    '6': ["00110",
          "01000",
          "10000",
          "11110",
          "10001",
          "10001",
          "01110"],
    '7': ["11111",
          "00001",
          "00010",
          "00100",
          "01000",
          "01000",
          "01000"],
    '8': ["01110",
          "10001",
          "10001",
          "01110",
          "10001",
          "10001",
          "01110"],
    '9': ["01110",
          "10001",
          "10001",
          "01111",
          "00001",
          "00010",
          "01100"],
}

_SYMBOLS = {
    ' ': ["000",
          "000",
          "000",
          "000",
          "000",
          "000",
          "000"],
    '!': ["1",
          "1",
          "1",
          "1",
          "1",
          "0",
          "1"],
    '.': ["0",
          "0",
          "0",
          "0",
          "0",
          "0",
          "1"],
    '-': ["000",
          "000",
          "000",
          "111",
          "000",
          "000",
          "000"],
    '+': ["000",
          "010",
          "010",
          "111",
          "010",
          "010",
          "000"],
    '?': ["01110",
          "10001",
          "00001",
          "00010",
          "00100",
          "00000",
          "00100"],
    '#': ["01010",
          "01010",
          "11111",
          "01010",
          "11111",
          "01010",
          "01010"],
    '<': ["0001",
          "0010",
          "0100",
          "1000",
          "0100",
          "0010",
          "0001"],
    '>': ["1000",
          "0100",
          "0010",
          "0001",
          "0010",
          "0100",
          "1000"],
    '/': ["00001",
          "00010",
          "00010",
          "00100",
          "01000",
          "01000",
          "10000"],
    ':': ["0",
          "0",
          "1",
          "0",
          "1",
          "0",
          "0"],
}


def _parse(char: str, rows) -> Matrix:
    if len(rows) != GLYPH_HEIGHT:
        raise ValueError(f"glyph {char!r} has {len(rows)} rows, expected {GLYPH_HEIGHT}")
    width = len(rows[0])
    if width < 1 or any(len(r) != width for r in rows):
        raise ValueError(f"glyph {char!r} rows must share a width >= 1")
    return tuple(tuple(int(bit) for bit in row) for row in rows)


GLYPHS: Dict[str, Matrix] = {
    char: _parse(char, rows)
    for table in (_LETTERS, _DIGITS, _SYMBOLS)
    for char, rows in table.items()
}


def lookup(char: str) -> Optional[Matrix]:
    """Glyph matrix for `char`, or None when the character is unsupported."""
    return GLYPHS.get(char)


def glyph_width(char: str) -> int:
    glyph = GLYPHS.get(char)
    return len(glyph[0]) if glyph else 0


def supported_characters() -> str:
    return ''.join(sorted(GLYPHS))
