"""
5x7 bitmap font used to arrange particles into text.
"""
from typing import Dict, List

import numpy as np

GRID_WIDTH = 5
GRID_HEIGHT = 7
FALLBACK_CHAR = "?"

FONT_DATA: Dict[str, List[str]] = {
    " ": ["00000", "00000", "00000", "00000", "00000", "00000", "00000"],
    "?": ["01110", "10001", "00001", "00110", "00100", "00000", "00100"],
    "A": ["00100", "01010", "10001", "11111", "10001", "10001", "10001"],
    "B": ["11110", "10001", "10001", "11110", "10001", "10001", "11110"],
    "C": ["01110", "10001", "10000", "10000", "10000", "10001", "01110"],
    "D": ["11110", "10001", "10001", "10001", "10001", "10001", "11110"],
    "E": ["11111", "10000", "10000", "11110", "10000", "10000", "11111"],
    "F": ["11111", "10000", "10000", "11110", "10000", "10000", "10000"],
    "G": ["01110", "10001", "10000", "10011", "10001", "10001", "01110"],
    "H": ["10001", "10001", "10001", "11111", "10001", "10001", "10001"],
    "I": ["11111", "00100", "00100", "00100", "00100", "00100", "11111"],
    "J": ["00111", "00010", "00010", "00010", "00010", "10010", "01100"],
    "K": ["10001", "10010", "10100", "11000", "10100", "10010", "10001"],
    "L": ["10000", "10000", "10000", "10000", "10000", "10000", "11111"],
    "M": ["11011", "11111", "11011", "10001", "10001", "10001", "10001"],
    "N": ["10001", "11001", "10101", "10011", "10001", "10001", "10001"],
    "O": ["01110", "10001", "10001", "10001", "10001", "10001", "01110"],
    "P": ["11110", "10001", "10001", "11110", "10000", "10000", "10000"],
    "Q": ["01110", "10001", "10001", "10001", "10101", "10011", "01111"],
    "R": ["11110", "10001", "10001", "11110", "10100", "10010", "10001"],
    "S": ["01110", "10001", "10000", "01110", "00001", "10001", "01110"],
    "T": ["11111", "00100", "00100", "00100", "00100", "00100", "00100"],
    "U": ["10001", "10001", "10001", "10001", "10001", "10001", "01110"],
    "V": ["10001", "10001", "10001", "10001", "10001", "01010", "00100"],
    "W": ["10001", "10001", "10001", "10001", "10101", "11011", "10001"],
    "X": ["10001", "01010", "00100", "00100", "00100", "01010", "10001"],
    "Y": ["10001", "10001", "01010", "00100", "00100", "00100", "00100"],
    "Z": ["11111", "00001", "00010", "00100", "01000", "10000", "11111"],
}


def glyph_pattern(char: str) -> List[str]:
    """Bitmap rows for a character, falling back to '?'."""
    return FONT_DATA.get(char, FONT_DATA[FALLBACK_CHAR])


def count_on_cells(char: str) -> int:
    return sum(row.count("1") for row in glyph_pattern(char))


def glyph_points(char: str, width: float, height: float) -> np.ndarray:
    """
    Points for each lit cell of a character, with the grid centred on the origin.

    Args:
        char: Character to render
        width: Glyph slot width in world units
        height: Glyph height in world units

    Returns:
        Array of shape (k, 3), row-major over lit cells, z = 0
    """
    cell = min(width / GRID_WIDTH, height / GRID_HEIGHT)
    points = [
        ((col - (GRID_WIDTH - 1) / 2) * cell, ((GRID_HEIGHT - 1) / 2 - row) * cell, 0.0)
        for row, bits in enumerate(glyph_pattern(char))
        for col, bit in enumerate(bits)
        if bit == "1"
    ]
    return np.array(points, dtype=np.float32).reshape(-1, 3)
