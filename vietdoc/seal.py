"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/seal.py
Version:        1.0.0
Description:    Fixed geometry of the circular company seal and the pure
                layout maths behind it: glyph placement along the top and
                bottom arcs, and word wrapping of the centred company name.
                All coordinates are in the seal's own 170 x 170 px box.
------------------------------------------------------------------------------
"""

import math
from typing import Callable, List, NamedTuple, Sequence, Tuple

SEAL_SIZE = 170.0
SEAL_CENTER: Tuple[float, float] = (85.0, 85.0)
SEAL_COLOR = "#dc2626"
SEAL_OPACITY = 0.9
SEAL_ROTATION_DEG = -15.0

# (radius, stroke width) from outside to inside
SEAL_RINGS: Tuple[Tuple[float, float], ...] = ((80.0, 5.0), (70.0, 1.0), (46.0, 1.0))

STAR_GLYPH = "★"
STAR_SIZE_PX = 14.0
# Arc end points, i.e. 9 and 3 o'clock on the text radius
STAR_POSITIONS: Tuple[Tuple[float, float], ...] = ((27.0, 85.0), (143.0, 85.0))

ARC_RADIUS = 58.0
ARC_FONT_SIZE_PX = 13.0
ARC_FONT_FAMILIES: Tuple[str, ...] = ("Arial", "Liberation Sans", "sans-serif")
ARC_LETTER_SPACING = 0.5

# x, y, width, height of the box holding the company name
CENTER_BOX: Tuple[float, float, float, float] = (40.0, 40.0, 90.0, 90.0)
CENTER_PADDING_X = 4.0
CENTER_FONT_SIZE_PX = 11.0
CENTER_LINE_HEIGHT = 1.25
CENTER_FONT_FAMILIES: Tuple[str, ...] = ("Times New Roman", "Liberation Serif", "serif")

# Placement relative to the signer's overlay box
SEAL_OFFSET_TOP = -16.0
SEAL_OFFSET_FROM_CENTER = -110.0


class GlyphPlacement(NamedTuple):
    """Centre point of one glyph on an arc and its rotation (clockwise degrees)."""
    char: str
    x: float
    y: float
    angle_deg: float


def top_arc_text(tax_code: str) -> str:
    return f"M.S.D.N: {tax_code}"


def bottom_arc_text(location: str) -> str:
    return f"T. {location.upper()}"


def arc_glyph_positions(
    text: str,
    advances: Sequence[float],
    *,
    top: bool = True,
    radius: float = ARC_RADIUS,
    center: Tuple[float, float] = SEAL_CENTER,
    letter_spacing: float = ARC_LETTER_SPACING,
) -> List[GlyphPlacement]:
    """
    Places glyphs along a half circle, centred on the arc midpoint.

    The top arc runs from 9 o'clock over 12 to 3 o'clock; the bottom arc runs
    from 9 o'clock under 6 to 3 o'clock. Both read left to right, and on the
    bottom arc glyph tops point to the centre.

    Args:
        text: The characters to place.
        advances: Horizontal advance of each character, in px.
        top: Upper arc if True, lower arc otherwise.
        radius: Arc radius in px.
        center: Circle centre in seal coordinates (y grows downwards).
        letter_spacing: Extra space between glyphs, in px.

    Returns:
        One GlyphPlacement per character.
    """
    if len(advances) != len(text):
        raise ValueError("advances must have one entry per character")
    if not text:
        return []

    cx, cy = center
    total = sum(advances) + letter_spacing * (len(text) - 1)
    arc_length = math.pi * radius
    distance = (arc_length - total) / 2

    placements: List[GlyphPlacement] = []
    for char, advance in zip(text, advances):
        mid = distance + advance / 2
        if top:
            phi = math.pi - mid / radius
            dx, dy = math.sin(phi), math.cos(phi)
        else:
            phi = math.pi + mid / radius
            dx, dy = -math.sin(phi), -math.cos(phi)

        x = cx + radius * math.cos(phi)
        y = cy - radius * math.sin(phi)
        angle = math.degrees(math.atan2(dy, dx))
        placements.append(GlyphPlacement(char, x, y, angle))
        distance += advance + letter_spacing

    return placements


def wrap_text(text: str, max_width: float, measure: Callable[[str], float]) -> List[str]:
    """
    Greedy word wrap. Words wider than max_width are broken between characters.

    Args:
        text: Text to wrap; runs of whitespace collapse to one space.
        max_width: Available line width.
        measure: Returns the rendered width of a string.

    Returns:
        The wrapped lines (empty list for blank text).
    """
    lines: List[str] = []
    current = ""

    for word in text.split():
        if measure(word) > max_width:
            if current:
                lines.append(current)
            chunk = ""
            for char in word:
                if chunk and measure(chunk + char) > max_width:
                    lines.append(chunk)
                    chunk = char
                else:
                    chunk += char
            current = chunk
            continue

        candidate = f"{current} {word}" if current else word
        if measure(candidate) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)
    return lines


def seal_origin(column_center_x: float, overlay_top: float) -> Tuple[float, float]:
    """Top-left corner of the seal box on the page."""
    return column_center_x + SEAL_OFFSET_FROM_CENTER, overlay_top + SEAL_OFFSET_TOP
