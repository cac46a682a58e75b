"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/formats.py
Version:        1.0.0
Description:    Format resolver. Maps a numeric format id to a StyleDescriptor
                through a data table of partial overrides on a fixed base.
                Unknown ids resolve to the base style; resolution never fails.
------------------------------------------------------------------------------
"""

from typing import Any, Dict, List

from vietdoc.models.style import Border, StyleDescriptor
from vietdoc.models.types import Alignment, BorderKind, FontWeight, HeaderLayout

SANS = ("Arial", "Helvetica", "Liberation Sans", "sans-serif")

# Format 1 ("Standard")
BASE_STYLE = StyleDescriptor()

FORMAT_OVERRIDES: Dict[int, Dict[str, Any]] = {
    2: {
        "name": "Bordered",
        "padding_px": 64.0,
        "border": Border(kind=BorderKind.DOUBLE, width_px=4.0),
    },
    3: {
        "name": "Modern Sans",
        "font_families": SANS,
        "font_size_pt": 10.0,
        "header_margin_px": 40.0,
        "header_rule": Border(kind=BorderKind.SOLID, width_px=2.0, color="#1f2937"),
        "header_padding_px": 16.0,
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "title_align": Alignment.LEFT,
        "header_subtitle_size_pt": 11.0,
    },
    4: {
        "name": "Classic Centered",
        "font_size_pt": 12.0,
        "line_height": 2.0,
        "header_layout": HeaderLayout.STACKED,
        "company_width": 1.0,
        "motto_width": 1.0,
        "header_title_size_pt": 13.0,
        "header_subtitle_size_pt": 13.0,
    },
    5: {
        "name": "Bold",
        "header_weight": FontWeight.BLACK,
        "title_tracking_em": 0.1,
        "header_title_weight": FontWeight.BLACK,
        "header_title_size_pt": 12.0,
        "header_subtitle_weight": FontWeight.BLACK,
        "header_subtitle_underline_px": 2.0,
        "title_size_pt": 22.5,
        "title_weight": FontWeight.BLACK,
    },
    6: {
        "name": "Thin Border",
        "border": Border(kind=BorderKind.SOLID, width_px=1.0, color="#6b7280"),
        "header_margin_px": 28.0,
        "header_subtitle_weight": FontWeight.SEMIBOLD,
    },
    7: {
        "name": "Wide Margin",
        "padding_px": 64.0,
        "header_margin_px": 40.0,
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "header_title_weight": FontWeight.SEMIBOLD,
    },
    8: {
        "name": "Compact",
        "font_size_pt": 10.0,
        "line_height": 1.375,
        "padding_px": 40.0,
        "header_margin_px": 24.0,
        "header_title_size_pt": 10.0,
        "header_subtitle_size_pt": 11.0,
        "title_size_pt": 15.0,
    },
    9: {
        "name": "Large Title",
        "header_margin_px": 24.0,
        "title_size_pt": 22.5,
    },
    10: {
        "name": "Serif Ruled",
        "border": Border(kind=BorderKind.RULES, width_px=2.0),
        "header_title_weight": FontWeight.SEMIBOLD,
    },
    11: {
        "name": "Modern Sans Light",
        "font_families": ("Helvetica Neue",) + SANS,
        "font_size_pt": 10.0,
        "header_rule": Border(kind=BorderKind.SOLID, width_px=1.0, color="#374151"),
        "header_padding_px": 12.0,
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "title_align": Alignment.LEFT,
        "header_title_weight": FontWeight.SEMIBOLD,
        "header_subtitle_size_pt": 11.0,
        "title_weight": FontWeight.SEMIBOLD,
    },
    12: {
        "name": "Modern Sans Bold",
        "font_families": ("Segoe UI",) + SANS,
        "font_size_pt": 10.0,
        "border": Border(kind=BorderKind.SOLID, width_px=1.0, color="#d1d5db"),
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "title_align": Alignment.LEFT,
        "header_weight": FontWeight.SEMIBOLD,
        "header_subtitle_size_pt": 11.0,
    },
    13: {
        "name": "Tall Header",
        "header_margin_px": 40.0,
        "header_title_size_pt": 12.0,
        "header_subtitle_size_pt": 13.0,
    },
    14: {
        "name": "Left Title Emphasis",
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "title_align": Alignment.LEFT,
        "header_title_weight": FontWeight.SEMIBOLD,
        "header_subtitle_weight": FontWeight.SEMIBOLD,
    },
    15: {
        "name": "Uppercase Header",
        "header_margin_px": 28.0,
        "header_uppercase": True,
        "header_tracking_em": 0.025,
    },
    16: {
        "name": "Soft Gray",
        "border": Border(kind=BorderKind.SOLID, width_px=1.0, color="#e5e7eb"),
        "header_color": "#374151",
        "header_title_weight": FontWeight.SEMIBOLD,
        "header_subtitle_weight": FontWeight.SEMIBOLD,
    },
    17: {
        "name": "Formal Serif",
        "font_families": ("Georgia", "Times New Roman", "Liberation Serif", "serif"),
        "font_size_pt": 12.0,
        "header_title_size_pt": 12.0,
        "header_subtitle_size_pt": 13.0,
    },
    18: {
        "name": "Classic Border",
        "border": Border(kind=BorderKind.SOLID, width_px=2.0),
    },
    19: {
        "name": "Double Bottom Header",
        "header_rule": Border(kind=BorderKind.DOUBLE, width_px=2.0),
        "header_padding_px": 8.0,
        "header_title_weight": FontWeight.SEMIBOLD,
    },
    20: {
        "name": "Tall Spacing",
        "line_height": 2.0,
        "header_margin_px": 40.0,
        "header_title_weight": FontWeight.SEMIBOLD,
        "header_subtitle_weight": FontWeight.SEMIBOLD,
    },
    21: {
        "name": "Compact Sans",
        "font_families": ("Tahoma", "Verdana", "DejaVu Sans", "sans-serif"),
        "font_size_pt": 10.0,
        "line_height": 1.375,
        "padding_px": 40.0,
        "header_margin_px": 24.0,
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "title_align": Alignment.LEFT,
        "header_title_weight": FontWeight.SEMIBOLD,
        "header_title_size_pt": 10.0,
        "header_subtitle_size_pt": 11.0,
        "title_size_pt": 15.0,
        "title_weight": FontWeight.SEMIBOLD,
    },
    22: {
        "name": "Formal Outline",
        "border": Border(kind=BorderKind.SOLID, width_px=1.0),
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "header_title_weight": FontWeight.SEMIBOLD,
        "header_subtitle_weight": FontWeight.SEMIBOLD,
    },
    23: {
        "name": "Condensed Title",
        "header_margin_px": 28.0,
        "title_tracking_em": 0.025,
        "header_title_weight": FontWeight.SEMIBOLD,
    },
    24: {
        "name": "Left Header, Center Title",
        "company_align": Alignment.LEFT,
        "motto_align": Alignment.RIGHT,
        "header_title_weight": FontWeight.SEMIBOLD,
    },
    25: {
        "name": "Compact Border",
        "font_size_pt": 10.0,
        "padding_px": 40.0,
        "border": Border(kind=BorderKind.SOLID, width_px=1.0, color="#9ca3af"),
        "header_margin_px": 24.0,
        "header_title_weight": FontWeight.SEMIBOLD,
        "header_title_size_pt": 10.0,
        "header_subtitle_weight": FontWeight.SEMIBOLD,
        "header_subtitle_size_pt": 11.0,
        "title_size_pt": 15.0,
        "title_weight": FontWeight.SEMIBOLD,
    },
}

# Descriptors are immutable, so every id resolves to one shared instance.
_RESOLVED: Dict[int, StyleDescriptor] = {
    format_id: BASE_STYLE.model_copy(update=overrides)
    for format_id, overrides in FORMAT_OVERRIDES.items()
}
_RESOLVED[1] = BASE_STYLE


def resolve(format_id: Any) -> StyleDescriptor:
    """
    Resolves a format id to its style descriptor.

    Args:
        format_id: Numeric format identifier. Anything not in the table,
                   including non-integers, yields the base style.

    Returns:
        The StyleDescriptor for the id.
    """
    try:
        return _RESOLVED.get(format_id, BASE_STYLE)
    except TypeError:
        # Unhashable input
        return BASE_STYLE


def known_format_ids() -> List[int]:
    return sorted(_RESOLVED)


def format_name(format_id: Any) -> str:
    return resolve(format_id).name
