"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/models/style.py
Version:        1.0.0
Description:    StyleDescriptor: the resolved, closed set of layout and
                typography parameters for one format variant. Spacing is in
                CSS pixels (96 dpi), type sizes in points.
------------------------------------------------------------------------------
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from vietdoc.models.types import Alignment, BorderKind, FontWeight, HeaderLayout


class Border(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: BorderKind = BorderKind.NONE
    width_px: float = 0.0
    color: str = "#000000"


NO_BORDER = Border()


class StyleDescriptor(BaseModel):
    """Visual parameters consumed by the renderer and the page painter."""
    model_config = ConfigDict(frozen=True)

    name: str = "Standard"

    # Container
    font_families: Tuple[str, ...] = ("Times New Roman", "Liberation Serif", "serif")
    font_size_pt: float = 11.0
    line_height: float = 1.625
    padding_px: float = 48.0
    border: Border = NO_BORDER

    # Header
    header_layout: HeaderLayout = HeaderLayout.SIDE_BY_SIDE
    header_margin_px: float = 32.0
    header_rule: Border = NO_BORDER
    header_padding_px: float = 0.0
    company_align: Alignment = Alignment.CENTER
    motto_align: Alignment = Alignment.CENTER
    header_weight: FontWeight = FontWeight.NORMAL
    header_color: str = "#000000"
    header_uppercase: bool = False
    header_tracking_em: float = 0.0
    header_title_weight: FontWeight = FontWeight.BOLD
    header_title_size_pt: float = 11.0
    header_subtitle_weight: FontWeight = FontWeight.BOLD
    header_subtitle_size_pt: float = 12.0
    header_subtitle_underline_px: float = 1.0
    company_width: float = 5 / 12
    motto_width: float = 6 / 12

    # Title
    title_align: Alignment = Alignment.CENTER
    title_size_pt: float = 18.0
    title_weight: FontWeight = FontWeight.BOLD
    title_tracking_em: float = 0.0
