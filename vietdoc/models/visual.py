"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/models/visual.py
Version:        1.0.0
Description:    Node types of the rendered visual tree. All nodes are frozen
                pydantic models so two renders of the same input compare
                equal structurally.
------------------------------------------------------------------------------
"""

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from vietdoc.models.style import Border, NO_BORDER, StyleDescriptor
from vietdoc.models.types import (
    Alignment, DocumentType, FontWeight, HeaderLayout, SignatureLayout
)
from vietdoc.seal import SEAL_COLOR, SEAL_OPACITY, SEAL_ROTATION_DEG, SEAL_SIZE


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextStyle(_Node):
    """Inline text emphasis. None means 'inherit from the page'."""
    size_pt: Optional[float] = None
    weight: FontWeight = FontWeight.NORMAL
    italic: bool = False
    uppercase: bool = False
    tracking_em: float = 0.0
    color: Optional[str] = None
    underline_px: float = 0.0
    dotted_underline: bool = False


PLAIN = TextStyle()


class Text(_Node):
    kind: Literal["text"] = "text"
    text: str
    style: TextStyle = PLAIN

    @property
    def display_text(self) -> str:
        return self.text.upper() if self.style.uppercase else self.text


# --- Content items ---

class LabeledRow(_Node):
    """'Label:' followed by a dotted-underlined value filling the line."""
    kind: Literal["row"] = "row"
    label: str
    value: Text
    gap_before: bool = False


class Statement(_Node):
    """Indented justified sentence, optionally ending in an emphasised name."""
    kind: Literal["statement"] = "statement"
    lead: str
    emphasis: Optional[str] = None


class SectionHeading(_Node):
    kind: Literal["heading"] = "heading"
    text: str
    gap_before: bool = False


class FramedText(_Node):
    kind: Literal["frame"] = "frame"
    text: str
    min_height_px: float = 150.0


class Note(_Node):
    kind: Literal["note"] = "note"
    text: str


ContentItem = Annotated[
    Union[LabeledRow, Statement, SectionHeading, FramedText, Note],
    Field(discriminator="kind"),
]


# --- Blocks ---

class HeaderBlock(_Node):
    layout: HeaderLayout
    company_lines: Tuple[Text, ...]
    motto_lines: Tuple[Text, ...]
    company_align: Alignment
    motto_align: Alignment
    company_width: float
    motto_width: float
    margin_px: float
    rule: Border = NO_BORDER
    padding_px: float = 0.0


class TitleBlock(_Node):
    text: str
    align: Alignment
    style: TextStyle
    salutation: Optional[str] = None


class ContentBlock(_Node):
    variant: DocumentType
    items: Tuple[ContentItem, ...]


class SignatureGlyph(_Node):
    """Handwritten-style rendering of the signer's last name token."""
    kind: Literal["signature"] = "signature"
    text: str
    rotation_deg: float = -5.0
    color: str = "#1e3a8a"
    size_px: float = 36.0
    bottom_offset_px: float = 48.0


class SealGraphic(_Node):
    """Circular company seal; geometry is fixed, only the texts vary."""
    kind: Literal["seal"] = "seal"
    top_text: str
    bottom_text: str
    center_text: str
    size_px: float = SEAL_SIZE
    rotation_deg: float = SEAL_ROTATION_DEG
    color: str = SEAL_COLOR
    opacity: float = SEAL_OPACITY


class SignatureColumn(_Node):
    heading: str = ""
    heading_gap_px: float = 16.0
    name: str = ""
    name_uppercase: bool = False
    width_fraction: float = 0.5
    overlay_height_px: float = 0.0
    seal: Optional[SealGraphic] = None
    signature: Optional[SignatureGlyph] = None

    @property
    def overlays(self) -> Tuple[Union[SealGraphic, SignatureGlyph], ...]:
        """Overlays in paint order: the seal lies beneath the signature."""
        return tuple(o for o in (self.seal, self.signature) if o is not None)


class SignatureBlock(_Node):
    layout: SignatureLayout
    columns: Tuple[SignatureColumn, ...]


class VisualTree(_Node):
    page_width_mm: float = 210.0
    page_height_mm: float = 297.0
    style: StyleDescriptor
    header: HeaderBlock
    title: TitleBlock
    content: ContentBlock
    signature: SignatureBlock
