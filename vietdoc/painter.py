"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/painter.py
Version:        1.0.0
Description:    Page painter. Lays out a VisualTree on a fixed A4 page and
                draws it with QPainter. All coordinates are CSS pixels
                (96 dpi); callers scale the painter for zoom or supersampling.
                The same pass measures and draws, so measured content height
                always matches what gets painted.
------------------------------------------------------------------------------
"""

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QFontMetricsF, QPainter, QPen

from vietdoc.fonts import DEFAULT_SIGNATURE_FAMILIES, make_font
from vietdoc.logger import get_logger
from vietdoc.models.style import Border
from vietdoc.models.types import Alignment, BorderKind, FontWeight, HeaderLayout
from vietdoc.models.visual import (
    FramedText, HeaderBlock, LabeledRow, Note, SealGraphic, SectionHeading,
    SignatureColumn, SignatureGlyph, Statement, Text, TextStyle, VisualTree, PLAIN
)
from vietdoc.seal import (
    ARC_FONT_FAMILIES, ARC_FONT_SIZE_PX, ARC_LETTER_SPACING, CENTER_BOX,
    CENTER_FONT_FAMILIES, CENTER_FONT_SIZE_PX, CENTER_LINE_HEIGHT,
    CENTER_PADDING_X, SEAL_CENTER, SEAL_RINGS, STAR_GLYPH, STAR_POSITIONS,
    STAR_SIZE_PX, arc_glyph_positions, seal_origin, wrap_text
)

logger = get_logger("render.painter")

PX_PER_MM = 96 / 25.4
PX_PER_PT = 96 / 72

TEXT_COLOR = "#000000"

# Layout metrics in px
CONTENT_INSET = 16.0
ITEM_SPACING = 16.0
GAP_EXTRA = 8.0
LABEL_MIN_WIDTH = 150.0
VALUE_PADDING = 8.0
STATEMENT_INDENT = 32.0
FRAME_PADDING = 16.0
HEADER_STACK_GAP = 16.0
UNDERLINE_PADDING = 4.0
UNDERLINE_MARGIN = 4.0
TITLE_MARGIN = 32.0
TITLE_GAP = 8.0
TITLE_LINE_HEIGHT = 1.33
NOTE_SIZE_PT = 11.0
SIGNATURE_MARGIN = 64.0
SIGNER_NAME_GAP = 4.0
SIGNATURE_LINE_HEIGHT = 40.0 / 36.0


def mm_to_px(mm: float) -> int:
    return round(mm * PX_PER_MM)


def pt_to_px(pt: float) -> float:
    return pt * PX_PER_PT


def _h_align(align: Alignment) -> Qt.AlignmentFlag:
    if align == Alignment.LEFT:
        return Qt.AlignmentFlag.AlignLeft
    if align == Alignment.RIGHT:
        return Qt.AlignmentFlag.AlignRight
    return Qt.AlignmentFlag.AlignHCenter


def _aligned_x(align: Alignment, x: float, width: float, used: float) -> float:
    if align == Alignment.LEFT:
        return x
    if align == Alignment.RIGHT:
        return x + width - used
    return x + (width - used) / 2


class PagePainter:
    """
    Draws one VisualTree. Pass painter=None to the private layout methods to
    measure without drawing.
    """

    def __init__(self, tree: VisualTree, signature_families: Sequence[str] = DEFAULT_SIGNATURE_FAMILIES):
        self.tree = tree
        self.style = tree.style
        self.signature_families = tuple(signature_families)
        self.page_width = mm_to_px(tree.page_width_mm)
        self.page_height = mm_to_px(tree.page_height_mm)

    # --- Public API ---

    def page_size_px(self) -> Tuple[int, int]:
        return self.page_width, self.page_height

    def content_height(self) -> int:
        """Full drawn height; at least one page, more if the content overflows."""
        bottom = self._layout(None)
        return max(self.page_height, math.ceil(bottom))

    def paint(self, painter: QPainter) -> None:
        height = self.content_height()
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.fillRect(QRectF(0, 0, self.page_width, height), QColor("white"))
        self._draw_page_border(painter, height)
        self._layout(painter)
        painter.restore()

        if height > self.page_height:
            logger.debug(f"Content overflows the page: {height}px > {self.page_height}px")

    # --- Fonts and primitives ---

    def _font(self, style: TextStyle, families: Optional[Iterable[str]] = None) -> QFont:
        size_pt = style.size_pt if style.size_pt is not None else self.style.font_size_pt
        size_px = pt_to_px(size_pt)
        font = make_font(families or self.style.font_families, size_px, int(style.weight), style.italic)
        if style.tracking_em:
            font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, style.tracking_em * size_px)
        return font

    def _line_px(self, font: QFont, line_height: Optional[float] = None) -> float:
        return font.pixelSize() * (line_height or self.style.line_height)

    def _text_block(self, painter: Optional[QPainter], text: str, font: QFont, color: str,
                    x: float, y: float, width: float, align: Alignment,
                    line_height: Optional[float] = None) -> Tuple[float, float]:
        """
        Wraps and draws text. Returns (height, widest line).
        """
        metrics = QFontMetricsF(font)
        lines = wrap_text(text, width, metrics.horizontalAdvance) or [""]
        step = self._line_px(font, line_height)
        if painter is not None:
            painter.setFont(font)
            painter.setPen(QColor(color))
            flags = _h_align(align) | Qt.AlignmentFlag.AlignVCenter
            for i, line in enumerate(lines):
                painter.drawText(QRectF(x, y + i * step, width, step), flags, line)
        widest = max(metrics.horizontalAdvance(line) for line in lines)
        return step * len(lines), widest

    def _hline(self, painter: QPainter, x1: float, x2: float, y: float, border: Border) -> None:
        """Horizontal rule whose top edge sits at y."""
        color = QColor(border.color)
        if border.kind == BorderKind.DOUBLE:
            stroke = border.width_px / 3
            for offset in (stroke / 2, border.width_px - stroke / 2):
                painter.setPen(QPen(color, stroke))
                painter.drawLine(QPointF(x1, y + offset), QPointF(x2, y + offset))
        else:
            painter.setPen(QPen(color, border.width_px))
            mid = y + border.width_px / 2
            painter.drawLine(QPointF(x1, mid), QPointF(x2, mid))

    # --- Layout ---

    def _insets(self) -> Tuple[float, float]:
        """Horizontal and vertical distance from the page edge to the content box."""
        border = self.style.border
        pad = self.style.padding_px
        if border.kind in (BorderKind.SOLID, BorderKind.DOUBLE):
            return border.width_px + pad, border.width_px + pad
        if border.kind == BorderKind.RULES:
            return pad, border.width_px + pad
        return pad, pad

    def _layout(self, painter: Optional[QPainter]) -> float:
        inset_x, inset_y = self._insets()
        x = inset_x
        width = self.page_width - 2 * inset_x

        y = inset_y
        y = self._header(painter, self.tree.header, x, y, width)
        y = self._title(painter, x, y, width)
        y = self._content(painter, x + CONTENT_INSET, y, width - 2 * CONTENT_INSET)
        y = self._signatures(painter, x + CONTENT_INSET, y, width - 2 * CONTENT_INSET)
        return y + inset_y

    def _draw_page_border(self, painter: QPainter, height: float) -> None:
        border = self.style.border
        if border.kind == BorderKind.NONE or border.width_px <= 0:
            return
        color = QColor(border.color)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        if border.kind == BorderKind.RULES:
            self._hline(painter, 0, self.page_width, 0, border)
            self._hline(painter, 0, self.page_width, height - border.width_px, border)
            return

        if border.kind == BorderKind.DOUBLE:
            stroke = border.width_px / 3
            insets = (stroke / 2, border.width_px - stroke / 2)
        else:
            stroke = border.width_px
            insets = (stroke / 2,)
        painter.setPen(QPen(color, stroke))
        for inset in insets:
            painter.drawRect(QRectF(inset, inset, self.page_width - 2 * inset, height - 2 * inset))

    # --- Header ---

    def _header_column(self, painter: Optional[QPainter], lines: Tuple[Text, ...],
                       x: float, y: float, width: float, align: Alignment) -> float:
        start = y
        for line in lines:
            font = self._font(line.style)
            color = line.style.color or TEXT_COLOR
            height, used = self._text_block(painter, line.display_text, font, color, x, y, width, align)
            y += height
            if line.style.underline_px > 0:
                y += UNDERLINE_PADDING
                if painter is not None:
                    rule = Border(kind=BorderKind.SOLID, width_px=line.style.underline_px, color=color)
                    left = _aligned_x(align, x, width, used)
                    self._hline(painter, left, left + used, y, rule)
                y += line.style.underline_px + UNDERLINE_MARGIN
        return y - start

    def _header(self, painter: Optional[QPainter], header: HeaderBlock,
                x: float, y: float, width: float) -> float:
        company_w = width * header.company_width
        motto_w = width * header.motto_width

        if header.layout == HeaderLayout.STACKED:
            company_h = self._header_column(painter, header.company_lines, x, y, company_w, header.company_align)
            motto_h = self._header_column(
                painter, header.motto_lines, x, y + company_h + HEADER_STACK_GAP, motto_w, header.motto_align
            )
            height = company_h + HEADER_STACK_GAP + motto_h
        else:
            company_h = self._header_column(painter, header.company_lines, x, y, company_w, header.company_align)
            motto_h = self._header_column(
                painter, header.motto_lines, x + width - motto_w, y, motto_w, header.motto_align
            )
            height = max(company_h, motto_h)

        y += height
        if header.rule.kind != BorderKind.NONE:
            y += header.padding_px
            if painter is not None:
                self._hline(painter, x, x + width, y, header.rule)
            y += header.rule.width_px
        return y + header.margin_px

    # --- Title ---

    def _title(self, painter: Optional[QPainter], x: float, y: float, width: float) -> float:
        title = self.tree.title
        y += TITLE_MARGIN
        font = self._font(title.style)
        height, _ = self._text_block(
            painter, title.text.upper(), font, TEXT_COLOR, x, y, width, title.align, TITLE_LINE_HEIGHT
        )
        y += height + TITLE_GAP
        if title.salutation:
            font = self._font(TextStyle(italic=True))
            height, _ = self._text_block(painter, title.salutation, font, TEXT_COLOR, x, y, width, title.align)
            y += height
        return y + TITLE_MARGIN

    # --- Content ---

    def _content(self, painter: Optional[QPainter], x: float, y: float, width: float) -> float:
        for index, item in enumerate(self.tree.content.items):
            if index:
                y += ITEM_SPACING
            if getattr(item, "gap_before", False):
                y += GAP_EXTRA

            if isinstance(item, LabeledRow):
                y += self._row(painter, item, x, y, width)
            elif isinstance(item, Statement):
                y += self._statement(painter, item, x, y, width)
            elif isinstance(item, SectionHeading):
                font = self._font(TextStyle(weight=FontWeight.BOLD))
                y += self._text_block(painter, item.text, font, TEXT_COLOR, x, y, width, Alignment.LEFT)[0]
            elif isinstance(item, FramedText):
                y += self._frame(painter, item, x, y, width)
            elif isinstance(item, Note):
                font = self._font(TextStyle(size_pt=NOTE_SIZE_PT, italic=True))
                y += self._text_block(painter, item.text, font, TEXT_COLOR, x, y, width, Alignment.LEFT)[0]
        return y

    def _row(self, painter: Optional[QPainter], row: LabeledRow, x: float, y: float, width: float) -> float:
        label_font = self._font(PLAIN)
        value_font = self._font(row.value.style)
        label_w = max(LABEL_MIN_WIDTH, QFontMetricsF(label_font).horizontalAdvance(row.label))
        value_x = x + label_w
        inner_w = max(1.0, width - label_w - VALUE_PADDING)

        value_metrics = QFontMetricsF(value_font)
        lines = wrap_text(row.value.display_text, inner_w, value_metrics.horizontalAdvance) or [""]
        step = self._line_px(value_font)
        height = max(self._line_px(label_font), step * len(lines))

        if painter is not None:
            painter.setPen(QColor(TEXT_COLOR))
            painter.setFont(label_font)
            painter.drawText(
                QRectF(x, y, label_w, self._line_px(label_font)),
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
                row.label,
            )
            painter.setFont(value_font)
            for i, line in enumerate(lines):
                painter.drawText(
                    QRectF(value_x + VALUE_PADDING, y + i * step, inner_w, step),
                    Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
                    line,
                )
            pen = QPen(QColor(TEXT_COLOR), 1)
            pen.setStyle(Qt.PenStyle.DotLine)
            painter.setPen(pen)
            painter.drawLine(QPointF(value_x, y + height + 0.5), QPointF(x + width, y + height + 0.5))

        return height + 1

    def _statement(self, painter: Optional[QPainter], item: Statement, x: float, y: float, width: float) -> float:
        """Justified paragraph with a first-line indent and an emphasised tail."""
        plain = self._font(PLAIN)
        strong = self._font(TextStyle(weight=FontWeight.BOLD))
        words = [(w, plain) for w in item.lead.split()]
        if item.emphasis:
            words += [(w, strong) for w in item.emphasis.upper().split()]

        space = QFontMetricsF(plain).horizontalAdvance(" ")
        step = self._line_px(plain)

        lines: List[List[Tuple[str, QFont, float]]] = [[]]
        used = 0.0
        for word, font in words:
            advance = QFontMetricsF(font).horizontalAdvance(word)
            avail = width - (STATEMENT_INDENT if len(lines) == 1 else 0)
            needed = advance if not lines[-1] else used + space + advance
            if lines[-1] and needed > avail:
                lines.append([])
                needed = advance
            lines[-1].append((word, font, advance))
            used = needed

        if painter is not None:
            painter.setPen(QColor(TEXT_COLOR))
            for index, line in enumerate(lines):
                indent = STATEMENT_INDENT if index == 0 else 0
                avail = width - indent
                natural = sum(a for _, _, a in line) + space * (len(line) - 1)
                gap = space
                if index < len(lines) - 1 and len(line) > 1:
                    gap = space + (avail - natural) / (len(line) - 1)
                cursor = x + indent
                for word, font, advance in line:
                    painter.setFont(font)
                    painter.drawText(
                        QRectF(cursor, y + index * step, advance + 1, step),
                        Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
                        word,
                    )
                    cursor += advance + gap

        return step * len(lines)

    def _frame(self, painter: Optional[QPainter], item: FramedText, x: float, y: float, width: float) -> float:
        font = self._font(PLAIN)
        inner_w = width - 2 * FRAME_PADDING
        text_h, _ = self._text_block(
            painter, item.text, font, TEXT_COLOR, x + FRAME_PADDING, y + FRAME_PADDING, inner_w, Alignment.LEFT
        )
        height = max(item.min_height_px, text_h + 2 * FRAME_PADDING)
        if painter is not None:
            painter.setPen(QPen(QColor(TEXT_COLOR), 1))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(QRectF(x + 0.5, y + 0.5, width - 1, height - 1))
        return height

    # --- Signatures ---

    def _signatures(self, painter: Optional[QPainter], x: float, y: float, width: float) -> float:
        y += SIGNATURE_MARGIN
        bottom = y
        cursor = x
        for column in self.tree.signature.columns:
            col_w = width * column.width_fraction
            bottom = max(bottom, self._signature_column(painter, column, cursor, y, col_w))
            cursor += col_w
        return bottom

    def _signature_column(self, painter: Optional[QPainter], column: SignatureColumn,
                          x: float, y: float, width: float) -> float:
        if not column.heading and not column.name and not column.overlays:
            return y

        strong = self._font(TextStyle(weight=FontWeight.BOLD))
        if column.heading:
            y += self._text_block(painter, column.heading.upper(), strong, TEXT_COLOR, x, y, width, Alignment.CENTER)[0]
        y += column.heading_gap_px

        if column.overlay_height_px > 0:
            if painter is not None:
                for overlay in column.overlays:
                    if isinstance(overlay, SealGraphic):
                        self._draw_seal(painter, overlay, x + width / 2, y)
                    else:
                        self._draw_signature(painter, overlay, x, y, width, column.overlay_height_px)
            y += column.overlay_height_px + SIGNER_NAME_GAP

        name = column.name.upper() if column.name_uppercase else column.name
        if name:
            y += self._text_block(painter, name, strong, TEXT_COLOR, x, y, width, Alignment.CENTER)[0]
        return y

    def _draw_signature(self, painter: QPainter, glyph: SignatureGlyph,
                        x: float, top: float, width: float, box_height: float) -> None:
        font = make_font(self.signature_families, glyph.size_px)
        line_h = glyph.size_px * SIGNATURE_LINE_HEIGHT
        rect = QRectF(x, top + box_height - glyph.bottom_offset_px - line_h, width, line_h)

        painter.save()
        painter.translate(rect.center())
        painter.rotate(glyph.rotation_deg)
        painter.setFont(font)
        painter.setPen(QColor(glyph.color))
        painter.drawText(
            QRectF(-rect.width() / 2, -rect.height() / 2, rect.width(), rect.height()),
            Qt.AlignmentFlag.AlignCenter,
            glyph.text,
        )
        painter.restore()

    def _draw_seal(self, painter: QPainter, seal: SealGraphic, column_center_x: float, overlay_top: float) -> None:
        origin_x, origin_y = seal_origin(column_center_x, overlay_top)
        cx, cy = SEAL_CENTER
        color = QColor(seal.color)

        painter.save()
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Multiply)
        painter.setOpacity(seal.opacity)
        painter.translate(origin_x + cx, origin_y + cy)
        painter.rotate(seal.rotation_deg)
        painter.translate(-cx, -cy)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        for radius, stroke in SEAL_RINGS:
            painter.setPen(QPen(color, stroke))
            painter.drawEllipse(QPointF(cx, cy), radius, radius)

        painter.setPen(color)
        painter.setFont(make_font(ARC_FONT_FAMILIES, STAR_SIZE_PX))
        for sx, sy in STAR_POSITIONS:
            painter.drawText(QRectF(sx - STAR_SIZE_PX, sy - STAR_SIZE_PX, 2 * STAR_SIZE_PX, 2 * STAR_SIZE_PX),
                             Qt.AlignmentFlag.AlignCenter, STAR_GLYPH)

        arc_font = make_font(ARC_FONT_FAMILIES, ARC_FONT_SIZE_PX, int(FontWeight.BOLD))
        self._draw_arc_text(painter, seal.top_text, arc_font, top=True)
        self._draw_arc_text(painter, seal.bottom_text, arc_font, top=False)

        center_font = make_font(CENTER_FONT_FAMILIES, CENTER_FONT_SIZE_PX, int(FontWeight.BOLD))
        box_x, box_y, box_w, box_h = CENTER_BOX
        inner_w = box_w - 2 * CENTER_PADDING_X
        lines = wrap_text(seal.center_text, inner_w, QFontMetricsF(center_font).horizontalAdvance)
        step = CENTER_FONT_SIZE_PX * CENTER_LINE_HEIGHT
        line_y = box_y + (box_h - step * len(lines)) / 2
        painter.setFont(center_font)
        for line in lines:
            painter.drawText(QRectF(box_x + CENTER_PADDING_X, line_y, inner_w, step),
                             Qt.AlignmentFlag.AlignCenter, line)
            line_y += step

        painter.restore()

    def _draw_arc_text(self, painter: QPainter, text: str, font: QFont, top: bool) -> None:
        metrics = QFontMetricsF(font)
        advances = [metrics.horizontalAdvance(ch) for ch in text]
        # Vertical centre of the em box sits on the arc
        baseline = (metrics.ascent() - metrics.descent()) / 2

        painter.setFont(font)
        for placement, advance in zip(
            arc_glyph_positions(text, advances, top=top, letter_spacing=ARC_LETTER_SPACING), advances
        ):
            painter.save()
            painter.translate(placement.x, placement.y)
            painter.rotate(placement.angle_deg)
            painter.drawText(QPointF(-advance / 2, baseline), placement.char)
            painter.restore()


class PageSurface:
    """
    Off-screen capture surface for a rendered tree. Used for exports without a
    visible preview (command line, tests).
    """

    def __init__(self, tree: VisualTree, signature_families: Sequence[str] = DEFAULT_SIGNATURE_FAMILIES):
        self.page = PagePainter(tree, signature_families)
        self.export_mode = False

    def content_size(self) -> Tuple[int, int]:
        return self.page.page_width, self.page.content_height()

    def paint_page(self, painter: QPainter) -> None:
        self.page.paint(painter)

    def set_export_mode(self, enabled: bool) -> None:
        self.export_mode = enabled
