"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/renderer.py
Version:        1.0.0
Description:    Document renderer. Turns a DocumentRecord and a resolved
                StyleDescriptor into a VisualTree: header, title, exactly one
                of nine content variants and one of two signature layouts.
                Pure: the record is only read, never mutated.
------------------------------------------------------------------------------
"""

from typing import Tuple

from vietdoc.formats import resolve
from vietdoc.logger import get_logger, log_visual_tree
from vietdoc.models.document import DocumentRecord
from vietdoc.models.style import StyleDescriptor
from vietdoc.models.types import (
    DocumentType, DOCUMENT_TITLES, FontWeight, SignatureLayout
)
from vietdoc.models.visual import (
    ContentBlock, ContentItem, FramedText, HeaderBlock, LabeledRow, Note,
    SealGraphic, SectionHeading, SignatureBlock, SignatureColumn,
    SignatureGlyph, Statement, Text, TextStyle, TitleBlock, VisualTree, PLAIN
)
from vietdoc.seal import bottom_arc_text, top_arc_text
from vietdoc.utils.formatting import format_amount, format_place_date

logger = get_logger("render")

MOTTO_NATION = "CỘNG HÒA XÃ HỘI CHỦ NGHĨA VIỆT NAM"
MOTTO_SLOGAN = "Độc lập - Tự do - Hạnh phúc"
SALUTATION = "Kính gửi: " + "." * 72
BLANK_LINE = "." * 72
BLANK_SHORT = "." * 58

HEADER_INFO_SIZE_PT = 11.0
SIGNER_OVERLAY_HEIGHT_PX = 192.0
SIGNATURE_HEADING_GAP_PX = 64.0

STRONG = TextStyle(weight=FontWeight.BOLD)
STRONG_UPPER = TextStyle(weight=FontWeight.BOLD, uppercase=True)
ITALIC = TextStyle(italic=True)


def _row(label: str, value: str, style: TextStyle = PLAIN, gap: bool = False) -> LabeledRow:
    return LabeledRow(label=label, value=Text(text=value, style=style), gap_before=gap)


def _identity_rows(record: DocumentRecord, with_department: bool = False) -> Tuple[LabeledRow, ...]:
    """Position, birth date and citizen id rows shared by most variants."""
    rows = (
        _row("Chức vụ:", record.position),
        _row("Ngày sinh:", record.birth_date),
        _row("Căn cước công dân:", record.id_card),
    )
    if with_department:
        rows += (_row("Bộ phận:", record.department),)
    return rows


def _period(record: DocumentRecord) -> str:
    return f"Từ ngày {record.duration_from} đến ngày {record.duration_to}"


# --- Content variants ---

def _travel_order(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        _row("1. Cấp cho ông/bà:", record.full_name, STRONG_UPPER),
        *_identity_rows(record),
        _row("Được cử đi công tác tại:", record.destination),
        _row("Về việc:", record.reason),
        _row("Thời gian:", _period(record)),
        _row("Phương tiện:", "Tự túc / Xe công ty"),
    )


def _introduction_letter(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        Statement(lead="Trân trọng giới thiệu ông/bà:", emphasis=record.full_name),
        _row("Chức vụ:", record.position),
        _row("Ngày sinh:", record.birth_date),
        _row("Căn cước công dân số:", record.id_card),
        _row("Cấp ngày:", f"{record.id_date} tại {record.id_place}"),
        _row("Được cử đến:", record.destination, gap=True),
        _row("Về việc:", record.reason),
        Note(text=f"Giấy giới thiệu có giá trị đến hết ngày: {record.duration_to}"),
    )


def _work_confirmation(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        Statement(lead="Tôi tên là:", emphasis=record.full_name),
        *_identity_rows(record),
        _row("Đơn vị công tác:", f"{record.department} - {record.company_name}"),
        _row("Nay xác nhận:", f"Ông/Bà {record.full_name} đang công tác tại đơn vị.", gap=True),
        _row("Lý do xác nhận:", record.reason),
        _row("Nơi nhận:", record.destination),
    )


def _leave_request(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        Statement(lead="Tôi tên là:", emphasis=record.full_name),
        *_identity_rows(record, with_department=True),
        _row("Xin nghỉ phép từ:", f"{record.duration_from} đến {record.duration_to}", gap=True),
        _row("Lý do nghỉ:", record.reason),
        _row("Nơi nghỉ:", record.destination),
    )


def _money_rows(record: DocumentRecord, request_label: str) -> Tuple[LabeledRow, ...]:
    return (
        _row(request_label, format_amount(record.amount), STRONG, gap=True),
        _row("Bằng chữ:", record.amount_in_words or "", ITALIC),
    )


def _advance_payment(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        Statement(lead="Tôi tên là:", emphasis=record.full_name),
        *_identity_rows(record, with_department=True),
        *_money_rows(record, "Đề nghị tạm ứng số tiền:"),
        _row("Lý do tạm ứng:", record.reason),
        _row("Thời hạn thanh toán:", record.duration_to),
    )


def _payment_request(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        Statement(lead="Tôi tên là:", emphasis=record.full_name),
        *_identity_rows(record, with_department=True),
        *_money_rows(record, "Đề nghị thanh toán số tiền:"),
        _row("Nội dung thanh toán:", record.reason),
        _row("Kèm theo chứng từ gốc:", BLANK_SHORT),
    )


def _handover_report(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        SectionHeading(text="I. BÊN GIAO:"),
        _row("Ông/Bà:", record.full_name, STRONG_UPPER),
        *_identity_rows(record, with_department=True),
        SectionHeading(text="II. BÊN NHẬN:", gap_before=True),
        _row("Ông/Bà:", record.destination, STRONG_UPPER),
        _row("Bộ phận:", BLANK_LINE),
        SectionHeading(text="III. NỘI DUNG BÀN GIAO:", gap_before=True),
        FramedText(text=record.reason),
    )


def _business_trip_assignment(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        Statement(
            lead="Căn cứ vào nhu cầu công tác, Giám đốc Công ty quyết định "
                 "cử cán bộ đi công tác như sau:"
        ),
        _row("1. Ông/Bà:", record.full_name, STRONG_UPPER),
        *_identity_rows(record, with_department=True),
        _row("2. Nơi đến công tác:", record.destination, gap=True),
        _row("3. Về việc:", record.reason),
        _row("4. Thời gian:", _period(record)),
        _row("5. Phương tiện:", "Theo quy định của công ty"),
        _row("6. Kinh phí:", "Theo quy chế công tác phí hiện hành"),
    )


def _duty_roster_request(record: DocumentRecord) -> Tuple[ContentItem, ...]:
    return (
        Statement(lead="Theo yêu cầu công việc, Phòng/Ban đề nghị bố trí nhân sự trực như sau:"),
        _row("Họ và tên:", record.full_name, STRONG_UPPER),
        *_identity_rows(record, with_department=True),
        _row("Thời gian trực:", record.duration_from, gap=True),
        _row("Ca trực:", record.duration_to),
        _row("Địa điểm:", record.destination),
        _row("Nội dung công việc:", record.reason),
    )


def build_content(record: DocumentRecord) -> ContentBlock:
    """Builds exactly one content variant, selected by the document type."""
    match record.type:
        case DocumentType.TRAVEL_ORDER:
            items = _travel_order(record)
        case DocumentType.INTRODUCTION_LETTER:
            items = _introduction_letter(record)
        case DocumentType.WORK_CONFIRMATION:
            items = _work_confirmation(record)
        case DocumentType.LEAVE_REQUEST:
            items = _leave_request(record)
        case DocumentType.ADVANCE_PAYMENT:
            items = _advance_payment(record)
        case DocumentType.PAYMENT_REQUEST:
            items = _payment_request(record)
        case DocumentType.HANDOVER_REPORT:
            items = _handover_report(record)
        case DocumentType.BUSINESS_TRIP_ASSIGNMENT:
            items = _business_trip_assignment(record)
        case DocumentType.DUTY_ROSTER_REQUEST:
            items = _duty_roster_request(record)
        case _:
            raise ValueError(f"Unsupported document type: {record.type!r}")
    return ContentBlock(variant=record.type, items=items)


# --- Header, title, signature ---

def build_header(record: DocumentRecord, style: StyleDescriptor) -> HeaderBlock:
    def text(value: str, weight: FontWeight, size: float, uppercase: bool = False,
             italic: bool = False, underline_px: float = 0.0) -> Text:
        return Text(text=value, style=TextStyle(
            size_pt=size,
            weight=weight,
            italic=italic,
            uppercase=uppercase or style.header_uppercase,
            tracking_em=style.header_tracking_em,
            color=style.header_color,
            underline_px=underline_px,
        ))

    title_weight, title_size = style.header_title_weight, style.header_title_size_pt
    company_lines = (
        text(record.company_name, title_weight, title_size, uppercase=True),
        text(record.department, title_weight, title_size, uppercase=True, underline_px=1.0),
        text(f"Số: {record.document_number}", style.header_weight, HEADER_INFO_SIZE_PT, italic=True),
    )
    motto_lines = (
        text(MOTTO_NATION, title_weight, title_size, uppercase=True),
        text(
            MOTTO_SLOGAN,
            style.header_subtitle_weight,
            style.header_subtitle_size_pt,
            underline_px=style.header_subtitle_underline_px,
        ),
        text(
            format_place_date(record.location, record.issue_date),
            style.header_weight,
            HEADER_INFO_SIZE_PT,
            italic=True,
        ),
    )

    return HeaderBlock(
        layout=style.header_layout,
        company_lines=company_lines,
        motto_lines=motto_lines,
        company_align=style.company_align,
        motto_align=style.motto_align,
        company_width=style.company_width,
        motto_width=style.motto_width,
        margin_px=style.header_margin_px,
        rule=style.header_rule,
        padding_px=style.header_padding_px,
    )


def build_title(record: DocumentRecord, style: StyleDescriptor) -> TitleBlock:
    return TitleBlock(
        text=DOCUMENT_TITLES[record.type],
        align=style.title_align,
        style=TextStyle(
            size_pt=style.title_size_pt,
            weight=style.title_weight,
            uppercase=True,
            tracking_em=style.title_tracking_em,
        ),
        salutation=SALUTATION if record.show_salutation else None,
    )


def build_seal(record: DocumentRecord) -> SealGraphic:
    return SealGraphic(
        top_text=top_arc_text(record.tax_code),
        bottom_text=bottom_arc_text(record.location),
        center_text=record.company_name.upper(),
    )


def build_signer_column(record: DocumentRecord, width_fraction: float) -> SignatureColumn:
    return SignatureColumn(
        heading=record.signer_title,
        heading_gap_px=16.0,
        name=record.signer_name,
        name_uppercase=True,
        width_fraction=width_fraction,
        overlay_height_px=SIGNER_OVERLAY_HEIGHT_PX,
        seal=build_seal(record) if record.show_seal else None,
        signature=SignatureGlyph(text=record.signature_token) if record.show_signature else None,
    )


def build_signature(record: DocumentRecord) -> SignatureBlock:
    if record.type == DocumentType.TRAVEL_ORDER:
        third = 1 / 3
        return SignatureBlock(
            layout=SignatureLayout.THREE_COLUMN,
            columns=(
                SignatureColumn(
                    heading="Người đi đường",
                    heading_gap_px=SIGNATURE_HEADING_GAP_PX,
                    name=record.full_name,
                    width_fraction=third,
                ),
                SignatureColumn(
                    heading="Phụ trách bộ phận",
                    heading_gap_px=SIGNATURE_HEADING_GAP_PX,
                    name="(Ký, họ tên)",
                    width_fraction=third,
                ),
                build_signer_column(record, third),
            ),
        )

    return SignatureBlock(
        layout=SignatureLayout.TWO_COLUMN,
        columns=(
            SignatureColumn(width_fraction=0.5),
            build_signer_column(record, 0.5),
        ),
    )


def render(record: DocumentRecord, style: StyleDescriptor) -> VisualTree:
    """
    Renders a record into a visual tree.

    Args:
        record: The document data. Read only.
        style: The resolved style descriptor for the record's format.

    Returns:
        The VisualTree. Two calls with equal inputs return equal trees.
    """
    tree = VisualTree(
        style=style,
        header=build_header(record, style),
        title=build_title(record, style),
        content=build_content(record),
        signature=build_signature(record),
    )
    logger.debug(
        f"Rendered {record.type.value} with format '{style.name}' "
        f"({len(tree.content.items)} content items)"
    )
    log_visual_tree(tree)
    return tree


def render_document(record: DocumentRecord) -> VisualTree:
    """Resolves the record's format id and renders it."""
    return render(record, resolve(record.format_id))

