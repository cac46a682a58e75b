import logging

import pytest

from vietdoc.formats import resolve
from vietdoc.models.document import DocumentRecord
from vietdoc.models.types import (
    DOCUMENT_TITLES, PAYMENT_TYPES, DocumentType, HeaderLayout, SignatureLayout
)
from vietdoc.models.visual import (
    FramedText, LabeledRow, Note, SealGraphic, SectionHeading, SignatureGlyph, Statement
)
from vietdoc.renderer import SALUTATION, render, render_document


def content_strings(tree):
    """All visible strings of the content block."""
    strings = []
    for item in tree.content.items:
        if isinstance(item, LabeledRow):
            strings += [item.label, item.value.text]
        elif isinstance(item, Statement):
            strings += [item.lead, item.emphasis or ""]
        elif isinstance(item, (SectionHeading, FramedText, Note)):
            strings.append(item.text)
    return strings


def row_labels(tree):
    return [item.label for item in tree.content.items if isinstance(item, LabeledRow)]


@pytest.mark.parametrize("doc_type", list(DocumentType))
def test_title_and_single_variant_per_type(record, doc_type):
    record.type = doc_type
    tree = render_document(record)
    assert tree.title.text == DOCUMENT_TITLES[doc_type]
    assert tree.content.variant == doc_type
    assert tree.content.items


def test_variants_have_distinct_layouts(record):
    layouts = set()
    for doc_type in DocumentType:
        record.type = doc_type
        layouts.add(tuple(content_strings(render_document(record))))
    assert len(layouts) == len(DocumentType)


def test_destination_label_depends_on_type(record):
    expected = {
        DocumentType.TRAVEL_ORDER: "Được cử đi công tác tại:",
        DocumentType.INTRODUCTION_LETTER: "Được cử đến:",
        DocumentType.WORK_CONFIRMATION: "Nơi nhận:",
        DocumentType.LEAVE_REQUEST: "Nơi nghỉ:",
        DocumentType.BUSINESS_TRIP_ASSIGNMENT: "2. Nơi đến công tác:",
        DocumentType.DUTY_ROSTER_REQUEST: "Địa điểm:",
    }
    for doc_type, label in expected.items():
        record.type = doc_type
        tree = render_document(record)
        rows = [r for r in tree.content.items if isinstance(r, LabeledRow) and r.label == label]
        assert len(rows) == 1
        assert rows[0].value.text == record.destination


@pytest.mark.parametrize("doc_type", list(DocumentType))
def test_money_only_for_payment_types(doc_type):
    record = DocumentRecord(type=doc_type, amount="7.250.000", amount_in_words="Bảy triệu hai trăm năm mươi nghìn đồng")
    strings = content_strings(render_document(record))
    shown = "7.250.000 VNĐ" in strings
    words_shown = "Bảy triệu hai trăm năm mươi nghìn đồng" in strings
    assert shown == (doc_type in PAYMENT_TYPES)
    assert words_shown == (doc_type in PAYMENT_TYPES)


def test_payment_request_rows():
    record = DocumentRecord(type=DocumentType.PAYMENT_REQUEST)
    labels = row_labels(render_document(record))
    assert "Đề nghị thanh toán số tiền:" in labels
    assert "Kèm theo chứng từ gốc:" in labels
    assert "Đề nghị tạm ứng số tiền:" not in labels


def test_handover_report_sections(record):
    record.type = DocumentType.HANDOVER_REPORT
    tree = render_document(record)
    headings = [i.text for i in tree.content.items if isinstance(i, SectionHeading)]
    assert headings == ["I. BÊN GIAO:", "II. BÊN NHẬN:", "III. NỘI DUNG BÀN GIAO:"]
    frame = tree.content.items[-1]
    assert isinstance(frame, FramedText)
    assert frame.text == record.reason
    assert frame.min_height_px == 150


@pytest.mark.parametrize("show_seal, show_signature", [
    (False, True), (True, False), (False, False), (True, True),
])
def test_overlays_are_independent(record, show_seal, show_signature):
    record.show_seal = show_seal
    record.show_signature = show_signature
    signer = render_document(record).signature.columns[-1]

    assert (signer.seal is not None) == show_seal
    assert (signer.signature is not None) == show_signature
    kinds = [type(o) for o in signer.overlays]
    expected = ([SealGraphic] if show_seal else []) + ([SignatureGlyph] if show_signature else [])
    assert kinds == expected


def test_signer_always_has_title_and_name(record):
    record.show_seal = False
    record.show_signature = False
    for doc_type in DocumentType:
        record.type = doc_type
        signer = render_document(record).signature.columns[-1]
        assert signer.heading == record.signer_title
        assert signer.name == record.signer_name
        assert signer.name_uppercase


def test_signature_layouts(record):
    for doc_type in DocumentType:
        record.type = doc_type
        block = render_document(record).signature
        if doc_type == DocumentType.TRAVEL_ORDER:
            assert block.layout == SignatureLayout.THREE_COLUMN
            assert [c.heading for c in block.columns[:2]] == ["Người đi đường", "Phụ trách bộ phận"]
            assert block.columns[0].name == record.full_name
            assert sum(c.width_fraction for c in block.columns) == pytest.approx(1.0)
        else:
            assert block.layout == SignatureLayout.TWO_COLUMN
            blank = block.columns[0]
            assert len(block.columns) == 2
            assert not blank.heading and not blank.name and not blank.overlays


def test_seal_texts(record):
    seal = render_document(record).signature.columns[-1].seal
    assert seal.top_text == "M.S.D.N: 0101234567"
    assert seal.bottom_text == "T. HÀ NỘI"
    assert seal.center_text == record.company_name.upper()
    assert seal.rotation_deg == -15


def test_seal_ignores_seal_text(record):
    record.seal_text = "KHÔNG DÙNG"
    seal = render_document(record).signature.columns[-1].seal
    assert "KHÔNG DÙNG" not in (seal.top_text, seal.bottom_text, seal.center_text)


def test_header(record):
    header = render_document(record).header
    company, department, number = header.company_lines
    assert company.display_text == record.company_name.upper()
    assert department.style.underline_px > 0
    assert number.text == "Số: 123/GCT-CNS"
    assert number.style.italic

    nation, slogan, dated = header.motto_lines
    assert nation.text == "CỘNG HÒA XÃ HỘI CHỦ NGHĨA VIỆT NAM"
    assert slogan.text == "Độc lập - Tự do - Hạnh phúc"
    assert dated.text == "Hà Nội, ngày 05 tháng 03 năm 2024"


def test_header_follows_style(record):
    record.format_id = 4
    header = render_document(record).header
    assert header.layout == HeaderLayout.STACKED
    assert header.company_width == 1.0


def test_salutation_toggle(record):
    assert render_document(record).title.salutation == SALUTATION
    record.show_salutation = False
    assert render_document(record).title.salutation is None


def test_render_is_idempotent(record):
    style = resolve(record.format_id)
    assert render(record, style) == render(record, style)


def test_render_does_not_mutate_record(record):
    before = record.model_dump()
    for doc_type in DocumentType:
        render(record.model_copy(update={"type": doc_type}), resolve(7))
    render(record, resolve(7))
    assert record.model_dump() == before


def test_next_render_reflects_field_writes(record):
    first = render_document(record)
    record.full_name = "Đỗ Minh Tuấn"
    second = render_document(record)
    assert first != second
    assert "Đỗ Minh Tuấn" in content_strings(second)


def test_content_does_not_depend_on_format(record):
    for doc_type in DocumentType:
        record.type = doc_type
        base = render(record, resolve(1))
        for format_id in (2, 4, 12, 25, 99):
            other = render(record, resolve(format_id))
            assert other.content == base.content
            assert other.signature == base.signature


def test_unknown_format_renders_with_base_style(record):
    record.format_id = 1234
    assert render_document(record).style == resolve(1)


@pytest.mark.parametrize("doc_type", list(DocumentType))
def test_empty_fields_render(doc_type):
    record = DocumentRecord(
        type=doc_type, company_name="", department="", document_number="", location="",
        tax_code="", full_name="", position="", id_card="", id_date="", id_place="",
        reason="", destination="", duration_from="", duration_to="", amount=None,
        amount_in_words=None, signer_name="", signer_title="",
    )
    tree = render_document(record)
    signer = tree.signature.columns[-1]
    assert signer.signature.text == ""
    assert signer.seal.bottom_text == "T. "


def test_end_to_end_travel_order():
    record = DocumentRecord(
        type="giay-cong-tac", format_id=1, full_name="Nguyễn Văn A",
        show_seal=True, show_signature=True, tax_code="0312345678",
    )
    tree = render_document(record)
    assert tree.title.text == "GIẤY ĐI ĐƯỜNG"
    assert tree.signature.layout == SignatureLayout.THREE_COLUMN
    signer = tree.signature.columns[2]
    assert signer.signature.text == "B"
    assert signer.signature.rotation_deg == -5
    assert signer.seal.top_text == "M.S.D.N: 0312345678"
    assert signer.overlays == (signer.seal, signer.signature)


def test_render_logs_visual_tree(record, caplog):
    caplog.set_level(logging.DEBUG, logger="vietdoc.render.tree")
    render_document(record)
    assert "VISUAL TREE START" in caplog.text
    assert "GIẤY ĐI ĐƯỜNG" in caplog.text
