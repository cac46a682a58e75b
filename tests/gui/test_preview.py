import pytest

from gui.preview import DocumentPreviewWidget
from vietdoc.exporter import DocumentExporter
from vietdoc.models.types import DocumentType


@pytest.fixture
def preview(qtbot, record):
    widget = DocumentPreviewWidget(record)
    qtbot.addWidget(widget)
    return widget


def test_initial_render(preview, record):
    assert preview.tree is not None
    assert preview.tree.content.variant == record.type
    assert preview.content_size()[0] == 794
    assert preview.zoom == DocumentPreviewWidget.DEFAULT_ZOOM


def test_zoom_only_changes_on_screen_size(qapp, preview):
    exporter = DocumentExporter()
    native = preview.content_size()
    captured = exporter.capture(preview)

    preview.set_zoom(1.5)
    assert preview.content_size() == native
    assert preview.width() == round(native[0] * 1.5) + 2 * DocumentPreviewWidget.MARGIN

    zoomed = exporter.capture(preview)
    assert (zoomed.width(), zoomed.height()) == (captured.width(), captured.height())
    assert (zoomed.width(), zoomed.height()) == (native[0] * 2, native[1] * 2)


def test_zoom_is_clamped(preview):
    preview.set_zoom(10)
    assert preview.zoom == DocumentPreviewWidget.MAX_ZOOM
    preview.set_zoom(0)
    assert preview.zoom == DocumentPreviewWidget.MIN_ZOOM


def test_refresh_reflects_record_changes(qtbot, preview, record):
    record.type = DocumentType.LEAVE_REQUEST
    with qtbot.waitSignal(preview.rendered, timeout=1000):
        preview.refresh()
    assert preview.tree.content.variant == DocumentType.LEAVE_REQUEST
    assert preview.tree.title.text == "ĐƠN XIN NGHỈ PHÉP"


def test_set_record_replaces_source(preview, record):
    other = record.model_copy(update={"type": DocumentType.HANDOVER_REPORT})
    preview.set_record(other)
    assert preview.record is other
    assert preview.tree.content.variant == DocumentType.HANDOVER_REPORT


def test_export_mode_is_reverted_after_capture(qapp, preview):
    exporter = DocumentExporter()
    exporter.capture_for_export(preview)
    assert preview.export_mode is False


def test_paints_in_both_modes(qtbot, preview):
    preview.show()
    qtbot.waitExposed(preview)
    preview.set_export_mode(True)
    assert not preview.grab().isNull()
    preview.set_export_mode(False)
    assert not preview.grab().isNull()
