"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           gui/main_window.py
Version:        1.0.0
Description:    Main application window. Hosts the A4 preview, a toolbar for
                document type, format, overlay toggles and zoom, and drives
                PNG/PDF exports (capture on the GUI thread, encoding on a
                worker thread).
------------------------------------------------------------------------------
"""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QCheckBox, QComboBox, QLabel, QMainWindow, QMessageBox, QScrollArea, QSpinBox, QToolBar
)

from gui.preview import DocumentPreviewWidget
from gui.utils import show_selectable_message_box
from gui.workers import ExportWorker
from vietdoc.config import AppConfig
from vietdoc.exceptions import ExportError
from vietdoc.exporter import FORMAT_PDF, FORMAT_PNG, DocumentExporter, ExportResult
from vietdoc.formats import format_name, known_format_ids
from vietdoc.logger import get_logger
from vietdoc.models.document import DocumentRecord
from vietdoc.models.types import DOCUMENT_LABELS, DocumentType

logger = get_logger("gui.main_window")


class MainWindow(QMainWindow):
    """
    Main application window.
    """

    def __init__(self, app_config: AppConfig, record: Optional[DocumentRecord] = None,
                 exporter: Optional[DocumentExporter] = None):
        super().__init__()
        self.app_config = app_config
        self.record = record or DocumentRecord.sample()
        self.exporter = exporter or DocumentExporter(
            scale=app_config.get_capture_scale(),
            font_dirs=[app_config.get_fonts_dir()],
        )
        self.export_worker: Optional[ExportWorker] = None

        self.setWindowTitle(self.tr("VietDoc - Vietnamese Office Documents"))
        self.resize(900, 1000)

        self.preview = DocumentPreviewWidget(
            self.record, signature_families=app_config.get_signature_families()
        )
        scroll = QScrollArea()
        scroll.setWidget(self.preview)
        scroll.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        scroll.setWidgetResizable(False)
        self.setCentralWidget(scroll)

        self._create_toolbar()
        self.statusBar().showMessage(self.tr("Ready"))

    def _create_toolbar(self) -> None:
        toolbar = QToolBar(self.tr("Document"))
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.combo_type = QComboBox()
        for doc_type in DocumentType:
            self.combo_type.addItem(DOCUMENT_LABELS[doc_type], doc_type)
        self.combo_type.setCurrentIndex(self.combo_type.findData(self.record.type))
        self.combo_type.currentIndexChanged.connect(self._on_type_changed)
        toolbar.addWidget(QLabel(self.tr("Type:")))
        toolbar.addWidget(self.combo_type)

        self.combo_format = QComboBox()
        for format_id in known_format_ids():
            self.combo_format.addItem(f"{format_id}. {format_name(format_id)}", format_id)
        index = self.combo_format.findData(self.record.format_id)
        self.combo_format.setCurrentIndex(max(0, index))
        self.combo_format.currentIndexChanged.connect(self._on_format_changed)
        toolbar.addWidget(QLabel(self.tr("Format:")))
        toolbar.addWidget(self.combo_format)
        toolbar.addSeparator()

        self.chk_seal = self._add_toggle(toolbar, self.tr("Seal"), "show_seal")
        self.chk_signature = self._add_toggle(toolbar, self.tr("Signature"), "show_signature")
        self.chk_salutation = self._add_toggle(toolbar, self.tr("Salutation"), "show_salutation")
        toolbar.addSeparator()

        self.spin_zoom = QSpinBox()
        self.spin_zoom.setRange(
            round(DocumentPreviewWidget.MIN_ZOOM * 100), round(DocumentPreviewWidget.MAX_ZOOM * 100)
        )
        self.spin_zoom.setSingleStep(5)
        self.spin_zoom.setSuffix(" %")
        self.spin_zoom.setValue(round(self.preview.zoom * 100))
        self.spin_zoom.valueChanged.connect(lambda value: self.preview.set_zoom(value / 100))
        toolbar.addWidget(self.spin_zoom)
        toolbar.addSeparator()

        self.action_png = QAction(self.tr("Export PNG"), self)
        self.action_png.triggered.connect(lambda: self.start_export(FORMAT_PNG))
        toolbar.addAction(self.action_png)

        self.action_pdf = QAction(self.tr("Export PDF"), self)
        self.action_pdf.triggered.connect(lambda: self.start_export(FORMAT_PDF))
        toolbar.addAction(self.action_pdf)

    def _add_toggle(self, toolbar: QToolBar, label: str, field: str) -> QCheckBox:
        checkbox = QCheckBox(label)
        checkbox.setChecked(getattr(self.record, field))

        def on_toggled(checked: bool) -> None:
            setattr(self.record, field, checked)
            self.preview.refresh()

        checkbox.toggled.connect(on_toggled)
        toolbar.addWidget(checkbox)
        return checkbox

    # --- Record edits ---

    def _on_type_changed(self, index: int) -> None:
        self.record.type = self.combo_type.itemData(index)
        self.preview.refresh()

    def _on_format_changed(self, index: int) -> None:
        self.record.format_id = self.combo_format.itemData(index)
        self.preview.refresh()

    # --- Export ---

    def start_export(self, fmt: str) -> bool:
        """
        Captures the preview and hands encoding to a worker thread.
        Returns False if the export was rejected or failed before encoding.
        """
        if not self.exporter.try_acquire():
            self.statusBar().showMessage(self.tr("An export is already in progress."), 5000)
            logger.warning(f"{fmt.upper()} export rejected: busy")
            return False

        self._set_export_enabled(False)
        self.statusBar().showMessage(self.tr("Exporting..."))
        try:
            image = self.exporter.capture_for_export(self.preview)
        except ExportError as e:
            logger.error(f"Capture failed: {e}")
            self.exporter.release()
            self._on_export_failed(str(e))
            return False

        self.export_worker = ExportWorker(self.exporter, image, self.record.type, fmt)
        self.export_worker.finished.connect(self._on_export_finished)
        self.export_worker.failed.connect(self._on_export_failed)
        self.export_worker.start()
        return True

    def _on_export_finished(self, result: ExportResult) -> None:
        self._set_export_enabled(True)
        try:
            path = result.save(self.app_config.get_export_dir())
        except OSError as e:
            logger.error(f"Could not save {result.filename}: {e}")
            self._on_export_failed(str(e))
            return
        logger.info(f"Saved export to {path}")
        self.statusBar().showMessage(self.tr("Saved %s") % str(path), 10000)

    def _on_export_failed(self, message: str) -> None:
        self._set_export_enabled(True)
        self.statusBar().showMessage(self.tr("Export did not complete."), 10000)
        show_selectable_message_box(
            self, self.tr("Export"), self.tr("Export did not complete:\n%s") % message,
            icon=QMessageBox.Icon.Warning,
            details=self.tr("Log file: %s") % str(self.app_config.get_log_file_path()),
        )

    def _set_export_enabled(self, enabled: bool) -> None:
        self.action_png.setEnabled(enabled)
        self.action_pdf.setEnabled(enabled)

    def closeEvent(self, event: QCloseEvent) -> None:
        if self.export_worker is not None and self.export_worker.isRunning():
            self.export_worker.wait()
        super().closeEvent(event)
