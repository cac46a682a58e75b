from typing import Optional, Sequence, Tuple

from PyQt6.QtCore import QRectF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QPaintEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

from vietdoc.fonts import DEFAULT_SIGNATURE_FAMILIES
from vietdoc.logger import get_logger
from vietdoc.models.document import DocumentRecord
from vietdoc.models.visual import VisualTree
from vietdoc.painter import PagePainter
from vietdoc.renderer import render_document

logger = get_logger("gui.preview")


class DocumentPreviewWidget(QWidget):
    """
    On-screen A4 preview of the live DocumentRecord.

    The zoom only scales what is shown on screen. content_size() and
    paint_page() always work at the native page size, so captures are
    independent of the zoom level.
    """
    rendered = pyqtSignal()

    MARGIN = 24
    MIN_ZOOM = 0.25
    MAX_ZOOM = 2.0
    DEFAULT_ZOOM = 0.75
    BACKGROUND = "#e5e7eb"
    SHADOW = "#9ca3af"

    def __init__(self, record: DocumentRecord,
                 signature_families: Sequence[str] = DEFAULT_SIGNATURE_FAMILIES, parent=None):
        super().__init__(parent)
        self.record = record
        self.signature_families = tuple(signature_families)
        self._zoom = self.DEFAULT_ZOOM
        self._export_mode = False
        self._tree: Optional[VisualTree] = None
        self._page: Optional[PagePainter] = None
        self._content_size: Tuple[int, int] = (0, 0)

        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.refresh()

    # --- Record / rendering ---

    def set_record(self, record: DocumentRecord) -> None:
        self.record = record
        self.refresh()

    def refresh(self) -> None:
        """Re-renders from the current record state. Nothing is cached across calls."""
        self._tree = render_document(self.record)
        self._page = PagePainter(self._tree, self.signature_families)
        self._content_size = (self._page.page_width, self._page.content_height())
        self._apply_size()
        self.update()
        self.rendered.emit()

    @property
    def tree(self) -> Optional[VisualTree]:
        return self._tree

    # --- Capture surface ---

    def content_size(self) -> Tuple[int, int]:
        return self._content_size

    def paint_page(self, painter: QPainter) -> None:
        if self._page is not None:
            self._page.paint(painter)

    def set_export_mode(self, enabled: bool) -> None:
        self._export_mode = enabled
        self.update()

    @property
    def export_mode(self) -> bool:
        return self._export_mode

    # --- Zoom ---

    @property
    def zoom(self) -> float:
        return self._zoom

    def set_zoom(self, zoom: float) -> None:
        self._zoom = min(self.MAX_ZOOM, max(self.MIN_ZOOM, zoom))
        self._apply_size()
        self.update()

    def _apply_size(self) -> None:
        self.setFixedSize(self.sizeHint())

    def sizeHint(self) -> QSize:
        width, height = self._content_size
        return QSize(
            round(width * self._zoom) + 2 * self.MARGIN,
            round(height * self._zoom) + 2 * self.MARGIN,
        )

    # --- Painting ---

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        width, height = self._content_size

        if not self._export_mode:
            painter.fillRect(self.rect(), QColor(self.BACKGROUND))
            painter.fillRect(
                QRectF(self.MARGIN + 4, self.MARGIN + 4, width * self._zoom, height * self._zoom),
                QColor(self.SHADOW),
            )
        else:
            painter.fillRect(self.rect(), Qt.GlobalColor.white)

        painter.translate(self.MARGIN, self.MARGIN)
        painter.scale(self._zoom, self._zoom)
        self.paint_page(painter)
        painter.end()
