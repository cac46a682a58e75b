from PyQt6.QtCore import QThread, pyqtSignal
from PyQt6.QtGui import QImage

from vietdoc.exceptions import ExportError
from vietdoc.exporter import DocumentExporter
from vietdoc.logger import get_logger
from vietdoc.models.types import DocumentType

logger = get_logger("gui.workers")


class ExportWorker(QThread):
    """
    Worker thread that encodes a captured page (PNG or PDF) in the background.
    The exporter must already be acquired by the caller; it is released here
    once encoding ends, whatever the outcome.
    """
    finished = pyqtSignal(object)  # ExportResult
    failed = pyqtSignal(str)       # error message

    def __init__(self, exporter: DocumentExporter, image: QImage, doc_type: DocumentType, fmt: str):
        super().__init__()
        self.exporter = exporter
        self.image = image
        self.doc_type = doc_type
        self.fmt = fmt

    def run(self):
        try:
            result = self.exporter.build_result(self.image, self.doc_type, self.fmt)
        except ExportError as e:
            logger.error(f"{self.fmt.upper()} encoding failed: {e}")
            self.failed.emit(str(e))
        except Exception as e:
            logger.error(f"{self.fmt.upper()} encoding failed unexpectedly: {e}")
            self.failed.emit(str(e))
        else:
            self.finished.emit(result)
        finally:
            self.exporter.release()
