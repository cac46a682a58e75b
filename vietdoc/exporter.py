"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/exporter.py
Version:        1.0.0
Description:    Export pipeline. Captures the rendered preview surface at its
                native size with 2x supersampling, then serializes it as PNG
                or places it on a single A4 portrait PDF page (full width,
                aspect preserved, centred or top-aligned and cropped).
                One export at a time per exporter; export mode on the surface
                is scoped to the capture and always reverted.
------------------------------------------------------------------------------
"""

import io
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, NamedTuple, Optional, Union

from PIL import Image
from PyQt6.QtCore import QBuffer, QIODevice
from PyQt6.QtGui import QColor, QImage, QPainter
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from vietdoc.exceptions import CaptureFailure, EncodingFailure, ExportBusyError, ExportError
from vietdoc.fonts import FontRegistry
from vietdoc.logger import get_logger
from vietdoc.models.types import DocumentType

logger = get_logger("export")

CAPTURE_SCALE = 2.0

FORMAT_PNG = "png"
FORMAT_PDF = "pdf"
MIME_TYPES = {
    FORMAT_PNG: "image/png",
    FORMAT_PDF: "application/pdf",
}


class ImagePlacement(NamedTuple):
    """Image rectangle on the page (top-left origin) and the share of the image rows shown."""
    x: float
    y: float
    width: float
    height: float
    visible_fraction: float


@dataclass(frozen=True)
class ExportResult:
    filename: str
    payload: bytes
    mime_type: str

    def save(self, directory: Union[str, Path]) -> Path:
        """Writes the payload under its generated name and returns the path."""
        target = Path(directory)
        target.mkdir(parents=True, exist_ok=True)
        path = target / self.filename
        path.write_bytes(self.payload)
        return path


def fit_to_page(img_w: float, img_h: float, page_w: float, page_h: float) -> ImagePlacement:
    """
    Places an image on a page: width fills the page, height follows the
    aspect ratio. Shorter images are centred vertically; taller ones are
    top-aligned and clamped to the page height.

    Raises:
        ValueError: If any dimension is not positive.
    """
    if min(img_w, img_h, page_w, page_h) <= 0:
        raise ValueError(f"Invalid dimensions: image {img_w}x{img_h}, page {page_w}x{page_h}")

    scaled_h = img_h * page_w / img_w
    if scaled_h < page_h:
        return ImagePlacement(0.0, (page_h - scaled_h) / 2, page_w, scaled_h, 1.0)
    return ImagePlacement(0.0, 0.0, page_w, page_h, page_h / scaled_h)


def build_export_filename(doc_type: Union[DocumentType, str], timestamp_ms: int, ext: str) -> str:
    tag = doc_type.value if isinstance(doc_type, DocumentType) else str(doc_type)
    return f"{tag}-{timestamp_ms}.{ext}"


class DocumentExporter:
    """
    Captures a preview surface and encodes it.

    A surface is any object providing:
        content_size() -> (width, height) in CSS px, independent of zoom
        paint_page(painter: QPainter) -> None, drawing at native scale
        set_export_mode(enabled: bool) -> None
    """

    def __init__(
        self,
        scale: float = CAPTURE_SCALE,
        font_dirs: Optional[Iterable[Path]] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.scale = scale
        self.font_dirs = list(font_dirs or [])
        self._clock = clock
        self._busy = False

    # --- Busy flag ---

    @property
    def busy(self) -> bool:
        return self._busy

    def try_acquire(self) -> bool:
        """Claims the exporter. Returns False if an export is already in flight."""
        if self._busy:
            return False
        self._busy = True
        return True

    def release(self) -> None:
        self._busy = False

    @contextmanager
    def export_mode(self, surface) -> Iterator:
        """Puts the surface into export mode for the duration of the block."""
        try:
            surface.set_export_mode(True)
        except Exception as e:
            raise CaptureFailure(f"Could not switch the preview to export mode: {e}") from e
        try:
            yield surface
        finally:
            surface.set_export_mode(False)

    # --- Capture ---

    def capture(self, surface) -> QImage:
        """
        Rasterizes the surface at native size times the capture scale on white.

        Raises:
            CaptureFailure: Surface missing, zero extent, or no image produced.
        """
        if surface is None:
            raise CaptureFailure("No preview surface to capture")

        FontRegistry.ensure_ready(self.font_dirs)

        try:
            width, height = surface.content_size()
        except Exception as e:
            raise CaptureFailure(f"Could not measure preview surface: {e}") from e
        if width <= 0 or height <= 0:
            raise CaptureFailure(f"Preview surface has zero extent ({width}x{height})")

        image = QImage(round(width * self.scale), round(height * self.scale), QImage.Format.Format_RGB32)
        if image.isNull():
            raise CaptureFailure(f"Could not allocate {width}x{height} capture at scale {self.scale}")
        image.fill(QColor("white"))

        painter = QPainter(image)
        try:
            painter.scale(self.scale, self.scale)
            surface.paint_page(painter)
        except Exception as e:
            raise CaptureFailure(f"Painting the preview failed: {e}") from e
        finally:
            painter.end()

        logger.debug(f"Captured {width}x{height} px at {self.scale}x -> {image.width()}x{image.height()}")
        return image

    def capture_for_export(self, surface) -> QImage:
        if surface is None:
            raise CaptureFailure("No preview surface to capture")
        with self.export_mode(surface):
            return self.capture(surface)

    # --- Encoding ---

    def encode_png(self, image: QImage) -> bytes:
        if image is None or image.isNull():
            raise EncodingFailure("Cannot encode an empty image")

        buffer = QBuffer()
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)
        ok = image.save(buffer, "PNG")
        buffer.close()
        data = buffer.data().data()
        if not ok or not data:
            raise EncodingFailure("PNG serialization failed")
        return data

    def encode_pdf(self, image: QImage) -> bytes:
        """Places the image on one A4 portrait page."""
        png = self.encode_png(image)
        try:
            pil_image = Image.open(io.BytesIO(png))
            pil_image.load()
            page_w, page_h = A4
            placement = fit_to_page(pil_image.width, pil_image.height, page_w, page_h)

            if placement.visible_fraction < 1.0:
                visible_rows = max(1, round(pil_image.height * placement.visible_fraction))
                logger.info(
                    f"Content taller than the page; cropping {pil_image.height - visible_rows} "
                    f"of {pil_image.height} rows"
                )
                pil_image = pil_image.crop((0, 0, pil_image.width, visible_rows))

            buffer = io.BytesIO()
            pdf = canvas.Canvas(buffer, pagesize=A4)
            # reportlab's origin is bottom-left
            pdf.drawImage(
                ImageReader(pil_image),
                placement.x,
                page_h - placement.y - placement.height,
                width=placement.width,
                height=placement.height,
            )
            pdf.showPage()
            pdf.save()
        except Exception as e:
            raise EncodingFailure(f"PDF serialization failed: {e}") from e
        return buffer.getvalue()

    def build_result(self, image: QImage, doc_type: Union[DocumentType, str], fmt: str) -> ExportResult:
        """Encodes a captured image and names the payload."""
        if fmt == FORMAT_PNG:
            payload = self.encode_png(image)
        elif fmt == FORMAT_PDF:
            payload = self.encode_pdf(image)
        else:
            raise EncodingFailure(f"Unsupported export format: {fmt}")

        filename = build_export_filename(doc_type, int(self._clock() * 1000), fmt)
        logger.info(f"Exported {filename} ({len(payload)} bytes)")
        return ExportResult(filename, payload, MIME_TYPES[fmt])

    # --- Pipeline ---

    def export_image(self, surface, doc_type: Union[DocumentType, str]) -> ExportResult:
        return self._export(surface, doc_type, FORMAT_PNG)

    def export_pdf(self, surface, doc_type: Union[DocumentType, str]) -> ExportResult:
        return self._export(surface, doc_type, FORMAT_PDF)

    def _export(self, surface, doc_type: Union[DocumentType, str], fmt: str) -> ExportResult:
        if not self.try_acquire():
            logger.warning(f"{fmt.upper()} export rejected: another export is in progress")
            raise ExportBusyError("An export is already in progress")
        try:
            image = self.capture_for_export(surface)
            return self.build_result(image, doc_type, fmt)
        except ExportError as e:
            logger.error(f"{fmt.upper()} export failed: {e}")
            raise
        except Exception as e:
            logger.error(f"{fmt.upper()} export failed unexpectedly: {e}")
            raise ExportError(str(e)) from e
        finally:
            self.release()

