"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           main.py
Version:        1.0.0
Description:    Application entry point. Initializes the Qt environment,
                configuration, logging and fonts, then either launches the
                main window or performs a one-shot export without a window.
------------------------------------------------------------------------------
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication
from pydantic import ValidationError

from vietdoc.config import AppConfig
from vietdoc.exceptions import ExportError
from vietdoc.exporter import FORMAT_PDF, FORMAT_PNG, DocumentExporter
from vietdoc.fonts import FontRegistry
from vietdoc.logger import get_logger, setup_logging
from vietdoc.models.document import DocumentRecord
from vietdoc.painter import PageSurface
from vietdoc.renderer import render_document


def load_record(path: Optional[str], app_config: AppConfig) -> DocumentRecord:
    """
    Loads a DocumentRecord from a JSON file, or returns the sample record.

    Args:
        path: Path to a JSON file with camelCase keys, or None.
        app_config: Supplies the default format id for new sessions.
    """
    if not path:
        record = DocumentRecord.sample()
        record.format_id = app_config.get_default_format_id()
        return record
    return DocumentRecord.model_validate_json(Path(path).read_text(encoding="utf-8"))


def export_headless(record: DocumentRecord, app_config: AppConfig, fmt: str, out_dir: Optional[str]) -> int:
    """Renders the record off-screen and writes one export. Returns a process exit code."""
    logger = get_logger("core")
    exporter = DocumentExporter(
        scale=app_config.get_capture_scale(),
        font_dirs=[app_config.get_fonts_dir()],
    )
    surface = PageSurface(render_document(record), app_config.get_signature_families())
    try:
        if fmt == FORMAT_PDF:
            result = exporter.export_pdf(surface, record.type)
        else:
            result = exporter.export_image(surface, record.type)
    except ExportError as e:
        logger.error(f"Export did not complete: {e}")
        return 1

    try:
        path = result.save(out_dir or app_config.get_export_dir())
    except OSError as e:
        logger.error(f"Could not save {result.filename}: {e}")
        return 1
    print(path)
    return 0


def main() -> None:
    """
    VietDoc Entry Point.
    """
    parser = argparse.ArgumentParser(description="VietDoc - Vietnamese office document renderer")
    parser.add_argument("-P", "--profile", type=str, help="Application profile for isolation (e.g. 'dev', 'test')")
    parser.add_argument("--data", type=str, help="JSON file with the document record to load")
    parser.add_argument("--export", choices=[FORMAT_PNG, FORMAT_PDF], help="Export without opening a window")
    parser.add_argument("--out", type=str, help="Output directory for --export")
    args, unknown = parser.parse_known_args()

    app = QApplication(sys.argv)

    app_id = "vietdoc"
    if args.profile:
        app_id = f"vietdoc-{args.profile}"
    QCoreApplication.setApplicationName(app_id)

    app_config = AppConfig(profile=args.profile)

    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("core")
    logger.info(f"VietDoc started (Profile: {args.profile or 'default'})")

    FontRegistry.ensure_ready([app_config.get_fonts_dir()])

    try:
        record = load_record(args.data, app_config)
    except (OSError, ValidationError) as e:
        logger.error(f"Could not load record from {args.data}: {e}")
        sys.exit(2)

    if args.export:
        sys.exit(export_headless(record, app_config, args.export, args.out))

    from gui.main_window import MainWindow

    window = MainWindow(app_config=app_config, record=record)
    if args.profile:
        window.setWindowTitle(f"{window.windowTitle()} [PROFILE: {args.profile.upper()}]")
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
