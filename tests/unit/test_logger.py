"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           tests/unit/test_logger.py
Version:        1.0.0
Description:    Unit tests for the centralized logging system.
------------------------------------------------------------------------------
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from vietdoc.logger import get_logger, log_visual_tree, set_component_level, setup_logging
from vietdoc.models.style import StyleDescriptor
from vietdoc.renderer import render


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    root = logging.getLogger("vietdoc")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    for name in ("export", "render", "render.tree", "gui"):
        get_logger(name).setLevel(logging.NOTSET)


def _flush():
    for handler in logging.getLogger("vietdoc").handlers:
        handler.flush()


def test_logger_namespacing():
    """Verify that get_logger returns a child of the vietdoc root."""
    logger = get_logger("export")
    assert logger.name == "vietdoc.export"
    assert isinstance(logger, logging.Logger)
    assert get_logger("vietdoc.gui").name == "vietdoc.gui"
    assert get_logger("vietdoc").name == "vietdoc"


def test_logging_to_file(tmp_path):
    """Verify that logs are correctly written to a file."""
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    get_logger("export").debug("Logging to file test message")
    _flush()

    assert log_file.exists()
    assert "Logging to file test message" in log_file.read_text(encoding="utf-8")


def test_component_level_overrides(tmp_path):
    """Verify that specific components can have different log levels."""
    log_file = tmp_path / "component.log"
    setup_logging(level="INFO", log_file=str(log_file), component_levels={"export": "DEBUG"})

    get_logger("export").debug("EXPORT DEBUG MESSAGE")
    get_logger("gui").debug("GUI DEBUG MESSAGE")
    _flush()

    content = log_file.read_text(encoding="utf-8")
    assert "EXPORT DEBUG MESSAGE" in content
    assert "GUI DEBUG MESSAGE" not in content


def test_unknown_component_level_is_ignored():
    logger = get_logger("render")
    logger.setLevel(logging.ERROR)
    assert set_component_level("render", "LOUD") is False
    assert logger.level == logging.ERROR
    assert set_component_level("render", "info") is True
    assert logger.level == logging.INFO


def test_quiet_default_mode(tmp_path):
    """Verify that the system is quiet at the default level."""
    log_file = tmp_path / "quiet.log"
    setup_logging(level="WARNING", log_file=str(log_file))

    get_logger("export").info("THIS SHOULD NOT APPEAR")
    _flush()

    assert "THIS SHOULD NOT APPEAR" not in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    setup_logging(level="INFO", log_file=str(tmp_path / "b.log"))
    assert len(logging.getLogger("vietdoc").handlers) == 2


def test_visual_tree_dump_only_at_debug(tmp_path, record):
    log_file = tmp_path / "tree.log"
    setup_logging(level="INFO", log_file=str(log_file))
    tree = render(record, StyleDescriptor())

    log_visual_tree(tree)
    _flush()
    assert "VISUAL TREE START" not in log_file.read_text(encoding="utf-8")

    set_component_level("render.tree", "DEBUG")
    log_visual_tree(tree)
    _flush()
    content = log_file.read_text(encoding="utf-8")
    assert "VISUAL TREE START" in content
    assert record.company_name in content


def test_setup_returns_configured_root(tmp_path):
    root = setup_logging(level="bogus", log_file=str(tmp_path / "app.log"))
    assert root is logging.getLogger("vietdoc")
    assert root.level == logging.WARNING
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)


def test_bad_component_level_is_reported(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level="INFO", log_file=str(log_file), component_levels={"gui": "CHATTY"})
    _flush()
    assert "Ignoring unknown log level 'CHATTY' for 'gui'" in log_file.read_text(encoding="utf-8")
