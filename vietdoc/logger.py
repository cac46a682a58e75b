"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/logger.py
Version:        1.0.0
Description:    Logging for VietDoc. One 'vietdoc' logger tree with a console
                handler, an optional rotating log file, per-component level
                overrides (render, export, fonts, gui, core) and debug dumps
                of rendered visual trees.
------------------------------------------------------------------------------
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

ROOT_NAME = "vietdoc"
COMPONENTS = ("render", "export", "fonts", "gui", "core")

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUPS = 3

TREE_LOGGER = "render.tree"


def _parse_level(level: Union[int, str, None]) -> Optional[int]:
    """Maps 'debug'/'INFO'/10 to a logging level; unknown names give None."""
    if isinstance(level, int):
        return level
    if not level:
        return None
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else None


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding="utf-8"
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None,
) -> logging.Logger:
    """
    (Re)configures the 'vietdoc' logger tree. Safe to call repeatedly: the
    previous handlers are closed and replaced.

    Args:
        level: Level for the whole tree; unknown names fall back to WARNING.
        log_file: Optional file receiving the same records as the console.
        component_levels: Overrides such as {"export": "DEBUG"}.

    Returns:
        The configured root logger of the application.
    """
    root = logging.getLogger(ROOT_NAME)
    while root.handlers:
        old = root.handlers.pop()
        old.close()

    root.setLevel(_parse_level(level) or logging.WARNING)
    for handler in _build_handlers(log_file):
        root.addHandler(handler)

    for component, component_level in (component_levels or {}).items():
        if not set_component_level(component, component_level):
            root.warning(f"Ignoring unknown log level {component_level!r} for '{component}'")

    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a component; 'export' and 'vietdoc.export' name the same logger."""
    if name != ROOT_NAME and not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def set_component_level(component: str, level: Union[int, str]) -> bool:
    """
    Overrides the level of one component. Returns False (and changes nothing)
    when the level is not a known logging level.
    """
    numeric = _parse_level(level)
    if numeric is None:
        return False
    logger = get_logger(component)
    logger.setLevel(numeric)
    logger.propagate = True
    return True


def log_visual_tree(tree: Any) -> None:
    """Dumps a rendered visual tree as indented JSON when 'render.tree' is at DEBUG."""
    logger = get_logger(TREE_LOGGER)
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("=== VISUAL TREE START ===")
    logger.debug(tree.model_dump_json(indent=2))
    logger.debug("=== VISUAL TREE END ===")
