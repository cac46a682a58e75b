"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/fonts.py
Version:        1.0.0
Description:    Application font registry. Loads bundled/user font files into
                Qt's font database once, before the first paint or capture,
                so exports never rasterize with fallback glyphs.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Iterable, List, Optional, Set

from PyQt6.QtGui import QFont, QFontDatabase

from vietdoc.logger import get_logger

logger = get_logger("fonts")

FONT_SUFFIXES = {".ttf", ".otf"}
DEFAULT_SIGNATURE_FAMILIES = ("Dancing Script", "Great Vibes", "URW Chancery L", "cursive")


class FontRegistry:
    """
    Process-wide font loader. ensure_ready() is idempotent and must be
    called on the GUI thread (QFontDatabase is not thread-safe).
    """
    _loaded_files: Set[str] = set()
    _families: List[str] = []
    _ready: bool = False

    @classmethod
    def ensure_ready(cls, font_dirs: Optional[Iterable[Path]] = None) -> List[str]:
        """
        Registers all font files found in the given directories.

        Returns:
            The families registered by this registry so far.
        """
        for font_dir in font_dirs or ():
            cls._load_dir(Path(font_dir))
        if not cls._ready:
            cls._ready = True
            logger.debug(f"Fonts ready ({len(cls._families)} application families)")
        return list(cls._families)

    @classmethod
    def _load_dir(cls, font_dir: Path) -> None:
        if not font_dir.is_dir():
            logger.debug(f"Font directory not found: {font_dir}")
            return

        for path in sorted(font_dir.iterdir()):
            if path.suffix.lower() not in FONT_SUFFIXES:
                continue
            key = str(path.resolve())
            if key in cls._loaded_files:
                continue
            cls._loaded_files.add(key)

            font_id = QFontDatabase.addApplicationFont(key)
            if font_id < 0:
                logger.warning(f"Could not load font file: {path}")
                continue
            families = QFontDatabase.applicationFontFamilies(font_id)
            cls._families.extend(f for f in families if f not in cls._families)
            logger.info(f"Loaded font {path.name}: {', '.join(families)}")

    @classmethod
    def is_ready(cls) -> bool:
        return cls._ready

    @classmethod
    def reset(cls) -> None:
        """Forgets the load state. Registered Qt fonts stay registered."""
        cls._loaded_files.clear()
        cls._families.clear()
        cls._ready = False


def make_font(families: Iterable[str], size_px: float, weight: int = 400, italic: bool = False) -> QFont:
    """Builds a QFont from a CSS-style family fallback list, sized in pixels."""
    font = QFont()
    font.setFamilies(list(families))
    font.setPixelSize(max(1, round(size_px)))
    font.setWeight(QFont.Weight(weight))
    font.setItalic(italic)
    return font
