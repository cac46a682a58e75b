import logging
import shutil
from pathlib import Path

import pytest
from PyQt6.QtGui import QFont

from vietdoc.fonts import FontRegistry, make_font


@pytest.fixture
def registry(qapp):
    FontRegistry.reset()
    yield FontRegistry
    FontRegistry.reset()


def _system_font():
    for root in (Path("/usr/share/fonts"), Path("/usr/local/share/fonts")):
        if root.is_dir():
            for path in sorted(root.rglob("*.ttf")):
                return path
    return None


def test_reset_clears_ready_state(registry):
    assert not registry.is_ready()
    registry.ensure_ready()
    assert registry.is_ready()
    registry.reset()
    assert not registry.is_ready()


def test_missing_directory_is_tolerated(registry, tmp_path):
    assert registry.ensure_ready([tmp_path / "nowhere"]) == []
    assert registry.is_ready()


def test_broken_font_files_are_skipped(registry, tmp_path, caplog):
    (tmp_path / "broken.ttf").write_bytes(b"not a font")
    (tmp_path / "readme.txt").write_text("ignored")

    with caplog.at_level(logging.WARNING, logger="vietdoc.fonts"):
        assert registry.ensure_ready([tmp_path]) == []
        # A file is only attempted once per registry lifetime
        registry.ensure_ready([tmp_path])

    warnings = [r for r in caplog.records if "broken.ttf" in r.getMessage()]
    assert len(warnings) == 1


def test_font_directory_is_loaded_once(registry, tmp_path):
    source = _system_font()
    if source is None:
        pytest.skip("no system .ttf available")
    shutil.copy(source, tmp_path / source.name)

    families = registry.ensure_ready([tmp_path])
    assert families
    assert registry.ensure_ready([tmp_path]) == families


def test_make_font(qapp):
    font = make_font(["Liberation Serif", "serif"], 17.6, weight=700, italic=True)
    assert font.families() == ["Liberation Serif", "serif"]
    assert font.pixelSize() == 18
    assert font.weight() == QFont.Weight.Bold
    assert font.italic()
    assert make_font(["serif"], 0.2).pixelSize() == 1
