import pytest
from reportlab.lib.pagesizes import A4

from vietdoc.exporter import build_export_filename, fit_to_page
from vietdoc.models.types import DocumentType

PAGE_W, PAGE_H = A4


def test_wide_image_is_centred_vertically():
    placement = fit_to_page(1588, 1000, PAGE_W, PAGE_H)
    scaled_h = 1000 * PAGE_W / 1588
    assert placement.x == 0
    assert placement.width == pytest.approx(PAGE_W)
    assert placement.height == pytest.approx(scaled_h)
    assert placement.y == pytest.approx((PAGE_H - scaled_h) / 2)
    # Equal blank margins top and bottom
    assert placement.y == pytest.approx(PAGE_H - placement.y - placement.height)
    assert placement.visible_fraction == 1.0


def test_tall_image_is_top_aligned_and_clamped():
    placement = fit_to_page(1588, 4000, PAGE_W, PAGE_H)
    assert placement.y == 0
    assert placement.width == pytest.approx(PAGE_W)
    assert placement.height == pytest.approx(PAGE_H)
    assert placement.visible_fraction == pytest.approx(PAGE_H / (4000 * PAGE_W / 1588))


def test_exact_page_aspect_fills_page():
    placement = fit_to_page(PAGE_W * 2, PAGE_H * 2, PAGE_W, PAGE_H)
    assert placement.y == pytest.approx(0.0, abs=1e-6)
    assert placement.height == pytest.approx(PAGE_H)
    assert placement.visible_fraction == pytest.approx(1.0)


@pytest.mark.parametrize("img_w, img_h", [(10, 10), (1588, 2246), (300, 5000), (5000, 300)])
def test_aspect_ratio_is_preserved(img_w, img_h):
    placement = fit_to_page(img_w, img_h, PAGE_W, PAGE_H)
    assert placement.width == pytest.approx(PAGE_W)
    assert placement.height <= PAGE_H + 1e-9
    # Shown part of the image keeps the source ratio
    shown_h = img_h * placement.visible_fraction
    assert placement.width / placement.height == pytest.approx(img_w / shown_h)


@pytest.mark.parametrize("dims", [(0, 10, 1, 1), (10, 0, 1, 1), (10, 10, 0, 1), (10, 10, 1, -1)])
def test_invalid_dimensions(dims):
    with pytest.raises(ValueError):
        fit_to_page(*dims)


def test_export_filename():
    assert build_export_filename(DocumentType.LEAVE_REQUEST, 1700000000000, "pdf") == \
        "giay-nghi-phep-1700000000000.pdf"
    assert build_export_filename("custom", 5, "png") == "custom-5.png"
