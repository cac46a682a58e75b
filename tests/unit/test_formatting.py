from datetime import date, datetime

import pytest

from vietdoc.utils.formatting import format_amount, format_issue_date, format_place_date


@pytest.mark.parametrize("value, expected", [
    (date(2024, 3, 5), "ngày 05 tháng 03 năm 2024"),
    (datetime(2023, 12, 31, 23, 59), "ngày 31 tháng 12 năm 2023"),
    ("2024-11-02", "ngày 02 tháng 11 năm 2024"),
    ("2024-11-02T08:30:00", "ngày 02 tháng 11 năm 2024"),
    ("", ""),
    (None, ""),
    ("không rõ", "không rõ"),
])
def test_format_issue_date(value, expected):
    assert format_issue_date(value) == expected


def test_format_place_date():
    assert format_place_date("Hà Nội", date(2024, 3, 5)) == "Hà Nội, ngày 05 tháng 03 năm 2024"
    assert format_place_date("", date(2024, 3, 5)) == "ngày 05 tháng 03 năm 2024"


def test_format_amount():
    assert format_amount("7.250.000") == "7.250.000 VNĐ"
    assert format_amount(500, currency="USD") == "500 USD"
    assert format_amount("") == ""
    assert format_amount("   ") == ""
    assert format_amount(None) == ""
