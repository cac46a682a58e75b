from datetime import date, datetime
from typing import Any


def format_issue_date(val: Any) -> str:
    """
    Formats an issue date the way Vietnamese letterheads print it:
    'ngày 05 tháng 03 năm 2024'.
    Accepts date/datetime objects or ISO strings; anything else is returned as text.
    """
    if val is None or val == "":
        return ""

    if isinstance(val, datetime):
        val = val.date()
    if not isinstance(val, date):
        try:
            val = date.fromisoformat(str(val).split("T")[0])
        except ValueError:
            return str(val)

    return f"ngày {val.day:02d} tháng {val.month:02d} năm {val.year}"


def format_place_date(location: str, val: Any) -> str:
    """'Hà Nội, ngày 05 tháng 03 năm 2024' - the dated line of the motto block."""
    formatted = format_issue_date(val)
    if not location:
        return formatted
    return f"{location}, {formatted}"


def format_amount(amount: Any, currency: str = "VNĐ") -> str:
    """Appends the currency to a caller-formatted amount; blank amounts stay blank."""
    if amount is None or str(amount).strip() == "":
        return ""
    return f"{amount} {currency}".strip()
