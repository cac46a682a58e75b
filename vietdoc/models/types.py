"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/models/types.py
Version:        1.0.0
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum
from typing import Dict, FrozenSet


class DocumentType(str, Enum):
    """The nine fixed administrative document kinds."""
    TRAVEL_ORDER = "giay-cong-tac"
    INTRODUCTION_LETTER = "giay-gioi-thieu"
    WORK_CONFIRMATION = "giay-xac-nhan"
    LEAVE_REQUEST = "giay-nghi-phep"
    ADVANCE_PAYMENT = "giay-de-nghi-tam-ung"
    PAYMENT_REQUEST = "giay-de-nghi-thanh-toan"
    HANDOVER_REPORT = "bien-ban-ban-giao"
    BUSINESS_TRIP_ASSIGNMENT = "giay-cu-di-cong-tac"
    DUTY_ROSTER_REQUEST = "giay-yeu-cau-truc"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FontWeight(int, Enum):
    """CSS numeric font weights."""
    NORMAL = 400
    SEMIBOLD = 600
    BOLD = 700
    BLACK = 900


class BorderKind(str, Enum):
    NONE = "none"
    SOLID = "solid"
    DOUBLE = "double"
    # Top and bottom rules only
    RULES = "rules"


class HeaderLayout(str, Enum):
    SIDE_BY_SIDE = "side-by-side"
    STACKED = "stacked"


class SignatureLayout(str, Enum):
    THREE_COLUMN = "three-column"
    TWO_COLUMN = "two-column"


DOCUMENT_TITLES: Dict[DocumentType, str] = {
    DocumentType.TRAVEL_ORDER: "GIẤY ĐI ĐƯỜNG",
    DocumentType.INTRODUCTION_LETTER: "GIẤY GIỚI THIỆU",
    DocumentType.WORK_CONFIRMATION: "GIẤY XÁC NHẬN CÔNG TÁC",
    DocumentType.LEAVE_REQUEST: "ĐƠN XIN NGHỈ PHÉP",
    DocumentType.ADVANCE_PAYMENT: "GIẤY ĐỀ NGHỊ TẠM ỨNG",
    DocumentType.PAYMENT_REQUEST: "GIẤY ĐỀ NGHỊ THANH TOÁN",
    DocumentType.HANDOVER_REPORT: "BIÊN BẢN BÀN GIAO",
    DocumentType.BUSINESS_TRIP_ASSIGNMENT: "QUYẾT ĐỊNH CỬ ĐI CÔNG TÁC",
    DocumentType.DUTY_ROSTER_REQUEST: "GIẤY YÊU CẦU TRỰC",
}

# Short labels for type pickers
DOCUMENT_LABELS: Dict[DocumentType, str] = {
    DocumentType.TRAVEL_ORDER: "Giấy đi đường",
    DocumentType.INTRODUCTION_LETTER: "Giấy giới thiệu",
    DocumentType.WORK_CONFIRMATION: "Giấy xác nhận",
    DocumentType.LEAVE_REQUEST: "Đơn nghỉ phép",
    DocumentType.ADVANCE_PAYMENT: "Giấy tạm ứng",
    DocumentType.PAYMENT_REQUEST: "Giấy thanh toán",
    DocumentType.HANDOVER_REPORT: "Biên bản bàn giao",
    DocumentType.BUSINESS_TRIP_ASSIGNMENT: "Giấy cử đi công tác",
    DocumentType.DUTY_ROSTER_REQUEST: "Giấy yêu cầu trực",
}

PAYMENT_TYPES: FrozenSet[DocumentType] = frozenset({
    DocumentType.ADVANCE_PAYMENT,
    DocumentType.PAYMENT_REQUEST,
})
