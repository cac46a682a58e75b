"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/models/document.py
Version:        1.0.0
Description:    The DocumentRecord: single source of truth for one editing
                session. Mutated field-by-field by the editing UI, read-only
                to the renderer and the export pipeline.
------------------------------------------------------------------------------
"""

from datetime import date
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from vietdoc.models.types import DocumentType, PAYMENT_TYPES


class DocumentRecord(BaseModel):
    """
    All fields needed to render any of the nine document types.
    Field aliases follow the camelCase keys of exported editor sessions
    (e.g. 'companyName', 'formatId', 'showKinhGui').
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    type: DocumentType = DocumentType.TRAVEL_ORDER
    format_id: int = 1

    # Organisation
    company_name: str = "CÔNG TY TNHH MTV GIẢI PHÁP CÔNG NGHỆ SỐ"
    department: str = "PHÒNG KỸ THUẬT"
    document_number: str = "123/GCT-CNS"
    location: str = "Hà Nội"
    issue_date: date = Field(default_factory=date.today, alias="date")
    tax_code: str = "0101234567"

    # Person
    full_name: str = "Nguyễn Văn A"
    position: str = "Nhân viên kỹ thuật"
    birth_date: str = ""
    # Older sessions store the citizen id under "citizenId"
    id_card: str = Field(
        "0123456789",
        validation_alias=AliasChoices("idCard", "citizenId", "id_card"),
        serialization_alias="idCard",
    )
    id_date: str = "01/01/2020"
    id_place: str = "Cục Cảnh sát QLHC về TTXH"

    # Content (display strings, format is caller-supplied)
    reason: str = "Tham gia triển khai dự án phần mềm quản lý kho"
    destination: str = "Chi nhánh Hồ Chí Minh - Quận 1"
    duration_from: str = "20/10/2023"
    duration_to: str = "25/10/2023"

    # Money (payment types only)
    amount: Optional[str] = "5.000.000"
    amount_in_words: Optional[str] = "Năm triệu đồng chẵn"

    # Signer
    signer_name: str = "Trần Văn B"
    signer_title: str = "GIÁM ĐỐC"

    # Presentation toggles
    show_seal: bool = True
    show_signature: bool = True
    show_salutation: bool = Field(True, alias="showKinhGui")

    # Never read by the seal renderer; company_name is authoritative.
    seal_text: str = "CÔNG TY TNHH MTV GIẢI PHÁP CÔNG NGHỆ SỐ"

    @field_validator(
        "company_name", "department", "document_number", "location", "tax_code",
        "full_name", "position", "birth_date", "id_card", "id_date", "id_place",
        "reason", "destination", "duration_from", "duration_to",
        "signer_name", "signer_title", "seal_text",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        """Missing text renders as an empty string."""
        return "" if value is None else value

    @classmethod
    def sample(cls) -> "DocumentRecord":
        """Returns the default record used when a session starts."""
        return cls()

    @property
    def is_payment_type(self) -> bool:
        return self.type in PAYMENT_TYPES

    @property
    def signature_token(self) -> str:
        """Last name token of the signer (Vietnamese given name)."""
        parts = self.signer_name.split()
        return parts[-1] if parts else ""
