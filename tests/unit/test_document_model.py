from datetime import date

import pytest
from pydantic import ValidationError

from vietdoc.models.document import DocumentRecord
from vietdoc.models.types import DOCUMENT_TITLES, PAYMENT_TYPES, DocumentType


def test_sample_defaults():
    record = DocumentRecord.sample()
    assert record.type == DocumentType.TRAVEL_ORDER
    assert record.format_id == 1
    assert record.full_name == "Nguyễn Văn A"
    assert record.show_seal and record.show_signature and record.show_salutation
    assert record.issue_date == date.today()


def test_camel_case_session_keys():
    record = DocumentRecord.model_validate({
        "type": "giay-nghi-phep",
        "formatId": 7,
        "companyName": "CÔNG TY ABC",
        "fullName": "Lê Thị Hoa",
        "birthDate": "01/02/1990",
        "citizenId": "001122334455",
        "amountInWords": "Một triệu đồng",
        "showKinhGui": False,
        "showSeal": False,
        "date": "2024-03-05",
    })
    assert record.type == DocumentType.LEAVE_REQUEST
    assert record.format_id == 7
    assert record.company_name == "CÔNG TY ABC"
    assert record.birth_date == "01/02/1990"
    assert record.id_card == "001122334455"
    assert record.amount_in_words == "Một triệu đồng"
    assert record.show_salutation is False
    assert record.show_seal is False
    assert record.issue_date == date(2024, 3, 5)


def test_id_card_key_and_field_name():
    assert DocumentRecord.model_validate({"idCard": "123"}).id_card == "123"
    assert DocumentRecord(id_card="456").id_card == "456"


def test_missing_text_becomes_empty():
    record = DocumentRecord.model_validate({"fullName": None, "reason": None, "amount": None})
    assert record.full_name == ""
    assert record.reason == ""
    assert record.amount is None


def test_unknown_type_is_rejected():
    with pytest.raises(ValidationError):
        DocumentRecord.model_validate({"type": "giay-khong-ton-tai"})


def test_assignment_is_validated():
    record = DocumentRecord()
    record.type = "giay-de-nghi-tam-ung"
    assert record.type == DocumentType.ADVANCE_PAYMENT
    with pytest.raises(ValidationError):
        record.type = "not-a-type"


def test_any_integer_format_id_is_accepted():
    assert DocumentRecord(format_id=999).format_id == 999
    assert DocumentRecord(format_id=-3).format_id == -3


@pytest.mark.parametrize("name, token", [
    ("Trần Văn B", "B"),
    ("  Lê   Thị  Hoa ", "Hoa"),
    ("Minh", "Minh"),
    ("", ""),
])
def test_signature_token(name, token):
    assert DocumentRecord(signer_name=name).signature_token == token


def test_payment_types():
    for doc_type in DocumentType:
        record = DocumentRecord(type=doc_type)
        assert record.is_payment_type == (doc_type in PAYMENT_TYPES)
    assert PAYMENT_TYPES == {DocumentType.ADVANCE_PAYMENT, DocumentType.PAYMENT_REQUEST}


def test_titles_cover_every_type():
    assert set(DOCUMENT_TITLES) == set(DocumentType)
    assert DOCUMENT_TITLES[DocumentType.TRAVEL_ORDER] == "GIẤY ĐI ĐƯỜNG"


def test_json_round_trip_uses_aliases():
    record = DocumentRecord(full_name="Phạm Văn C", issue_date=date(2023, 10, 20))
    data = record.model_dump_json(by_alias=True)
    assert '"fullName"' in data
    assert DocumentRecord.model_validate_json(data) == record
