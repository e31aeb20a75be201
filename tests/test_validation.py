import pytest

from personal_api.schemas import ContactIn
from personal_api.services.validation import Invalid, Valid, validate_contact


def _form(**overrides) -> ContactIn:
    data = {
        "email": "jane.doe@gmail.com",
        "firstName": "Jane",
        "lastName": "Doe",
        "phoneNumber": "5550109999",
        "message": "Hello",
    }
    data.update(overrides)
    return ContactIn.model_validate(data)


def test_valid_submission() -> None:
    result = validate_contact(_form())
    assert isinstance(result, Valid)
    assert result.submission.first_name == "Jane"


@pytest.mark.parametrize("field", ["firstName", "lastName"])
@pytest.mark.parametrize("length,ok", [(0, False), (1, True), (100, True), (101, False)])
def test_name_length_bounds(field: str, length: int, ok: bool) -> None:
    result = validate_contact(_form(**{field: "x" * length}))
    assert isinstance(result, Valid) is ok
    if not ok:
        assert result.errors[field][0]["code"] == "length"
        assert result.errors[field][0]["params"]["min"] == 1
        assert result.errors[field][0]["params"]["max"] == 100


@pytest.mark.parametrize("length,ok", [(0, False), (1, True), (1000, True), (1001, False)])
def test_message_length_bounds(length: int, ok: bool) -> None:
    result = validate_contact(_form(message="m" * length))
    assert isinstance(result, Valid) is ok


@pytest.mark.parametrize("length,ok", [(9, False), (10, True), (20, True), (21, False)])
def test_phone_length_bounds(length: int, ok: bool) -> None:
    result = validate_contact(_form(phoneNumber="5" * length))
    assert isinstance(result, Valid) is ok


def test_length_counts_characters_not_bytes() -> None:
    # 100 two-byte characters is still 100 characters
    assert isinstance(validate_contact(_form(firstName="é" * 100)), Valid)


@pytest.mark.parametrize("email", ["not-an-email", "jane@", "@gmail.com", "jane doe@gmail.com", ""])
def test_bad_email_rejected(email: str) -> None:
    result = validate_contact(_form(email=email))
    assert isinstance(result, Invalid)
    assert result.errors["email"][0]["code"] == "email"


def test_all_violations_reported_together() -> None:
    result = validate_contact(_form(email="nope", firstName="", message=""))
    assert isinstance(result, Invalid)
    assert set(result.errors) == {"email", "firstName", "message"}


@pytest.mark.parametrize("email", ["jane@localhost", "jane@mail.test"])
def test_special_use_domains_rejected(email: str) -> None:
    assert isinstance(validate_contact(_form(email=email)), Invalid)
