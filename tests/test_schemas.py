import pytest
from pydantic import ValidationError

from charity_api.schemas import DonationForm, VolunteerForm, first_error_message


def test_camel_case_aliases():
    form = VolunteerForm.model_validate({
        "fullName": "Sara",
        "email": "sara@example.com",
        "preferredArea": "Health",
    })

    assert form.full_name == "Sara"
    assert form.preferred_area == "Health"
    assert form.availability is None


def test_empty_required_string_rejected():
    with pytest.raises(ValidationError) as exc:
        VolunteerForm.model_validate({"fullName": "", "email": "sara@example.com", "preferredArea": "Health"})

    assert first_error_message(exc.value.errors()).startswith('"fullName"')


def test_phone_required_only_for_gateway():
    base = {"fullName": "A B", "email": "a@b.com", "amount": 5, "type": "monthly"}

    DonationForm.model_validate(dict(base, method="paypal"))
    DonationForm.model_validate(dict(base, method="gateway", phone="0911000000"))

    with pytest.raises(ValidationError):
        DonationForm.model_validate(dict(base, method="gateway", phone="  "))


def test_first_error_message_formats():
    assert first_error_message([]) == "Invalid request"
    assert first_error_message([{"loc": ("body",), "type": "missing", "msg": "Field required"}]) == "Request body is required"
    assert first_error_message([{"loc": ("body", "email"), "type": "missing", "msg": "Field required"}]) == '"email" is required'
    assert first_error_message([{"loc": ("body", "x"), "type": "extra_forbidden", "msg": "Extra inputs"}]) == '"x" is not allowed'
    assert first_error_message([
        {"loc": ("body", "amount"), "type": "greater_than_equal", "msg": "Input should be greater than or equal to 1"},
        {"loc": ("body", "type"), "type": "missing", "msg": "Field required"},
    ]) == '"amount": Input should be greater than or equal to 1'
