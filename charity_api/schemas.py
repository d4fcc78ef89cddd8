from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel


class FormModel(BaseModel):
    # Inbound JSON is camelCase; unknown keys are rejected
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ContactForm(FormModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class VolunteerForm(FormModel):
    full_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    preferred_area: str = Field(..., min_length=1)
    skills: Optional[str] = None
    availability: Optional[List[str]] = None


class SubscribeForm(FormModel):
    email: EmailStr


class DonationForm(FormModel):
    full_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    country: Optional[str] = None
    amount: Decimal = Field(..., ge=1)
    type: Literal["one-time", "monthly"]
    method: Literal["gateway", "paypal", "bank"]

    @model_validator(mode="after")
    def phone_required_for_gateway(self):
        if self.method == "gateway" and not (self.phone and self.phone.strip()):
            raise ValueError('"phone" is required for gateway payments')
        return self


def first_error_message(errors) -> str:
    """Turn the first pydantic error into a short client-facing message."""
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = list(error.get("loc") or ())
    if loc and loc[0] == "body":
        loc = loc[1:]
    field = ".".join(str(part) for part in loc)
    msg = error.get("msg", "is invalid")
    kind = error.get("type")

    if not field:
        if kind == "missing":
            return "Request body is required"
        return msg.removeprefix("Value error, ")
    if kind == "missing":
        return f'"{field}" is required'
    if kind == "extra_forbidden":
        return f'"{field}" is not allowed'
    return f'"{field}": {msg}'
