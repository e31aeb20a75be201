from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ContactIn(BaseModel):
    """Contact form body. Only shape/types here; limits live in services.validation."""

    model_config = ConfigDict(populate_by_name=True)

    email: StrictStr
    first_name: StrictStr = Field(alias="firstName")
    last_name: StrictStr = Field(alias="lastName")
    phone_number: StrictStr = Field(alias="phoneNumber")
    message: StrictStr

    @field_validator("*")
    @classmethod
    def utf8_encodable(cls, v: str) -> str:
        # JSON "\ud800" escapes decode to lone surrogates, which can't be re-encoded
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text (no lone surrogates)")
        return v


class ContactOut(BaseModel):
    success: bool
    message: str
    id: str


# ---- Brevo transactional email payload ----

class BrevoSender(BaseModel):
    name: str
    email: str


class BrevoRecipient(BaseModel):
    email: str
    name: Optional[str] = None


class BrevoEmail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: BrevoSender
    to: list[BrevoRecipient]
    subject: str
    html_content: str = Field(alias="htmlContent")
