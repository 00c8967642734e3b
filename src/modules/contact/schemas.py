# src/modules/contact/schemas.py

import enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Same rule browsers apply to <input type="email">
HTML_EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

class SubmitStatus(enum.Enum):
    IDLE = "idle"
    SENDING = "sending"
    SUCCESS = "success"
    ERROR = "error"

class FormValues(BaseModel):
    """Raw text currently held by the contact form fields."""
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    message: str = ""

class ContactFormRequest(BaseModel):
    # Required means non-empty, as with the HTML `required` attribute
    name: str = Field(min_length=1)
    company: str = Field(min_length=1)
    email: str = Field(pattern=HTML_EMAIL_PATTERN)
    phone: str = ""
    message: str = Field(min_length=1)

    @field_validator("phone", mode="before")
    def empty_phone(cls, value):
        return "" if value is None else value

class ContactFormResponse(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: SubmitStatus
    message: Optional[str] = None
