"""
Campus Web — Form Schemas
===========================

What:  Validation rules for the login and registration forms.
How:   Routes build these from submitted form fields. A pydantic
       ValidationError is turned into one flash message per failed rule by
       `form_error_messages()`, and the user is sent back to the form.

Rules (registration):
    name              at least 2 characters after trimming
    email             valid address, normalised to lower case
    email_confirm     must equal email
    password          at least 8 characters, one digit, one of !@#$%^&*
    password_confirm  must equal password
"""

import re
from typing import List

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator, model_validator

SPECIAL_CHARACTERS = re.compile(r"[!@#$%^&*]")
DIGIT = re.compile(r"[0-9]")


def _normalize_email(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class LoginForm(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str) -> str:
        if len(v) < 8:
            raise ValueError("Password is required")
        return v


class RegistrationForm(BaseModel):
    name: str = Field(default="")
    email: EmailStr
    email_confirm: str = Field(default="")
    password: str = Field(default="")
    password_confirm: str = Field(default="")

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("email", "email_confirm", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        if len(v) < 8:
            raise ValueError("Password must be at least 8 characters")
        if not DIGIT.search(v):
            raise ValueError("Password must contain at least one number")
        if not SPECIAL_CHARACTERS.search(v):
            raise ValueError("Password must contain at least one special character")
        return v

    @model_validator(mode="after")
    def confirmations_match(self) -> "RegistrationForm":
        if self.email_confirm != self.email:
            raise ValueError("Email addresses must match")
        if self.password_confirm != self.password:
            raise ValueError("Passwords must match")
        return self


def form_error_messages(exc: ValidationError) -> List[str]:
    """Human-readable messages for each failed rule, in field order."""
    messages = []
    for error in exc.errors():
        if error["loc"] and error["loc"][0] == "email":
            message = "Please provide a valid email address"
        elif error["type"] == "value_error" and "error" in error.get("ctx", {}):
            message = str(error["ctx"]["error"])
        else:
            message = error["msg"]
        if message not in messages:
            messages.append(message)
    return messages
