from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

STAFF_FIELDS = frozenset({"username", "email", "phone", "cnic", "password", "role"})

PHONE_PATTERN = r"^[0-9]{11}$"
CNIC_PATTERN = r"^[0-9]{13}$"
PASSWORD_MIN_LENGTH = 8


class StaffCreateIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(pattern=PHONE_PATTERN)
    cnic: str = Field(pattern=CNIC_PATTERN)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)
    role: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class StaffUpdateIn(BaseModel):
    """Partial update: every field optional, but never explicitly null."""

    model_config = ConfigDict(extra="forbid")

    username: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    cnic: Optional[str] = Field(default=None, pattern=CNIC_PATTERN)
    password: Optional[str] = Field(default=None, min_length=PASSWORD_MIN_LENGTH)
    role: Optional[str] = Field(default=None, min_length=1)

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data):
        if isinstance(data, dict):
            for field, value in data.items():
                if value is None:
                    raise ValueError(f"{field} must not be null")
        return data

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v is not None else v


class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class StaffOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    phone: str
    cnic: str
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageOut(BaseModel):
    message: str


class LoginOut(MessageOut):
    staffId: str


class StaffUpdateOut(MessageOut):
    staff: StaffOut
