import re
from pydantic import BaseModel, validator, Field
from typing import Optional

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _normalize_email(v):
    if v is None:
        return v
    v = v.strip().lower()
    if not EMAIL_RE.match(v):
        raise ValueError('Invalid email')
    return v


class UserBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255)

    @validator('first_name', 'last_name', pre=True)
    def strip_names(cls, v):
        return v.strip() if isinstance(v, str) else v

    @validator('email')
    def email_valid(cls, v):
        return _normalize_email(v)


class UserCreate(UserBase):
    password: str = Field(..., min_length=3, max_length=128)


class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, min_length=3, max_length=128)

    @validator('first_name', 'last_name', 'email', 'password', pre=True)
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @validator('email')
    def email_valid(cls, v):
        return _normalize_email(v)


class UserCredentials(BaseModel):
    email: str
    password: str

    @validator('email', pre=True)
    def email_lower(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

