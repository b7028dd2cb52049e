"""User schemas"""

from pydantic import BaseModel


class UserBase(BaseModel):
    email: str
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None


class UserCreate(UserBase):
    is_active: bool = True


class UserUpdate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    is_active: bool | None = None
