from typing import Literal

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Schema for admin login.

    Fields are optional here so that absent and empty values get the same
    400 answer from the auth service.
    """

    email: str | None = None
    password: str | None = None


class AdminUser(BaseModel):
    email: str
    role: Literal["admin"] = "admin"


class TokenClaims(AdminUser):
    """Decoded admin token."""

    exp: int
    iat: int | None = None


class LoginData(BaseModel):
    token: str
    user: AdminUser
