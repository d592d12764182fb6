from uuid import UUID

from pydantic import BaseModel, Field, SecretStr


class LoginRequest(BaseModel):
    """Username/password pair posted to the login endpoint."""

    username: str = Field(..., examples=["mluukkai"])
    password: SecretStr = Field(..., examples=["salainen"])


class LoginResponse(BaseModel):
    """Token issued on successful login."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Claims extracted from a verified access token."""

    username: str | None = None
    user_id: UUID | None = None
    jti: str | None = None
    token_type: str | None = None
