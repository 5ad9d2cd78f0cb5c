"""Request/response schemas for login and the authenticated identity."""

from pydantic import AliasChoices, BaseModel, Field


class LoginRequest(BaseModel):
    """
    Credentials for login.

    Both fields are optional at the schema level so that a missing field is
    reported with the login-specific message rather than a generic one.
    """

    correo: str | None = Field(
        default=None,
        validation_alias=AliasChoices("correo", "email"),
        description="Account email",
    )
    clave: str | None = Field(
        default=None,
        validation_alias=AliasChoices("clave", "password", "contrasena"),
        description="Password",
    )


class TokenResponse(BaseModel):
    """Session token returned after a successful login."""

    success: bool = True
    token: str = Field(..., description="Bearer token, valid for JWT_EXPIRE_MINUTES")


class CurrentUser(BaseModel):
    """Identity claims decoded from the bearer token."""

    id: int
    nombre: str
    rol: str
    correo: str
