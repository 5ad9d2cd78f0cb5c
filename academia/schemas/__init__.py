"""Pydantic request/response schemas."""

from academia.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from academia.schemas.common import CreatedResponse, MessageResponse
from academia.schemas.health import HealthResponse

__all__ = [
    "CreatedResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "TokenResponse",
]
