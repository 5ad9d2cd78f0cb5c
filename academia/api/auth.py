"""Login endpoint and the bearer-token dependency every protected route runs."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import AuthError
from academia.core.security import decode_access_token
from academia.repositories.usuarios import UsuarioRepository
from academia.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from academia.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)

TOKEN_MISSING = "Token no proporcionado"
TOKEN_INVALID = "Token inválido o expirado"


@router.post("", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a session token.
    Include the token in the Authorization header as: Bearer <token>

    Accounts still holding a legacy plaintext password are migrated to a
    bcrypt hash on their first successful login.
    """
    token = auth_service.login(UsuarioRepository(db), body.correo, body.clave)
    return TokenResponse(token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Dependency: require a valid Bearer token and return its identity claims. Raises 401 otherwise."""
    if credentials is None or not credentials.credentials:
        raise AuthError(TOKEN_MISSING)
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise AuthError(TOKEN_INVALID)
    try:
        return CurrentUser.model_validate(payload)
    except PydanticValidationError:
        raise AuthError(TOKEN_INVALID)
