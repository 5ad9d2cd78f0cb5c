"""The caller's own profile and password."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academia.api.auth import get_current_user
from academia.core.database import get_db
from academia.core.errors import AuthError
from academia.repositories.usuarios import UsuarioRepository
from academia.schemas.auth import CurrentUser
from academia.schemas.common import MessageResponse
from academia.schemas.usuarios import CambioClaveRequest, PerfilOut, PerfilResponse
from academia.services.credentials import change_password

router = APIRouter()

USUARIO_INACTIVO = "Usuario inactivo"


@router.get("", response_model=PerfilResponse)
def get_perfil(
    me: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PerfilResponse:
    """Profile of the account the token was issued to; `usuario` is null if it no longer exists."""
    usuario = UsuarioRepository(db).get(me.id)
    return PerfilResponse(usuario=PerfilOut.model_validate(usuario) if usuario else None)


@router.put("/clave", response_model=MessageResponse)
def put_clave(
    body: CambioClaveRequest,
    me: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Change the caller's password after checking the current one. Inactive accounts get 401, as at login."""
    repo = UsuarioRepository(db)
    usuario = repo.get_or_404(me.id)
    if not usuario.estado:
        raise AuthError(USUARIO_INACTIVO)
    change_password(repo, usuario, body.clave_actual, body.clave_nueva)
    return MessageResponse(message="Contraseña actualizada")
