"""Account administration: list, create, read, update and soft-delete users."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import ConflictError, NotFoundError
from academia.core.security import hash_password
from academia.repositories.usuarios import RolRepository, UsuarioRepository
from academia.schemas.common import CreatedResponse, MessageResponse
from academia.schemas.usuarios import (
    UsuarioCreate,
    UsuarioOut,
    UsuarioResponse,
    UsuariosResponse,
    UsuarioUpdate,
)

router = APIRouter()

CORREO_DUPLICADO = "Correo ya registrado"


def _require_rol(db: Session, rol_id: int) -> None:
    if RolRepository(db).get(rol_id) is None:
        raise NotFoundError("Rol no encontrado")


@router.get("", response_model=UsuariosResponse)
def list_usuarios(db: Annotated[Session, Depends(get_db)]) -> UsuariosResponse:
    """All accounts, active and inactive, with their role name."""
    usuarios = UsuarioRepository(db).list_all()
    return UsuariosResponse(usuarios=[UsuarioOut.model_validate(u) for u in usuarios])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_usuario(
    body: UsuarioCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Create an account. The email must be unused, including by inactive accounts."""
    repo = UsuarioRepository(db)
    if repo.correo_exists(body.correo):
        raise ConflictError(CORREO_DUPLICADO)
    _require_rol(db, body.rol_id)
    usuario = repo.create(
        nombre_completo=body.nombre_completo,
        correo=body.correo.strip(),
        contrasena=hash_password(body.contrasena),
        rol_id=body.rol_id,
        estado=body.estado,
    )
    return CreatedResponse(message="Usuario creado", id=usuario.usuario_id)


@router.get("/{usuario_id}", response_model=UsuarioResponse)
def get_usuario(
    usuario_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> UsuarioResponse:
    usuario = UsuarioRepository(db).get_or_404(usuario_id)
    return UsuarioResponse(usuario=UsuarioOut.model_validate(usuario))


@router.put("/{usuario_id}", response_model=MessageResponse)
def update_usuario(
    usuario_id: int,
    body: UsuarioUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Update name, email, role or state; a `contrasena` field sets a new (hashed) password."""
    repo = UsuarioRepository(db)
    usuario = repo.get_or_404(usuario_id)
    values = body.model_dump(exclude_unset=True)
    if "correo" in values:
        values["correo"] = values["correo"].strip()
        if repo.correo_exists(values["correo"], exclude_id=usuario_id):
            raise ConflictError(CORREO_DUPLICADO)
    if "rol_id" in values:
        _require_rol(db, values["rol_id"])
    if "contrasena" in values:
        values["contrasena"] = hash_password(values["contrasena"])
    repo.update(usuario, **values)
    return MessageResponse(message="Usuario actualizado")


@router.delete("/{usuario_id}", response_model=MessageResponse)
def delete_usuario(
    usuario_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Soft delete: the account is marked inactive and can no longer log in."""
    repo = UsuarioRepository(db)
    repo.set_estado(repo.get_or_404(usuario_id), False)
    return MessageResponse(message="Usuario inactivado")
