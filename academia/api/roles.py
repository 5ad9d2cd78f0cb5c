"""Roles catalogue."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import ConflictError
from academia.repositories.usuarios import RolRepository
from academia.schemas.common import CreatedResponse, MessageResponse
from academia.schemas.usuarios import RolCreate, RolesResponse, RolOut

router = APIRouter()

ROL_DUPLICADO = "Rol ya registrado"


@router.get("", response_model=RolesResponse)
def list_roles(db: Annotated[Session, Depends(get_db)]) -> RolesResponse:
    roles = RolRepository(db).list_all()
    return RolesResponse(roles=[RolOut.model_validate(r) for r in roles])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_rol(body: RolCreate, db: Annotated[Session, Depends(get_db)]) -> CreatedResponse:
    repo = RolRepository(db)
    if repo.nombre_exists(body.nombre_rol):
        raise ConflictError(ROL_DUPLICADO)
    rol = repo.create(nombre_rol=body.nombre_rol.strip())
    return CreatedResponse(message="Rol creado", id=rol.rol_id)


@router.put("/{rol_id}", response_model=MessageResponse)
def rename_rol(
    rol_id: int,
    body: RolCreate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = RolRepository(db)
    rol = repo.get_or_404(rol_id)
    if repo.nombre_exists(body.nombre_rol, exclude_id=rol_id):
        raise ConflictError(ROL_DUPLICADO)
    repo.update(rol, nombre_rol=body.nombre_rol.strip())
    return MessageResponse(message="Rol actualizado")
