"""Teachers."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.repositories.personas import ProfesorRepository
from academia.schemas.common import CreatedResponse, MessageResponse
from academia.schemas.personas import (
    ProfesorCreate,
    ProfesoresResponse,
    ProfesorOut,
    ProfesorResponse,
    ProfesorUpdate,
)

router = APIRouter()


@router.get("", response_model=ProfesoresResponse)
def list_profesores(db: Annotated[Session, Depends(get_db)]) -> ProfesoresResponse:
    profesores = ProfesorRepository(db).list_by_estado(True)
    return ProfesoresResponse(profesores=[ProfesorOut.model_validate(p) for p in profesores])


@router.get("/inactivos", response_model=ProfesoresResponse)
def list_profesores_inactivos(db: Annotated[Session, Depends(get_db)]) -> ProfesoresResponse:
    profesores = ProfesorRepository(db).list_by_estado(False)
    return ProfesoresResponse(profesores=[ProfesorOut.model_validate(p) for p in profesores])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_profesor(
    body: ProfesorCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    profesor = ProfesorRepository(db).create(**body.model_dump(), estado=True)
    return CreatedResponse(message="Profesor creado", id=profesor.profesor_id)


@router.get("/{profesor_id}", response_model=ProfesorResponse)
def get_profesor(profesor_id: int, db: Annotated[Session, Depends(get_db)]) -> ProfesorResponse:
    profesor = ProfesorRepository(db).get_or_404(profesor_id)
    return ProfesorResponse(profesor=ProfesorOut.model_validate(profesor))


@router.put("/{profesor_id}", response_model=MessageResponse)
def update_profesor(
    profesor_id: int,
    body: ProfesorUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = ProfesorRepository(db)
    repo.update(repo.get_or_404(profesor_id), **body.model_dump(exclude_unset=True))
    return MessageResponse(message="Profesor actualizado")


@router.delete("/{profesor_id}", response_model=MessageResponse)
def delete_profesor(profesor_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    repo = ProfesorRepository(db)
    repo.set_estado(repo.get_or_404(profesor_id), False)
    return MessageResponse(message="Profesor inactivado")


@router.put("/{profesor_id}/reactivar", response_model=MessageResponse)
def reactivate_profesor(profesor_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    repo = ProfesorRepository(db)
    repo.set_estado(repo.get_or_404(profesor_id), True)
    return MessageResponse(message="Profesor reactivado")
