"""Students. Static paths are declared before `/{estudiante_id}` so they are matched first."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import ConflictError, ValidationError
from academia.repositories.personas import EstudianteRepository
from academia.schemas.common import CreatedResponse, MessageResponse
from academia.schemas.personas import (
    EstudianteCreate,
    EstudianteOut,
    EstudianteResponse,
    EstudiantesResponse,
    EstudianteUpdate,
    VerificarCedulaResponse,
)

router = APIRouter()

CEDULA_DUPLICADA = "Cédula ya registrada"


@router.get("", response_model=EstudiantesResponse)
def list_estudiantes(db: Annotated[Session, Depends(get_db)]) -> EstudiantesResponse:
    """Active students ordered by name."""
    estudiantes = EstudianteRepository(db).list_by_estado(True)
    return EstudiantesResponse(estudiantes=[EstudianteOut.model_validate(e) for e in estudiantes])


@router.get("/inactivos", response_model=EstudiantesResponse)
def list_estudiantes_inactivos(db: Annotated[Session, Depends(get_db)]) -> EstudiantesResponse:
    estudiantes = EstudianteRepository(db).list_by_estado(False)
    return EstudiantesResponse(estudiantes=[EstudianteOut.model_validate(e) for e in estudiantes])


@router.get("/verificar-cedula", response_model=VerificarCedulaResponse)
def verificar_cedula(
    db: Annotated[Session, Depends(get_db)],
    cedula: Annotated[str | None, Query()] = None,
) -> VerificarCedulaResponse:
    """Tell whether a cedula is already registered, for form validation before create."""
    if not cedula or not cedula.strip():
        raise ValidationError("Cédula requerida")
    return VerificarCedulaResponse(existe=EstudianteRepository(db).cedula_exists(cedula.strip()))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_estudiante(
    body: EstudianteCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    repo = EstudianteRepository(db)
    values = body.model_dump()
    values["cedula"] = values["cedula"].strip()
    if repo.cedula_exists(values["cedula"]):
        raise ConflictError(CEDULA_DUPLICADA)
    estudiante = repo.create(**values, estado=True)
    return CreatedResponse(message="Estudiante creado", id=estudiante.estudiante_id)


@router.get("/{estudiante_id}", response_model=EstudianteResponse)
def get_estudiante(
    estudiante_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> EstudianteResponse:
    estudiante = EstudianteRepository(db).get_or_404(estudiante_id)
    return EstudianteResponse(estudiante=EstudianteOut.model_validate(estudiante))


@router.put("/{estudiante_id}", response_model=MessageResponse)
def update_estudiante(
    estudiante_id: int,
    body: EstudianteUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = EstudianteRepository(db)
    estudiante = repo.get_or_404(estudiante_id)
    values = body.model_dump(exclude_unset=True)
    if "cedula" in values:
        values["cedula"] = values["cedula"].strip()
        if repo.cedula_exists(values["cedula"], exclude_id=estudiante_id):
            raise ConflictError(CEDULA_DUPLICADA)
    repo.update(estudiante, **values)
    return MessageResponse(message="Estudiante actualizado")


@router.delete("/{estudiante_id}", response_model=MessageResponse)
def delete_estudiante(
    estudiante_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = EstudianteRepository(db)
    repo.set_estado(repo.get_or_404(estudiante_id), False)
    return MessageResponse(message="Estudiante inactivado")


@router.put("/{estudiante_id}/reactivar", response_model=MessageResponse)
def reactivate_estudiante(
    estudiante_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = EstudianteRepository(db)
    repo.set_estado(repo.get_or_404(estudiante_id), True)
    return MessageResponse(message="Estudiante reactivado")
