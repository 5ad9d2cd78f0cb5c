"""Enrollments of students in periods."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import ConflictError, ValidationError
from academia.models.matricula import MATRICULA_ANULADA, MATRICULA_CONFIRMADA
from academia.repositories.academico import PeriodoRepository
from academia.repositories.matriculas import MatriculaRepository
from academia.repositories.personas import EstudianteRepository
from academia.schemas.common import CreatedResponse, MessageResponse
from academia.schemas.matriculas import (
    MatriculaCreate,
    MatriculaListItem,
    MatriculaOut,
    MatriculaResponse,
    MatriculasResponse,
)

router = APIRouter()


@router.get("", response_model=MatriculasResponse)
def list_matriculas(db: Annotated[Session, Depends(get_db)]) -> MatriculasResponse:
    """Confirmed enrollments, newest first, labelled with student and period."""
    items = [
        MatriculaListItem(
            matricula_id=m.matricula_id,
            estudiante=f"{m.estudiante.nombre} - {m.estudiante.cedula}",
            periodo=m.periodo.nombre,
            anio=m.periodo.anio,
        )
        for m in MatriculaRepository(db).list_confirmadas()
    ]
    return MatriculasResponse(matriculas=items)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_matricula(
    body: MatriculaCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Enroll an active student in an active period, at most once per period."""
    estudiante = EstudianteRepository(db).get_or_404(body.estudiante_id)
    periodo = PeriodoRepository(db).get_or_404(body.periodo_id)
    if not estudiante.estado:
        raise ValidationError("El estudiante está inactivo")
    if not periodo.estado:
        raise ValidationError("El periodo está inactivo")
    repo = MatriculaRepository(db)
    if repo.confirmada_exists(body.estudiante_id, body.periodo_id):
        raise ConflictError("El estudiante ya está matriculado en este periodo")
    matricula = repo.create(
        estudiante_id=body.estudiante_id,
        periodo_id=body.periodo_id,
        estado=MATRICULA_CONFIRMADA,
    )
    return CreatedResponse(message="Matrícula creada", id=matricula.matricula_id)


@router.get("/{matricula_id}", response_model=MatriculaResponse)
def get_matricula(matricula_id: int, db: Annotated[Session, Depends(get_db)]) -> MatriculaResponse:
    matricula = MatriculaRepository(db).get_or_404(matricula_id)
    return MatriculaResponse(matricula=MatriculaOut.model_validate(matricula))


@router.put("/{matricula_id}/anular", response_model=MessageResponse)
def cancel_matricula(matricula_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    """Soft delete: the enrollment is kept with state Anulada."""
    repo = MatriculaRepository(db)
    repo.set_estado(repo.get_or_404(matricula_id), MATRICULA_ANULADA)
    return MessageResponse(message="Matrícula anulada")
