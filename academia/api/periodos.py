"""Academic periods."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import ValidationError
from academia.repositories.academico import PeriodoRepository
from academia.schemas.academico import (
    PeriodoCreate,
    PeriodoOut,
    PeriodoResponse,
    PeriodosResponse,
    PeriodoUpdate,
)
from academia.schemas.common import CreatedResponse, MessageResponse

router = APIRouter()


@router.get("", response_model=PeriodosResponse)
def list_periodos(db: Annotated[Session, Depends(get_db)]) -> PeriodosResponse:
    """Newest year first; within a year Primer Semestre, Segundo Semestre, Verano, then the rest."""
    periodos = PeriodoRepository(db).list_ordered()
    return PeriodosResponse(periodos=[PeriodoOut.model_validate(p) for p in periodos])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_periodo(body: PeriodoCreate, db: Annotated[Session, Depends(get_db)]) -> CreatedResponse:
    periodo = PeriodoRepository(db).create(**body.model_dump(), estado=True)
    return CreatedResponse(message="Periodo creado", id=periodo.periodo_id)


@router.get("/{periodo_id}", response_model=PeriodoResponse)
def get_periodo(periodo_id: int, db: Annotated[Session, Depends(get_db)]) -> PeriodoResponse:
    periodo = PeriodoRepository(db).get_or_404(periodo_id)
    return PeriodoResponse(periodo=PeriodoOut.model_validate(periodo))


@router.put("/{periodo_id}", response_model=MessageResponse)
def update_periodo(
    periodo_id: int,
    body: PeriodoUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = PeriodoRepository(db)
    periodo = repo.get_or_404(periodo_id)
    values = body.model_dump(exclude_unset=True)
    inicio = values.get("fecha_inicio", periodo.fecha_inicio)
    fin = values.get("fecha_fin", periodo.fecha_fin)
    if inicio and fin and fin < inicio:
        raise ValidationError("La fecha de fin no puede ser anterior a la de inicio")
    repo.update(periodo, **values)
    return MessageResponse(message="Periodo actualizado")
