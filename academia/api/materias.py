"""Subjects, addressed by their code."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import ConflictError
from academia.repositories.academico import MateriaRepository, PlanEstudioRepository
from academia.schemas.academico import (
    MateriaCreate,
    MateriaEstadoRequest,
    MateriaOut,
    MateriaResponse,
    MateriasResponse,
    MateriaUpdate,
)
from academia.schemas.common import CreatedResponse, MessageResponse

router = APIRouter()


def _require_plan(db: Session, plan_id: int | None) -> None:
    if plan_id is not None:
        PlanEstudioRepository(db).get_or_404(plan_id)


@router.get("", response_model=MateriasResponse)
def list_materias(db: Annotated[Session, Depends(get_db)]) -> MateriasResponse:
    """Every subject with its plan name, ordered by subject name."""
    materias = MateriaRepository(db).list_all()
    return MateriasResponse(materias=[MateriaOut.model_validate(m) for m in materias])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_materia(
    body: MateriaCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    repo = MateriaRepository(db)
    codigo = body.codigo.strip()
    if repo.codigo_exists(codigo):
        raise ConflictError("Código de materia ya registrado")
    _require_plan(db, body.plan_id)
    materia = repo.create(
        codigo=codigo,
        nombre=body.nombre,
        creditos=body.creditos,
        plan_id=body.plan_id,
        estado=True,
    )
    return CreatedResponse(message="Materia creada", id=materia.materia_id)


@router.get("/{codigo}", response_model=MateriaResponse)
def get_materia(codigo: str, db: Annotated[Session, Depends(get_db)]) -> MateriaResponse:
    materia = MateriaRepository(db).get_by_codigo_or_404(codigo)
    return MateriaResponse(materia=MateriaOut.model_validate(materia))


@router.put("/{codigo}", response_model=MessageResponse)
def update_materia(
    codigo: str,
    body: MateriaUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = MateriaRepository(db)
    materia = repo.get_by_codigo_or_404(codigo)
    values = body.model_dump(exclude_unset=True)
    if "plan_id" in values:
        _require_plan(db, values["plan_id"])
    repo.update(materia, **values)
    return MessageResponse(message="Materia actualizada")


@router.delete("/{codigo}", response_model=MessageResponse)
def delete_materia(codigo: str, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    repo = MateriaRepository(db)
    repo.set_estado(repo.get_by_codigo_or_404(codigo), False)
    return MessageResponse(message="Materia inactivada")


@router.put("/{codigo}/estado", response_model=MessageResponse)
def set_materia_estado(
    codigo: str,
    body: MateriaEstadoRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = MateriaRepository(db)
    repo.set_estado(repo.get_by_codigo_or_404(codigo), body.activo)
    return MessageResponse(message=f"Materia {'activada' if body.activo else 'desactivada'}")
