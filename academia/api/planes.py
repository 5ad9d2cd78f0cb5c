"""Study plans."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.repositories.academico import PlanEstudioRepository
from academia.schemas.academico import (
    PlanCreate,
    PlanesResponse,
    PlanOut,
    PlanResponse,
    PlanUpdate,
)
from academia.schemas.common import CreatedResponse, MessageResponse

router = APIRouter()


@router.get("", response_model=PlanesResponse)
def list_planes(db: Annotated[Session, Depends(get_db)]) -> PlanesResponse:
    """Every plan, active or not, ordered by name."""
    planes = PlanEstudioRepository(db).list_all()
    return PlanesResponse(planes=[PlanOut.model_validate(p) for p in planes])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_plan(body: PlanCreate, db: Annotated[Session, Depends(get_db)]) -> CreatedResponse:
    plan = PlanEstudioRepository(db).create(**body.model_dump())
    return CreatedResponse(message="Plan creado", id=plan.plan_id)


@router.get("/{plan_id}", response_model=PlanResponse)
def get_plan(plan_id: int, db: Annotated[Session, Depends(get_db)]) -> PlanResponse:
    plan = PlanEstudioRepository(db).get_or_404(plan_id)
    return PlanResponse(plan=PlanOut.model_validate(plan))


@router.put("/{plan_id}", response_model=MessageResponse)
def update_plan(
    plan_id: int,
    body: PlanUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    repo = PlanEstudioRepository(db)
    repo.update(repo.get_or_404(plan_id), **body.model_dump(exclude_unset=True))
    return MessageResponse(message="Plan actualizado")


@router.put("/{plan_id}/inactivar", response_model=MessageResponse)
def inactivate_plan(plan_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    repo = PlanEstudioRepository(db)
    repo.set_estado(repo.get_or_404(plan_id), False)
    return MessageResponse(message="Plan inactivado")


@router.put("/{plan_id}/reactivar", response_model=MessageResponse)
def reactivate_plan(plan_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    repo = PlanEstudioRepository(db)
    repo.set_estado(repo.get_or_404(plan_id), True)
    return MessageResponse(message="Plan reactivado")
