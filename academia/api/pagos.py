"""Payments registered against enrollments."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from academia.core.database import get_db
from academia.core.errors import ValidationError
from academia.models.matricula import MATRICULA_CONFIRMADA, PAGO_ANULADO, PAGO_REGISTRADO
from academia.repositories.matriculas import MatriculaRepository, PagoRepository
from academia.schemas.common import CreatedResponse, MessageResponse
from academia.schemas.matriculas import PagoCreate, PagoOut, PagoResponse, PagosResponse

router = APIRouter()


@router.get("", response_model=PagosResponse)
def list_pagos(
    db: Annotated[Session, Depends(get_db)],
    matricula_id: Annotated[int | None, Query()] = None,
) -> PagosResponse:
    """Registered (not cancelled) payments, optionally for one enrollment."""
    pagos = PagoRepository(db).list_registrados(matricula_id)
    return PagosResponse(pagos=[PagoOut.model_validate(p) for p in pagos])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_pago(body: PagoCreate, db: Annotated[Session, Depends(get_db)]) -> CreatedResponse:
    matricula = MatriculaRepository(db).get_or_404(body.matricula_id)
    if matricula.estado != MATRICULA_CONFIRMADA:
        raise ValidationError("La matrícula no está confirmada")
    values = body.model_dump(exclude_none=True)
    pago = PagoRepository(db).create(**values, estado=PAGO_REGISTRADO)
    return CreatedResponse(message="Pago registrado", id=pago.pago_id)


@router.get("/{pago_id}", response_model=PagoResponse)
def get_pago(pago_id: int, db: Annotated[Session, Depends(get_db)]) -> PagoResponse:
    pago = PagoRepository(db).get_or_404(pago_id)
    return PagoResponse(pago=PagoOut.model_validate(pago))


@router.delete("/{pago_id}", response_model=MessageResponse)
def cancel_pago(pago_id: int, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    """Soft delete: the payment is kept with state Anulado."""
    repo = PagoRepository(db)
    repo.set_estado(repo.get_or_404(pago_id), PAGO_ANULADO)
    return MessageResponse(message="Pago anulado")
