"""Enrollments and payments."""

from sqlalchemy import select

from academia.models.matricula import (
    MATRICULA_CONFIRMADA,
    PAGO_REGISTRADO,
    Matricula,
    Pago,
)
from academia.repositories.base import Repository


class MatriculaRepository(Repository[Matricula]):
    model = Matricula
    not_found_message = "Matrícula no encontrada"

    def list_confirmadas(self) -> list[Matricula]:
        """Confirmed enrollments with student and period loaded, newest first."""
        stmt = (
            select(Matricula)
            .where(Matricula.estado == MATRICULA_CONFIRMADA)
            .order_by(Matricula.matricula_id.desc())
        )
        return list(self._db.scalars(stmt))

    def confirmada_exists(self, estudiante_id: int, periodo_id: int) -> bool:
        stmt = select(Matricula.matricula_id).where(
            Matricula.estudiante_id == estudiante_id,
            Matricula.periodo_id == periodo_id,
            Matricula.estado == MATRICULA_CONFIRMADA,
        )
        return self._db.scalars(stmt.limit(1)).first() is not None


class PagoRepository(Repository[Pago]):
    model = Pago
    not_found_message = "Pago no encontrado"

    def list_registrados(self, matricula_id: int | None = None) -> list[Pago]:
        stmt = select(Pago).where(Pago.estado == PAGO_REGISTRADO)
        if matricula_id is not None:
            stmt = stmt.where(Pago.matricula_id == matricula_id)
        return list(self._db.scalars(stmt.order_by(Pago.fecha_pago.desc(), Pago.pago_id.desc())))
