"""ORM models for enrollments and the payments made against them."""

from datetime import date

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import relationship

from academia.models.academico import Periodo
from academia.models.base import Base
from academia.models.persona import Estudiante

MATRICULA_CONFIRMADA = "Confirmada"
MATRICULA_ANULADA = "Anulada"

PAGO_REGISTRADO = "Registrado"
PAGO_ANULADO = "Anulado"


class Matricula(Base):
    """Enrollment of a student in a period. Cancelled enrollments keep their row."""

    __tablename__ = "matriculas"

    matricula_id = Column(Integer, primary_key=True, autoincrement=True)
    estudiante_id = Column(
        Integer, ForeignKey("estudiantes.estudiante_id"), nullable=False, index=True
    )
    periodo_id = Column(Integer, ForeignKey("periodos.periodo_id"), nullable=False, index=True)
    fecha = Column(Date, nullable=False, default=date.today, server_default=func.current_date())
    estado = Column(String(32), nullable=False, default=MATRICULA_CONFIRMADA)

    estudiante = relationship(Estudiante, lazy="joined")
    periodo = relationship(Periodo, lazy="joined")


class Pago(Base):
    """Payment registered against an enrollment."""

    __tablename__ = "pagos"

    pago_id = Column(Integer, primary_key=True, autoincrement=True)
    matricula_id = Column(
        Integer, ForeignKey("matriculas.matricula_id"), nullable=False, index=True
    )
    monto = Column(Numeric(10, 2), nullable=False)
    fecha_pago = Column(Date, nullable=False, default=date.today, server_default=func.current_date())
    metodo = Column(String(64), nullable=False)
    referencia = Column(String(128), nullable=True)
    estado = Column(String(32), nullable=False, default=PAGO_REGISTRADO)
