"""ORM models for the academic catalogue: study plans, subjects and periods."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String, true
from sqlalchemy.orm import relationship

from academia.models.base import Base


class PlanEstudio(Base):
    """Study plan (curriculum) that groups subjects."""

    __tablename__ = "planes_estudio"

    plan_id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_plan = Column(String(255), nullable=False)
    anio_inicio = Column(Integer, nullable=False)
    estado = Column(Boolean, nullable=False, default=True, server_default=true())


class Materia(Base):
    """Subject, addressed publicly by its unique code."""

    __tablename__ = "materias"

    materia_id = Column(Integer, primary_key=True, autoincrement=True)
    codigo = Column(String(32), nullable=False, unique=True, index=True)
    nombre = Column(String(255), nullable=False)
    creditos = Column(Integer, nullable=False)
    plan_id = Column(Integer, ForeignKey("planes_estudio.plan_id"), nullable=True)
    estado = Column(Boolean, nullable=False, default=True, server_default=true())

    plan = relationship(PlanEstudio, lazy="joined")

    @property
    def nombre_plan(self) -> str | None:
        return self.plan.nombre_plan if self.plan is not None else None


class Periodo(Base):
    """Academic period, e.g. 'Primer Semestre' 2025."""

    __tablename__ = "periodos"

    periodo_id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(128), nullable=False)
    anio = Column(Integer, nullable=False)
    fecha_inicio = Column(Date, nullable=True)
    fecha_fin = Column(Date, nullable=True)
    estado = Column(Boolean, nullable=False, default=True, server_default=true())
