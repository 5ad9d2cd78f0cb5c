"""SQLAlchemy ORM models."""

from academia.models.academico import Materia, Periodo, PlanEstudio
from academia.models.base import Base
from academia.models.matricula import Matricula, Pago
from academia.models.persona import Estudiante, Profesor
from academia.models.usuario import Rol, Usuario

__all__ = [
    "Base",
    "Estudiante",
    "Materia",
    "Matricula",
    "Pago",
    "Periodo",
    "PlanEstudio",
    "Profesor",
    "Rol",
    "Usuario",
]
