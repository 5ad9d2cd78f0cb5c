"""Per-entity repositories over a request-scoped SQLAlchemy session."""

from academia.repositories.academico import (
    MateriaRepository,
    PeriodoRepository,
    PlanEstudioRepository,
)
from academia.repositories.base import Repository
from academia.repositories.matriculas import MatriculaRepository, PagoRepository
from academia.repositories.personas import EstudianteRepository, ProfesorRepository
from academia.repositories.usuarios import RolRepository, UsuarioRepository

__all__ = [
    "EstudianteRepository",
    "MateriaRepository",
    "MatriculaRepository",
    "PagoRepository",
    "PeriodoRepository",
    "PlanEstudioRepository",
    "ProfesorRepository",
    "Repository",
    "RolRepository",
    "UsuarioRepository",
]
