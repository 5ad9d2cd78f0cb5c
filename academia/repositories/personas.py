"""Students and teachers."""

from sqlalchemy import select

from academia.models.persona import Estudiante, Profesor
from academia.repositories.base import Repository


class EstudianteRepository(Repository[Estudiante]):
    model = Estudiante
    not_found_message = "Estudiante no encontrado"

    def list_by_estado(self, estado: bool = True) -> list[Estudiante]:
        stmt = select(Estudiante).where(Estudiante.estado == estado).order_by(Estudiante.nombre)
        return list(self._db.scalars(stmt))

    def cedula_exists(self, cedula: str, exclude_id: int | None = None) -> bool:
        """True if any student, active or not, already has `cedula`."""
        stmt = select(Estudiante.estudiante_id).where(Estudiante.cedula == cedula)
        if exclude_id is not None:
            stmt = stmt.where(Estudiante.estudiante_id != exclude_id)
        return self._db.scalars(stmt.limit(1)).first() is not None


class ProfesorRepository(Repository[Profesor]):
    model = Profesor
    not_found_message = "Profesor no encontrado"

    def list_by_estado(self, estado: bool = True) -> list[Profesor]:
        stmt = select(Profesor).where(Profesor.estado == estado).order_by(Profesor.nombre)
        return list(self._db.scalars(stmt))
