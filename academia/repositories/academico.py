"""Study plans, subjects and academic periods."""

from sqlalchemy import case, select

from academia.core.errors import NotFoundError
from academia.models.academico import Materia, Periodo, PlanEstudio
from academia.repositories.base import Repository

# Display order of period names within a year; anything else sorts last.
PERIODO_ORDEN = ("Primer Semestre", "Segundo Semestre", "Verano")


class PlanEstudioRepository(Repository[PlanEstudio]):
    model = PlanEstudio
    not_found_message = "Plan no encontrado"

    def list_all(self) -> list[PlanEstudio]:
        return list(self._db.scalars(select(PlanEstudio).order_by(PlanEstudio.nombre_plan)))


class MateriaRepository(Repository[Materia]):
    model = Materia
    not_found_message = "Materia no encontrada"

    def list_all(self) -> list[Materia]:
        """Every subject with its plan joined in, ordered by name."""
        return list(self._db.scalars(select(Materia).order_by(Materia.nombre)))

    def get_by_codigo(self, codigo: str) -> Materia | None:
        return self._db.scalars(select(Materia).where(Materia.codigo == codigo)).first()

    def get_by_codigo_or_404(self, codigo: str) -> Materia:
        materia = self.get_by_codigo(codigo)
        if materia is None:
            raise NotFoundError(self.not_found_message)
        return materia

    def codigo_exists(self, codigo: str) -> bool:
        return self.get_by_codigo(codigo) is not None


class PeriodoRepository(Repository[Periodo]):
    model = Periodo
    not_found_message = "Periodo no encontrado"

    def list_ordered(self) -> list[Periodo]:
        """Newest year first; within a year, semesters before summer."""
        orden = case(
            {nombre: i for i, nombre in enumerate(PERIODO_ORDEN, start=1)},
            value=Periodo.nombre,
            else_=len(PERIODO_ORDEN) + 1,
        )
        stmt = select(Periodo).order_by(Periodo.anio.desc(), orden, Periodo.periodo_id)
        return list(self._db.scalars(stmt))
