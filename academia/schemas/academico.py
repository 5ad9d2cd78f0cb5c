"""Request/response schemas for study plans, subjects and periods."""

from datetime import date

from pydantic import BaseModel, Field, StrictBool, model_validator


class PlanCreate(BaseModel):
    nombre_plan: str = Field(..., min_length=1, max_length=255)
    anio_inicio: int = Field(..., ge=1900, le=2200)
    estado: bool = True


class PlanUpdate(BaseModel):
    nombre_plan: str = Field(default=None, min_length=1, max_length=255)
    anio_inicio: int = Field(default=None, ge=1900, le=2200)
    estado: bool = None


class PlanOut(BaseModel):
    model_config = {"from_attributes": True}

    plan_id: int
    nombre_plan: str
    anio_inicio: int
    estado: bool


class PlanesResponse(BaseModel):
    success: bool = True
    planes: list[PlanOut]


class PlanResponse(BaseModel):
    success: bool = True
    plan: PlanOut


class MateriaCreate(BaseModel):
    codigo: str = Field(..., min_length=1, max_length=32)
    nombre: str = Field(..., min_length=1, max_length=255)
    creditos: int = Field(..., ge=1, le=60)
    plan_id: int | None = None


class MateriaUpdate(BaseModel):
    nombre: str = Field(default=None, min_length=1, max_length=255)
    creditos: int = Field(default=None, ge=1, le=60)
    # Nullable: an explicit null detaches the subject from its plan.
    plan_id: int | None = None


class MateriaEstadoRequest(BaseModel):
    """Activate or deactivate a subject; only a JSON boolean is accepted."""

    activo: StrictBool


class MateriaOut(BaseModel):
    model_config = {"from_attributes": True}

    materia_id: int
    codigo: str
    nombre: str
    creditos: int
    plan_id: int | None = None
    nombre_plan: str | None = None
    estado: bool


class MateriasResponse(BaseModel):
    success: bool = True
    materias: list[MateriaOut]


class MateriaResponse(BaseModel):
    success: bool = True
    materia: MateriaOut


class PeriodoCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=128, description="e.g. Primer Semestre")
    anio: int = Field(..., ge=1900, le=2200)
    fecha_inicio: date | None = None
    fecha_fin: date | None = None

    @model_validator(mode="after")
    def check_fechas(self) -> "PeriodoCreate":
        if self.fecha_inicio and self.fecha_fin and self.fecha_fin < self.fecha_inicio:
            raise ValueError("fecha_fin must not be before fecha_inicio")
        return self


class PeriodoUpdate(BaseModel):
    nombre: str = Field(default=None, min_length=1, max_length=128)
    anio: int = Field(default=None, ge=1900, le=2200)
    fecha_inicio: date | None = None
    fecha_fin: date | None = None
    estado: bool = None


class PeriodoOut(BaseModel):
    model_config = {"from_attributes": True}

    periodo_id: int
    nombre: str
    anio: int
    fecha_inicio: date | None = None
    fecha_fin: date | None = None
    estado: bool


class PeriodosResponse(BaseModel):
    success: bool = True
    periodos: list[PeriodoOut]


class PeriodoResponse(BaseModel):
    success: bool = True
    periodo: PeriodoOut
