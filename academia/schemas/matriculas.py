"""Request/response schemas for enrollments and payments."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class MatriculaCreate(BaseModel):
    estudiante_id: int
    periodo_id: int


class MatriculaListItem(BaseModel):
    """Row of the confirmed-enrollments listing."""

    matricula_id: int
    estudiante: str = Field(..., description="'<Nombre> - <Cedula>'")
    periodo: str
    anio: int


class MatriculasResponse(BaseModel):
    success: bool = True
    matriculas: list[MatriculaListItem]


class MatriculaOut(BaseModel):
    model_config = {"from_attributes": True}

    matricula_id: int
    estudiante_id: int
    periodo_id: int
    fecha: date
    estado: str


class MatriculaResponse(BaseModel):
    success: bool = True
    matricula: MatriculaOut


class PagoCreate(BaseModel):
    matricula_id: int
    monto: Decimal = Field(
        ..., gt=0, max_digits=10, decimal_places=2, description="Amount with at most 2 decimals"
    )
    metodo: str = Field(..., min_length=1, max_length=64, description="e.g. Efectivo, Transferencia")
    referencia: str | None = Field(default=None, max_length=128)
    fecha_pago: date | None = None


class PagoOut(BaseModel):
    model_config = {"from_attributes": True}

    pago_id: int
    matricula_id: int
    # JSON string with two decimals, e.g. "150000.50".
    monto: Decimal
    fecha_pago: date
    metodo: str
    referencia: str | None = None
    estado: str


class PagosResponse(BaseModel):
    success: bool = True
    pagos: list[PagoOut]


class PagoResponse(BaseModel):
    success: bool = True
    pago: PagoOut
