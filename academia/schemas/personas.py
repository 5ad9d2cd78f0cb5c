"""Request/response schemas for students and teachers."""

from datetime import date

from pydantic import BaseModel, Field


class EstudianteCreate(BaseModel):
    cedula: str = Field(..., min_length=1, max_length=32)
    nombre: str = Field(..., min_length=1, max_length=255)
    fecha_nacimiento: date | None = None
    correo: str | None = Field(default=None, max_length=255)
    telefono: str | None = Field(default=None, max_length=32)


class EstudianteUpdate(BaseModel):
    cedula: str = Field(default=None, min_length=1, max_length=32)
    nombre: str = Field(default=None, min_length=1, max_length=255)
    fecha_nacimiento: date | None = None
    correo: str | None = Field(default=None, max_length=255)
    telefono: str | None = Field(default=None, max_length=32)


class EstudianteOut(BaseModel):
    model_config = {"from_attributes": True}

    estudiante_id: int
    cedula: str
    nombre: str
    fecha_nacimiento: date | None = None
    correo: str | None = None
    telefono: str | None = None
    estado: bool


class EstudiantesResponse(BaseModel):
    success: bool = True
    estudiantes: list[EstudianteOut]


class EstudianteResponse(BaseModel):
    success: bool = True
    estudiante: EstudianteOut


class VerificarCedulaResponse(BaseModel):
    success: bool = True
    existe: bool


class ProfesorCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=255)
    correo: str | None = Field(default=None, max_length=255)
    telefono: str | None = Field(default=None, max_length=32)


class ProfesorUpdate(BaseModel):
    nombre: str = Field(default=None, min_length=1, max_length=255)
    correo: str | None = Field(default=None, max_length=255)
    telefono: str | None = Field(default=None, max_length=32)


class ProfesorOut(BaseModel):
    model_config = {"from_attributes": True}

    profesor_id: int
    nombre: str
    correo: str | None = None
    telefono: str | None = None
    estado: bool


class ProfesoresResponse(BaseModel):
    success: bool = True
    profesores: list[ProfesorOut]


class ProfesorResponse(BaseModel):
    success: bool = True
    profesor: ProfesorOut
