"""Request/response schemas for accounts, roles and the caller's own profile."""

from pydantic import BaseModel, Field

from academia.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN

# Update schemas declare non-nullable columns as plain `str`/`int` with a None
# default: omitted fields are left untouched (exclude_unset) and an explicit
# null fails validation.


class UsuarioCreate(BaseModel):
    nombre_completo: str = Field(..., min_length=1, max_length=255)
    correo: str = Field(..., min_length=3, max_length=255)
    contrasena: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    rol_id: int
    estado: bool = True


class UsuarioUpdate(BaseModel):
    nombre_completo: str = Field(default=None, min_length=1, max_length=255)
    correo: str = Field(default=None, min_length=3, max_length=255)
    contrasena: str = Field(
        default=None,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="New password; stored hashed",
    )
    rol_id: int = None
    estado: bool = None


class UsuarioOut(BaseModel):
    """Account as exposed by the API (never includes the password)."""

    model_config = {"from_attributes": True}

    usuario_id: int
    nombre_completo: str
    correo: str
    estado: bool
    rol_id: int
    nombre_rol: str | None = None


class UsuariosResponse(BaseModel):
    success: bool = True
    usuarios: list[UsuarioOut]


class UsuarioResponse(BaseModel):
    success: bool = True
    usuario: UsuarioOut | None


class PerfilOut(BaseModel):
    model_config = {"from_attributes": True}

    usuario_id: int
    nombre_completo: str
    correo: str
    nombre_rol: str | None = None


class PerfilResponse(BaseModel):
    success: bool = True
    usuario: PerfilOut | None


class CambioClaveRequest(BaseModel):
    """Self-service password change."""

    clave_actual: str = Field(..., min_length=1)
    clave_nueva: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class RolCreate(BaseModel):
    nombre_rol: str = Field(..., min_length=1, max_length=64)


class RolOut(BaseModel):
    model_config = {"from_attributes": True}

    rol_id: int
    nombre_rol: str


class RolesResponse(BaseModel):
    success: bool = True
    roles: list[RolOut]
