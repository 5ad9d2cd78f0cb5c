"""ORM models for login principals (accounts) and their roles."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, true
from sqlalchemy.orm import relationship

from academia.models.base import Base


class Rol(Base):
    """Role an account acts under (e.g. Administrador, Docente)."""

    __tablename__ = "roles"

    rol_id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_rol = Column(String(64), nullable=False, unique=True)


class Usuario(Base):
    """
    Account used to log in.

    contrasena holds either a bcrypt hash or, for accounts created before
    hashing was introduced, the legacy plaintext password. Plaintext values
    are upgraded to a hash on the first successful login.
    """

    __tablename__ = "usuarios"

    usuario_id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_completo = Column(String(255), nullable=False)
    correo = Column(String(255), nullable=False, unique=True, index=True)
    contrasena = Column(String(255), nullable=False)
    rol_id = Column(Integer, ForeignKey("roles.rol_id"), nullable=False)
    estado = Column(Boolean, nullable=False, default=True, server_default=true())

    rol = relationship(Rol, lazy="joined")

    @property
    def nombre_rol(self) -> str | None:
        return self.rol.nombre_rol if self.rol is not None else None
