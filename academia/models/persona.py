"""ORM models for people managed by the system: students and teachers."""

from sqlalchemy import Boolean, Column, Date, Integer, String, true

from academia.models.base import Base


class Estudiante(Base):
    """Student, identified nationally by a unique cedula."""

    __tablename__ = "estudiantes"

    estudiante_id = Column(Integer, primary_key=True, autoincrement=True)
    cedula = Column(String(32), nullable=False, unique=True, index=True)
    nombre = Column(String(255), nullable=False)
    fecha_nacimiento = Column(Date, nullable=True)
    correo = Column(String(255), nullable=True)
    telefono = Column(String(32), nullable=True)
    estado = Column(Boolean, nullable=False, default=True, server_default=true())


class Profesor(Base):
    """Teacher."""

    __tablename__ = "profesores"

    profesor_id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    correo = Column(String(255), nullable=True)
    telefono = Column(String(32), nullable=True)
    estado = Column(Boolean, nullable=False, default=True, server_default=true())
