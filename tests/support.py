"""Shared fixtures for API tests: in-memory SQLite database and an authenticated TestClient."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from academia.core.database import get_db
from academia.core.security import create_access_token, hash_password
from academia.main import app
from academia.models import Base, Rol, Usuario

API = "/api"


class ApiTestCase(unittest.TestCase):
    """Fresh database per test, with get_db overridden to use it."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionTest = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db():
            db = self.SessionTest()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=False)
        self.admin_rol_id = self.add_rol("Administrador")

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.engine.dispose()

    def session(self) -> Session:
        return self.SessionTest()

    def add_rol(self, nombre: str) -> int:
        with self.session() as db:
            rol = Rol(nombre_rol=nombre)
            db.add(rol)
            db.commit()
            return rol.rol_id

    def add_usuario(
        self,
        correo: str,
        contrasena: str,
        nombre: str = "Usuario Prueba",
        estado: bool = True,
        hashed: bool = False,
    ) -> int:
        """Insert an account directly; `hashed=False` stores a legacy plaintext password."""
        with self.session() as db:
            usuario = Usuario(
                nombre_completo=nombre,
                correo=correo,
                contrasena=hash_password(contrasena) if hashed else contrasena,
                rol_id=self.admin_rol_id,
                estado=estado,
            )
            db.add(usuario)
            db.commit()
            return usuario.usuario_id

    def stored_password(self, usuario_id: int) -> str:
        with self.session() as db:
            return db.scalars(
                select(Usuario.contrasena).where(Usuario.usuario_id == usuario_id)
            ).one()

    def auth_headers(self, usuario_id: int = 1, rol: str = "Administrador") -> dict[str, str]:
        token = create_access_token(
            user_id=usuario_id,
            nombre="Admin Prueba",
            rol=rol,
            correo="admin@test.edu",
        )
        return {"Authorization": f"Bearer {token}"}
