"""Accounts (credential store) and roles."""

from sqlalchemy import func, select, update

from academia.core.security import BCRYPT_PREFIX
from academia.models.usuario import Rol, Usuario
from academia.repositories.base import Repository


class UsuarioRepository(Repository[Usuario]):
    model = Usuario
    not_found_message = "Usuario no encontrado"

    def list_all(self) -> list[Usuario]:
        """All accounts, active and inactive, ordered by name."""
        return list(self._db.scalars(select(Usuario).order_by(Usuario.nombre_completo)))

    def get_by_correo(self, correo: str) -> Usuario | None:
        """Look up an account by email (case-insensitive)."""
        stmt = select(Usuario).where(func.lower(Usuario.correo) == correo.strip().lower())
        return self._db.scalars(stmt).first()

    def correo_exists(self, correo: str, exclude_id: int | None = None) -> bool:
        """True if any account, active or not, already uses `correo`."""
        stmt = select(Usuario.usuario_id).where(func.lower(Usuario.correo) == correo.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(Usuario.usuario_id != exclude_id)
        return self._db.scalars(stmt.limit(1)).first() is not None

    def replace_plaintext_password(self, usuario_id: int, *, expected: str, new_hash: str) -> bool:
        """
        Swap a legacy plaintext password for `new_hash`, only if the stored value is still `expected`.

        Returns True when the row was rewritten. The guard makes the upgrade a single
        compare-and-swap statement, so a concurrent change is never overwritten, and a
        value that is already a bcrypt hash is never hashed again.
        """
        stmt = (
            update(Usuario)
            .where(
                Usuario.usuario_id == usuario_id,
                Usuario.contrasena == expected,
                ~Usuario.contrasena.startswith(BCRYPT_PREFIX, autoescape=True),
            )
            .values(contrasena=new_hash)
            .execution_options(synchronize_session=False)
        )
        result = self._db.execute(stmt)
        self._db.commit()
        return result.rowcount == 1

    def set_password_hash(self, usuario: Usuario, new_hash: str) -> Usuario:
        """Store an already-hashed password."""
        return self.update(usuario, contrasena=new_hash)

    def list_legacy_plaintext(self) -> list[tuple[int, str]]:
        """(usuario_id, stored value) for accounts whose password is not a bcrypt hash yet."""
        stmt = (
            select(Usuario.usuario_id, Usuario.contrasena)
            .where(~Usuario.contrasena.startswith(BCRYPT_PREFIX, autoescape=True))
            .order_by(Usuario.usuario_id)
        )
        return [(usuario_id, contrasena) for usuario_id, contrasena in self._db.execute(stmt)]


class RolRepository(Repository[Rol]):
    model = Rol
    not_found_message = "Rol no encontrado"

    def list_all(self) -> list[Rol]:
        return list(self._db.scalars(select(Rol).order_by(Rol.nombre_rol)))

    def get_by_nombre(self, nombre_rol: str) -> Rol | None:
        stmt = select(Rol).where(func.lower(Rol.nombre_rol) == nombre_rol.strip().lower())
        return self._db.scalars(stmt).first()

    def nombre_exists(self, nombre_rol: str, exclude_id: int | None = None) -> bool:
        stmt = select(Rol.rol_id).where(func.lower(Rol.nombre_rol) == nombre_rol.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(Rol.rol_id != exclude_id)
        return self._db.scalars(stmt.limit(1)).first() is not None
