"""
Create an account (e.g. the first administrator). Run from project root:
  python -m academia.scripts.create_user CORREO CLAVE "NOMBRE COMPLETO" [ROL]
Example:
  python -m academia.scripts.create_user admin@colegio.edu your-secure-password "Ana Pérez" Administrador
"""
import argparse
import sys

from academia.core.database import session_scope
from academia.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from academia.repositories.usuarios import RolRepository, UsuarioRepository


def main() -> int:
    parser = argparse.ArgumentParser(description="Create an Academia account (no registration UI).")
    parser.add_argument("correo", help="Login email")
    parser.add_argument("clave", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("nombre", help="Full name")
    parser.add_argument("rol", nargs="?", default="Administrador", help="Role name (created if missing)")
    args = parser.parse_args()

    correo = args.correo.strip()
    if not correo or len(correo) > 255:
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.clave) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    with session_scope() as db:
        usuarios = UsuarioRepository(db)
        if usuarios.correo_exists(correo):
            print(f"Account '{correo}' already exists.", file=sys.stderr)
            return 1
        roles = RolRepository(db)
        rol = roles.get_by_nombre(args.rol) or roles.create(nombre_rol=args.rol.strip())
        usuarios.create(
            nombre_completo=args.nombre.strip(),
            correo=correo,
            contrasena=hash_password(args.clave),
            rol_id=rol.rol_id,
            estado=True,
        )
        nombre_rol = rol.nombre_rol
    print(f"Created account '{correo}' with role '{nombre_rol}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
