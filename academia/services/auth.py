"""Login: verify an account's credentials (upgrading legacy passwords) and issue a session token."""

import logging

from academia.core.errors import AuthError, ValidationError
from academia.core.security import create_access_token
from academia.repositories.usuarios import UsuarioRepository
from academia.services.credentials import verify_and_upgrade

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciales inválidas"


def login(repo: UsuarioRepository, correo: str | None, clave: str | None) -> str:
    """
    Authenticate `correo`/`clave` and return a signed session token.

    Raises ValidationError when either field is missing and AuthError for an
    unknown email, an inactive account or a wrong password. The three AuthError
    cases are indistinguishable to the caller.
    """
    if not correo or not correo.strip() or not clave:
        raise ValidationError("Correo y contraseña requeridos")

    usuario = repo.get_by_correo(correo)
    if usuario is None:
        logger.info("Login failed: unknown correo=%s", correo)
        raise AuthError(INVALID_CREDENTIALS)
    if not usuario.estado:
        logger.info("Login failed: inactive usuario_id=%s", usuario.usuario_id)
        raise AuthError(INVALID_CREDENTIALS)
    if not verify_and_upgrade(repo, usuario, clave):
        logger.info("Login failed: wrong password for usuario_id=%s", usuario.usuario_id)
        raise AuthError(INVALID_CREDENTIALS)

    return create_access_token(
        user_id=usuario.usuario_id,
        nombre=usuario.nombre_completo,
        rol=usuario.nombre_rol or "",
        correo=usuario.correo,
    )
