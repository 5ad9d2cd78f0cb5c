"""
Stored-credential handling: tell legacy plaintext passwords from bcrypt hashes,
verify a submitted password against either, and upgrade plaintext to a hash
on the first successful match.
"""

import hmac
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from academia.core.errors import ValidationError
from academia.core.security import hash_password, is_password_hash, verify_password

if TYPE_CHECKING:
    from academia.models.usuario import Usuario
    from academia.repositories.usuarios import UsuarioRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlaintextCredential:
    """Legacy password stored as-is."""

    value: str


@dataclass(frozen=True, slots=True)
class HashedCredential:
    """Password stored as a salted bcrypt hash."""

    value: str


StoredCredential = PlaintextCredential | HashedCredential


def parse_stored_credential(stored: str) -> StoredCredential:
    """Classify a stored password value by its hash prefix."""
    if is_password_hash(stored):
        return HashedCredential(stored)
    return PlaintextCredential(stored or "")


def credential_matches(submitted: str, credential: StoredCredential) -> bool:
    """Compare a submitted password with a stored credential without side effects."""
    if isinstance(credential, HashedCredential):
        return verify_password(submitted, credential.value)
    return hmac.compare_digest(submitted.encode("utf-8"), credential.value.encode("utf-8"))


def verify_and_upgrade(
    repo: "UsuarioRepository",
    usuario: "Usuario",
    submitted: str | None,
) -> bool:
    """
    Return True if `submitted` matches the account's stored password.

    When the stored value is legacy plaintext and matches, it is replaced by a
    fresh bcrypt hash of the same password before returning. Hashed values are
    never rewritten and a mismatch never touches storage.
    """
    if not submitted:
        raise ValidationError("Contraseña requerida")

    credential = parse_stored_credential(usuario.contrasena)
    if not credential_matches(submitted, credential):
        return False

    if isinstance(credential, PlaintextCredential):
        migrated = repo.replace_plaintext_password(
            usuario.usuario_id,
            expected=credential.value,
            new_hash=hash_password(submitted),
        )
        if migrated:
            logger.info("Migrated legacy plaintext password for usuario_id=%s", usuario.usuario_id)
        else:
            # Another request already changed the stored value; the match above still stands.
            logger.info(
                "Skipped password migration for usuario_id=%s: stored value changed concurrently",
                usuario.usuario_id,
            )
    return True


def change_password(
    repo: "UsuarioRepository",
    usuario: "Usuario",
    actual: str,
    nueva: str,
) -> None:
    """Replace the account's password after checking the current one. Raises ValidationError on mismatch."""
    if not credential_matches(actual, parse_stored_credential(usuario.contrasena)):
        raise ValidationError("La contraseña actual no es correcta")
    repo.set_password_hash(usuario, hash_password(nueva))
    logger.info("Password changed for usuario_id=%s", usuario.usuario_id)


def migrate_legacy_passwords(repo: "UsuarioRepository") -> int:
    """
    Hash every remaining plaintext password in one pass; return how many rows changed.

    Uses the same compare-and-swap as login, so it is safe to run while the API
    is serving traffic and idempotent when run repeatedly.
    """
    migrated = 0
    # Plain (id, value) pairs: each swap commits, and a reloaded row could already hold a hash.
    for usuario_id, plaintext in repo.list_legacy_plaintext():
        if not plaintext:
            logger.warning("usuario_id=%s has an empty password; left unchanged", usuario_id)
            continue
        if repo.replace_plaintext_password(
            usuario_id,
            expected=plaintext,
            new_hash=hash_password(plaintext),
        ):
            migrated += 1
    return migrated
