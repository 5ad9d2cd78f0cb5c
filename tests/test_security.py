"""Unit tests for password hashing and session tokens (academia.core.security)."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from academia.core.config import settings
from academia.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    is_password_hash,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_verifies_and_is_salted(self) -> None:
        first = hash_password("hunter2")
        second = hash_password("hunter2")
        self.assertTrue(first.startswith("$2"))
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("hunter2", first))
        self.assertTrue(verify_password("hunter2", second))
        self.assertFalse(verify_password("hunter3", first))

    def test_verify_against_garbage_is_false(self) -> None:
        self.assertFalse(verify_password("hunter2", "$2b$not-a-real-hash"))

    def test_is_password_hash(self) -> None:
        self.assertTrue(is_password_hash(hash_password("x" * 8)))
        self.assertFalse(is_password_hash("hunter2"))
        self.assertFalse(is_password_hash(""))
        self.assertFalse(is_password_hash(None))


class TestAccessToken(unittest.TestCase):
    """Tokens carry id/nombre/rol/correo and expire after JWT_EXPIRE_MINUTES."""

    def _token(self, **overrides) -> str:
        kwargs = {"user_id": 1, "nombre": "Ana", "rol": "Administrador", "correo": "a@x.com"}
        kwargs.update(overrides)
        return create_access_token(**kwargs)

    def test_round_trip_claims(self) -> None:
        claims = decode_access_token(self._token())
        self.assertEqual(claims["id"], 1)
        self.assertEqual(claims["nombre"], "Ana")
        self.assertEqual(claims["rol"], "Administrador")
        self.assertEqual(claims["correo"], "a@x.com")
        self.assertEqual(claims["exp"] - claims["iat"], settings.JWT_EXPIRE_MINUTES * 60)

    def test_default_lifetime_is_eight_hours(self) -> None:
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 8 * 60)

    def test_token_still_valid_just_before_expiry(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=8) + timedelta(seconds=60)
        claims = decode_access_token(self._token(now=issued))
        self.assertEqual(claims["id"], 1)

    def test_token_rejected_after_expiry(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=8) - timedelta(seconds=1)
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(self._token(now=issued))

    def test_wrong_secret_rejected(self) -> None:
        forged = jwt.encode(
            {"id": 1, "nombre": "Ana", "rol": "Administrador", "correo": "a@x.com",
             "exp": datetime.now(UTC) + timedelta(hours=1)},
            "some-other-secret-of-sufficient-length-42",
            algorithm="HS256",
        )
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(forged)

    def test_missing_claim_rejected(self) -> None:
        partial = jwt.encode(
            {"id": 1, "nombre": "Ana", "exp": datetime.now(UTC) + timedelta(hours=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.MissingRequiredClaimError):
            decode_access_token(partial)

    def test_garbage_rejected(self) -> None:
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token("not.a.token")


if __name__ == "__main__":
    unittest.main()
