"""Test environment: must be set before academia settings are first imported."""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ["JWT_SECRET"] = "test-secret-not-for-production-0123456789"
# Lowest bcrypt cost keeps hashing fast in tests.
os.environ["BCRYPT_ROUNDS"] = "4"
