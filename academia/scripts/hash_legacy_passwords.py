"""
Hash every account password still stored as plaintext. Run once after deploy, or from cron:

  python -m academia.scripts.hash_legacy_passwords

Accounts are otherwise migrated one by one on their next successful login.
"""

import logging
import sys

from academia.core.database import session_scope
from academia.repositories.usuarios import UsuarioRepository
from academia.services.credentials import migrate_legacy_passwords

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run the batch migration; exit code 1 on failure."""
    try:
        with session_scope() as db:
            migrated = migrate_legacy_passwords(UsuarioRepository(db))
    except Exception as e:
        logger.exception("Legacy password migration failed: %s", e)
        return 1
    logger.info("Legacy password migration completed: migrated=%s", migrated)
    return 0


if __name__ == "__main__":
    sys.exit(main())
