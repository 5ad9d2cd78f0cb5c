"""
Run the API server:

  python -m academia

Listens on HOST:PORT from settings (default 0.0.0.0:3000).
"""

import logging

import uvicorn

from academia.core.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logging.getLogger(__name__).info(
        "Starting Academia API on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.APP_ENV
    )
    uvicorn.run(
        "academia.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
