"""Core app configuration, database, security and errors."""

from academia.core.config import get_settings, settings
from academia.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
