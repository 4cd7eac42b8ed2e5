from app.core.config import settings, get_settings
from app.core.database import Base, Database, get_db

__all__ = [
    "settings",
    "get_settings",
    "Base",
    "Database",
    "get_db",
]
