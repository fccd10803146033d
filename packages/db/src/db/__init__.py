# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .config import DatabaseSettings, db_settings, derive_asyncpg_url
from .database import Base, DatabaseService, get_db_service
from .models import Feedback

__all__ = [
    "Base",
    "DatabaseService",
    "DatabaseSettings",
    "db_settings",
    "derive_asyncpg_url",
    "get_db_service",
    "__version__",
    # Models
    "Feedback",
]
