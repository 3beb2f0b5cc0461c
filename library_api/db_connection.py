import logging
import os
import urllib.parse

from sqlalchemy import create_engine

from .core.config import PROJECT_ROOT, get_settings

logger = logging.getLogger(__name__)


def build_database_url(settings: dict | None = None) -> str:
    """Return the SQLAlchemy URL for the configured database.

    Resolution order:
      1. `DATABASE_URL` environment variable (recommended for production)
      2. Individual env vars: `DB_USER`, `DB_PASSWORD`, `DB_HOST`, `DB_PORT`, `DB_NAME`
      3. Fallback to local SQLite file `data/library.db` (development convenience)
    """
    settings = settings or get_settings()

    database_url = settings.get("database_url")
    if database_url:
        return database_url

    user = os.environ.get("DB_USER")
    password = os.environ.get("DB_PASSWORD")
    host = os.environ.get("DB_HOST")
    port = os.environ.get("DB_PORT")
    dbname = os.environ.get("DB_NAME")

    if user and dbname and host:
        pwd = urllib.parse.quote_plus(password) if password else ""
        port_part = f":{port}" if port else ""
        return f"mysql+pymysql://{user}:{pwd}@{host}{port_part}/{dbname}"

    db_dir = os.path.join(PROJECT_ROOT, "data")
    os.makedirs(db_dir, exist_ok=True)
    db_path = os.path.join(db_dir, "library.db")
    logger.warning(
        "DATABASE_URL not set and DB env vars not found, falling back to local sqlite at: %s", db_path
    )
    return f"sqlite:///{db_path}"


def get_engine(settings: dict | None = None):
    """Return a SQLAlchemy Engine for the configured database."""
    return create_engine(build_database_url(settings))
