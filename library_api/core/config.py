import os

from dotenv import load_dotenv


PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def load_env(dotenv_path: str | None = None):
    """Load `.env` from the project root into the environment if present.

    Variables already set in the environment are left untouched.
    """
    path = dotenv_path or os.path.join(PROJECT_ROOT, ".env")
    if os.path.exists(path):
        load_dotenv(path, override=False)


def get_settings():
    load_env()
    return {
        "environment": os.getenv("ENVIRONMENT", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    }
