import os

from ..core.constants import DEFAULT_ARCHIVE_POLL_SECONDS, DEFAULT_PORT
from ..database.connection import DBConfig


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))


def db_config_from_env(*, default_password: str = "", default_database: str = "timeclock") -> dict:
    """DATABASE_URL wins; otherwise DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME."""
    url = os.getenv("DATABASE_URL")
    if url:
        return DBConfig.from_url(url).as_dict()

    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", default_database),
    }


PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
PUBLIC_DIR = os.getenv("PUBLIC_DIR", "")

ARCHIVE_POLL_SECONDS = float(os.getenv("ARCHIVE_POLL_SECONDS", str(DEFAULT_ARCHIVE_POLL_SECONDS)))
ARCHIVE_SNAPSHOT_MONTHLY = env_flag("ARCHIVE_SNAPSHOT_MONTHLY", "1")
