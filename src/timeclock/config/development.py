from .base import *  # noqa: F401,F403
from .base import db_config_from_env, env_flag

DB_CONFIG = db_config_from_env(default_password="")

DEBUG = True

# If enabled, the app applies database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")

ARCHIVE_ON_STARTUP = env_flag("ARCHIVE_ON_STARTUP", "1")
ARCHIVE_SCHEDULER = env_flag("ARCHIVE_SCHEDULER", "1")
